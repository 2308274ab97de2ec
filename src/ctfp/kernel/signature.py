"""Composition-time type checking for unary callables.

Python has no static guarantee that the output of one function fits the
input of the next, so compose() inspects annotations up front and rejects
pairs that provably cannot work together. Anything that cannot be decided
(missing annotations, Any, type variables, special forms) is accepted and
left to the call site.
"""

from __future__ import annotations

import inspect
import logging
import types
import typing
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, Union, get_args, get_origin, runtime_checkable

from ctfp.errors import CompositionTypeError

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

# PEP 484 numeric tower shortcut: int is accepted where float or complex is expected
_PROMOTIONS: dict[type, tuple[type, ...]] = {
    int: (float, complex),
    float: (complex,),
}


@runtime_checkable
class Typed(Protocol):
    """Anything that knows its own input and output types."""

    @property
    def domain(self) -> Any: ...

    @property
    def codomain(self) -> Any: ...


def describe(fn: Any) -> str:
    """Human-readable name for a callable."""
    if isinstance(fn, Typed) and not isinstance(fn, type):
        return str(fn)
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def _signature(fn: Callable[..., Any]) -> inspect.Signature | None:
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without a text signature
        return None


def _hints(fn: Callable[..., Any]) -> dict[str, Any]:
    target: Any = inspect.unwrap(fn)
    if not (inspect.isfunction(target) or inspect.ismethod(target)):
        target = getattr(type(target), "__call__", None)
    if target is None:
        return {}
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError):
        # unresolvable forward references or objects without annotations
        return {}


def domain_of(fn: Callable[..., Any]) -> Any:
    """Return the annotated type of fn's first positional parameter, or None."""
    fn = inspect.unwrap(fn)
    if isinstance(fn, type):
        return None
    if isinstance(fn, Typed):
        return fn.domain
    sig = _signature(fn)
    if sig is None:
        return None
    params = [
        p for p in sig.parameters.values()
        if p.kind in _POSITIONAL or p.kind is inspect.Parameter.VAR_POSITIONAL
    ]
    if not params:
        return None
    return _hints(fn).get(params[0].name)


def codomain_of(fn: Callable[..., Any]) -> Any:
    """Return the annotated return type of fn, or None.

    A class used as a function returns its own instances.
    """
    fn = inspect.unwrap(fn)
    if isinstance(fn, type):
        return fn
    if isinstance(fn, Typed):
        return fn.codomain
    return _hints(fn).get("return")


def arity_problem(fn: Callable[..., Any]) -> str | None:
    """Describe why fn cannot be called with exactly one argument, or None."""
    if not callable(fn):
        return f"{fn!r} is not callable"
    if isinstance(inspect.unwrap(fn), Typed) and not isinstance(fn, type):
        return None
    sig = _signature(fn)
    if sig is None:
        return None
    params = list(sig.parameters.values())
    name = describe(fn)
    required_kw = [
        p.name for p in params
        if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is p.empty
    ]
    if required_kw:
        return f"{name} requires keyword arguments {', '.join(required_kw)}"
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return None
    positional = [p for p in params if p.kind in _POSITIONAL]
    if not positional:
        return f"{name} takes no positional argument"
    required = [p for p in positional if p.default is p.empty]
    if len(required) > 1:
        return f"{name} requires {len(required)} positional arguments, expected 1"
    return None


def check_arity(fn: Callable[..., Any]) -> None:
    """Raise CompositionTypeError if fn is provably not a unary callable."""
    problem = arity_problem(fn)
    if problem is not None:
        raise CompositionTypeError(problem, first=fn)


def _is_unknown(tp: Any) -> bool:
    return tp is None or tp is Any or isinstance(tp, TypeVar)


def _is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def is_compatible(produced: Any, expected: Any) -> bool:
    """Return True when `produced` is a subtype of `expected`, allowing numeric promotion.

    Unknown annotations are compatible with everything.
    """
    if _is_unknown(produced) or _is_unknown(expected):
        return True
    if _is_union(produced):
        return all(is_compatible(member, expected) for member in get_args(produced))
    if _is_union(expected):
        return any(is_compatible(produced, member) for member in get_args(expected))

    produced_cls = get_origin(produced) or produced
    expected_cls = get_origin(expected) or expected
    if not (isinstance(produced_cls, type) and isinstance(expected_cls, type)):
        return True
    try:
        if issubclass(produced_cls, expected_cls):
            return True
    except TypeError:
        # non runtime-checkable protocols and similar
        return True
    return any(
        issubclass(produced_cls, source) and expected_cls in targets
        for source, targets in _PROMOTIONS.items()
    )


def check_composable(f: Callable[..., Any], g: Callable[..., Any]) -> None:
    """Raise CompositionTypeError unless `f then g` can be well typed."""
    for role, fn in (("first", f), ("second", g)):
        problem = arity_problem(fn)
        if problem is not None:
            logger.debug("rejecting composition: %s operand: %s", role, problem)
            raise CompositionTypeError(f"{role} operand: {problem}", first=f, second=g)

    produced = codomain_of(f)
    expected = domain_of(g)
    if not is_compatible(produced, expected):
        reason = (
            f"cannot compose {describe(f)} then {describe(g)}: "
            f"{_type_name(produced)} is not {_type_name(expected)}"
        )
        logger.debug("rejecting composition: %s", reason)
        raise CompositionTypeError(reason, first=f, second=g)
