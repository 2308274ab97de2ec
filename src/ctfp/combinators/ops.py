"""Arrow-building combinators: lift, pipe, after, constant, memoize, traced."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from ctfp.kernel import Arrow, Composite, Morphism, Trace, compose, describe, identity
from ctfp.kernel.signature import check_arity

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")


def lift(fn: Callable[[A], B], name: str | None = None) -> Morphism[A, B]:
    """Wrap a unary callable as an Arrow.

    Lifting an existing Morphism without a new name returns it unchanged.
    """
    if isinstance(fn, Morphism) and name is None:
        return fn
    check_arity(fn)
    return Morphism(fn, name=name)


def pipe(*fns: Callable[[Any], Any]) -> Arrow[Any, Any]:
    """Compose functions left to right.

    pipe() is the identity arrow, pipe(f) is lift(f), and
    pipe(f, g, h) is compose(compose(f, g), h).
    """
    if not fns:
        return Morphism(identity, name="identity")
    if len(fns) == 1:
        return lift(fns[0])
    return functools.reduce(compose, fns)  # type: ignore[return-value]


def after(g: Callable[[B], C], f: Callable[[A], B], *, check_types: bool | None = None) -> Composite[A, C]:
    """g after f, the mathematical `g . f`: the same function as compose(f, g)."""
    return compose(f, g, check_types=check_types)


def constant(value: T) -> Morphism[Any, T]:
    """Arrow that ignores its input and always returns value.

    Seen from the unit type, constant(v) is how a category names the
    element v of a type: a morphism from () into it.
    """
    def const(_x: object) -> T:
        return value

    return Morphism(const, name=f"constant({value!r})")


def memoize(fn: Callable[[A], B]) -> Morphism[A, B]:
    """Cache results of a pure function.

    Only sound for pure functions: a memoized function with side effects
    runs them once per distinct argument. Arguments must be hashable.
    """
    check_arity(fn)
    return Morphism(functools.cache(fn), name=f"memoize({describe(fn)})")


def traced(fn: Callable[[A], B], trace: Trace, name: str | None = None) -> Morphism[A, B]:
    """Arrow recording each call of fn into trace.

    Records call_begin, then call_end with duration_ms, or call_error when
    fn raises. Exceptions are re-raised unchanged. Nested traced arrows
    are recorded as children of the enclosing call.
    """
    check_arity(fn)
    label = name or describe(fn)

    def run(x: A) -> B:
        call_id = trace.record("call_begin", info={"arrow": label})
        if call_id is not None:
            trace.push(call_id)
        try:
            start_time = time.perf_counter()
            try:
                value = fn(x)
            except Exception as exc:
                trace.record(
                    "call_error",
                    info={"arrow": label, "error": str(exc)},
                    parent_id=call_id,
                )
                raise
            trace.record(
                "call_end",
                info={"arrow": label},
                parent_id=call_id,
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )
            return value
        finally:
            if call_id is not None:
                trace.pop()

    run.__wrapped__ = fn  # type: ignore[attr-defined]
    return Morphism(run, name=label)
