"""Identity and composition - the two things every category must provide."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ctfp.config import get_composition_settings
from ctfp.errors import CompositionTypeError
from ctfp.kernel.signature import check_composable, codomain_of, describe, domain_of

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
T = TypeVar("T")


def identity(x: T) -> T:
    """Return x unchanged.

    Identity is the unit of composition: composing any function with it,
    on either side, gives back a function that behaves exactly like the
    original. It asks nothing of T; the very same object is returned.

    Example:
        >>> identity(1)
        1
        >>> identity("OK")
        'OK'
        >>> compose(identity, len)("abc") == len("abc")
        True
    """
    return x


id = identity  # noqa: A001


class Arrow(ABC, Generic[A, B]):
    """A unary callable that composes with other callables.

    `f.then(g)` and `f >> g` apply f first and g second.
    `g.after(f)` and `g << f` read the other way round, as in `g . f`.
    Plain functions compose with arrows from either side.
    """

    @abstractmethod
    def __call__(self, x: A) -> B:
        ...

    @property
    @abstractmethod
    def domain(self) -> Any:
        """Annotated input type, or None when unknown."""

    @property
    @abstractmethod
    def codomain(self) -> Any:
        """Annotated output type, or None when unknown."""

    def then(self, g: Callable[[B], C]) -> Composite[A, C]:
        return compose(self, g)

    def after(self, f: Callable[[D], A]) -> Composite[D, B]:
        return compose(f, self)

    def __rshift__(self, g: Callable[[B], C]) -> Composite[A, C]:
        return self.then(g)

    def __rrshift__(self, f: Callable[[D], A]) -> Composite[D, B]:
        return compose(f, self)

    def __lshift__(self, f: Callable[[D], A]) -> Composite[D, B]:
        return self.after(f)

    def __rlshift__(self, g: Callable[[B], C]) -> Composite[A, C]:
        return compose(self, g)


@dataclass(frozen=True)
class Morphism(Arrow[A, B]):
    """A plain callable lifted into an Arrow.

    Attributes:
        fn: The wrapped unary callable.
        name: Optional display name; defaults to the callable's own name.
    """

    fn: Callable[[A], B]
    name: str | None = None

    def __call__(self, x: A) -> B:
        return self.fn(x)

    @property
    def domain(self) -> Any:
        return domain_of(self.fn)

    @property
    def codomain(self) -> Any:
        return codomain_of(self.fn)

    def __str__(self) -> str:
        return self.name or describe(self.fn)


@dataclass(frozen=True)
class Composite(Arrow[A, C]):
    """The function `first then second`.

    Holds both operands for as long as it is alive and re-runs both on
    every call. Nothing is cached between calls.
    """

    first: Callable[[A], Any]
    second: Callable[[Any], C]

    def __call__(self, x: A) -> C:
        return self.second(self.first(x))

    @property
    def domain(self) -> Any:
        return domain_of(self.first)

    @property
    def codomain(self) -> Any:
        return codomain_of(self.second)

    def __str__(self) -> str:
        return f"{describe(self.first)} then {describe(self.second)}"


def compose(
    f: Callable[[A], B],
    g: Callable[[B], C],
    *,
    check_types: bool | None = None,
) -> Composite[A, C]:
    """Compose two unary functions: f first, then g.

    The result h satisfies h(a) == g(f(a)) for every a. In mathematical
    notation this is `g . f`, read "g after f". Composition is associative,
    so compose(compose(f, g), h) and compose(f, compose(g, h)) agree on
    every input.

    Nothing runs at composition time. Exceptions raised by f or g when h is
    called propagate unchanged.

    Args:
        f: The function applied first.
        g: The function applied to f's result.
        check_types: Verify arity and annotations now. Defaults to
            Settings.check_types.

    Returns:
        A Composite wrapping both functions.

    Raises:
        CompositionTypeError: If an operand is not callable, is not unary,
            or f's return annotation provably does not fit g's input.

    Example:
        >>> def inc(x: int) -> int:
        ...     return x + 1
        >>> def double(x: int) -> int:
        ...     return x * 2
        >>> compose(identity, inc)(1)
        2
        >>> compose(inc, double)(1)
        4
        >>> compose(double, inc)(1)
        3
    """
    if check_types is None:
        check_types = get_composition_settings().check_types

    if check_types:
        check_composable(f, g)
    else:
        for role, fn in (("first", f), ("second", g)):
            if not callable(fn):
                raise CompositionTypeError(f"{role} operand: {fn!r} is not callable", first=f, second=g)

    return Composite(f, g)
