"""Error types for composition and law checking."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ctfp.combinators.types import LawResult


class CompositionTypeError(TypeError):
    """Error raised when two functions cannot be composed.

    Raised by compose() at composition time, never at call time.
    Keeps both operands for debugging.
    """

    def __init__(self, reason: str, first: Any = None, second: Any = None) -> None:
        self.reason = reason
        self.first = first
        self.second = second
        super().__init__(reason)

    def __repr__(self) -> str:
        return f"CompositionTypeError({self.reason!r}, first={self.first!r}, second={self.second!r})"


class LawViolation(AssertionError):
    """Error raised when a checked law does not hold."""

    def __init__(self, result: LawResult) -> None:
        self.result = result
        super().__init__(
            f"{result.law} law violated by {result.subject or '<anonymous>'} "
            f"for input {result.counterexample!r}: "
            f"{result.left!r} != {result.right!r}"
        )
