"""Result types for law checks."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from ctfp.errors import LawViolation


class LawResult(BaseModel):
    """Outcome of checking one law over a batch of inputs.

    Attributes:
        law: Law name ("left identity", "associativity", ...)
        subject: The function(s) the law was checked for
        holds: Whether every checked input satisfied the law
        checked: Number of inputs evaluated (stops at the first failure)
        counterexample: First input on which the law failed
        left: Left-hand side value for the counterexample
        right: Right-hand side value for the counterexample
    """

    model_config = ConfigDict(frozen=True)

    law: str
    subject: str = ""
    holds: bool
    checked: int = 0
    counterexample: Any = None
    left: Any = None
    right: Any = None

    @classmethod
    def success(cls, law: str, subject: str, checked: int) -> Self:
        return cls(law=law, subject=subject, holds=True, checked=checked)

    @classmethod
    def failure(cls, law: str, subject: str, checked: int, counterexample: Any, left: Any, right: Any) -> Self:
        return cls(
            law=law,
            subject=subject,
            holds=False,
            checked=checked,
            counterexample=counterexample,
            left=left,
            right=right,
        )


class LawReport(BaseModel):
    """All law results for one set of functions."""

    model_config = ConfigDict(frozen=True)

    results: tuple[LawResult, ...] = ()

    @property
    def holds(self) -> bool:
        return all(r.holds for r in self.results)

    @property
    def violations(self) -> list[LawResult]:
        return [r for r in self.results if not r.holds]

    def raise_for_violation(self) -> None:
        """Raise LawViolation for the first failing law, if any."""
        for result in self.results:
            if not result.holds:
                raise LawViolation(result)
