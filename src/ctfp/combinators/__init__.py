"""Combinators - arrow builders and law checks on top of the kernel."""

from ctfp.combinators.laws import (
    check_associativity,
    check_laws,
    check_left_identity,
    check_right_identity,
    check_unit_collapse,
    draw_samples,
)
from ctfp.combinators.ops import after, constant, lift, memoize, pipe, traced
from ctfp.combinators.types import LawReport, LawResult

__all__ = [
    # Ops
    "lift",
    "pipe",
    "after",
    "constant",
    "memoize",
    "traced",
    # Laws
    "check_left_identity",
    "check_right_identity",
    "check_associativity",
    "check_unit_collapse",
    "check_laws",
    "draw_samples",
    "LawResult",
    "LawReport",
]
