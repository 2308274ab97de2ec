"""Law checks for identity and composition.

A category needs two laws, and these are the only ones checked here:

1. Identity: compose(identity, f) == f == compose(f, identity)
   Identity is a two-sided unit under composition

2. Associativity: compose(compose(f, g), h) == compose(f, compose(g, h))
   How a chain of compositions is bracketed does not matter

In addition, check_unit_collapse() verifies that unit() sends every value
to the same place, which is what makes the unit type terminal.

Python cannot prove these for all inputs, so every check evaluates both
sides on sample inputs and compares them with `eq`.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterable
from itertools import islice
from typing import Any

from ctfp.combinators.ops import constant
from ctfp.combinators.types import LawReport, LawResult
from ctfp.config import get_settings
from ctfp.kernel import UNIT, Trace, compose, describe, identity, unit

logger = logging.getLogger(__name__)

Eq = Callable[[Any, Any], bool]


def draw_samples(samples: Iterable[Any]) -> list[Any]:
    """Take at most Settings.law_samples inputs; samples may be infinite."""
    return list(islice(samples, get_settings().law_samples))


def _check(
    law: str,
    subject: str,
    left: Callable[[Any], Any],
    right: Callable[[Any], Any],
    inputs: list[Any],
    eq: Eq,
    trace: Trace | None,
) -> LawResult:
    law_id = trace.record("law_begin", info={"law": law, "subject": subject}) if trace is not None else None
    if trace is not None and law_id is not None:
        trace.push(law_id)

    try:
        result = LawResult.success(law, subject, len(inputs))
        for checked, value in enumerate(inputs, start=1):
            lhs = left(value)
            rhs = right(value)
            holds = bool(eq(lhs, rhs))
            if trace is not None:
                trace.record("sample", info={"law": law, "input": value, "holds": holds})
            if not holds:
                logger.debug("%s law violated by %s for input %r: %r != %r", law, subject, value, lhs, rhs)
                result = LawResult.failure(law, subject, checked, value, lhs, rhs)
                break

        logger.debug("%s law for %s: holds=%s over %d input(s)", law, subject, result.holds, result.checked)
        if trace is not None:
            trace.record("law_end", info={"law": law, "holds": result.holds}, parent_id=law_id)
        return result
    finally:
        if trace is not None and law_id is not None:
            trace.pop()


def check_left_identity(
    f: Callable[[Any], Any],
    samples: Iterable[Any],
    *,
    eq: Eq = operator.eq,
    trace: Trace | None = None,
) -> LawResult:
    """Check compose(identity, f)(a) == f(a) on the sample inputs."""
    return _check("left identity", describe(f), compose(identity, f), f, draw_samples(samples), eq, trace)


def check_right_identity(
    f: Callable[[Any], Any],
    samples: Iterable[Any],
    *,
    eq: Eq = operator.eq,
    trace: Trace | None = None,
) -> LawResult:
    """Check compose(f, identity)(a) == f(a) on the sample inputs."""
    return _check("right identity", describe(f), compose(f, identity), f, draw_samples(samples), eq, trace)


def check_associativity(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    samples: Iterable[Any],
    *,
    eq: Eq = operator.eq,
    trace: Trace | None = None,
) -> LawResult:
    """Check compose(compose(f, g), h)(a) == compose(f, compose(g, h))(a)."""
    subject = f"{describe(f)}, {describe(g)}, {describe(h)}"
    return _check(
        "associativity",
        subject,
        compose(compose(f, g), h),
        compose(f, compose(g, h)),
        draw_samples(samples),
        eq,
        trace,
    )


def check_unit_collapse(
    samples: Iterable[Any],
    *,
    eq: Eq = operator.eq,
    trace: Trace | None = None,
) -> LawResult:
    """Check that unit() maps every sample to UNIT."""
    return _check("unit collapse", "unit", unit, constant(UNIT), draw_samples(samples), eq, trace)


def check_laws(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    samples: Iterable[Any],
    *,
    eq: Eq = operator.eq,
    trace: Trace | None = None,
) -> LawReport:
    """Check identity for f, associativity for f, g, h, and unit collapse.

    samples is drawn once so every law sees the same inputs. Identity is
    checked for f alone because g and h take f's outputs, not the samples.
    """
    inputs = draw_samples(samples)
    results = (
        check_left_identity(f, inputs, eq=eq, trace=trace),
        check_right_identity(f, inputs, eq=eq, trace=trace),
        check_associativity(f, g, h, inputs, eq=eq, trace=trace),
        check_unit_collapse(inputs, eq=eq, trace=trace),
    )
    return LawReport(results=results)
