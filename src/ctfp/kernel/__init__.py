"""Kernel layer - identity, composition and the unit type."""

from ctfp.kernel.morphism import Arrow, Composite, Morphism, compose, id, identity
from ctfp.kernel.signature import (
    check_arity,
    check_composable,
    codomain_of,
    describe,
    domain_of,
    is_compatible,
)
from ctfp.kernel.trace import Evidence, Trace
from ctfp.kernel.unit import UNIT, Unit, unit

__all__ = [
    "identity",
    "id",
    "compose",
    "unit",
    "UNIT",
    "Unit",
    # Arrows
    "Arrow",
    "Morphism",
    "Composite",
    # Type checking
    "check_arity",
    "check_composable",
    "codomain_of",
    "domain_of",
    "describe",
    "is_compatible",
    # Tracing
    "Evidence",
    "Trace",
]
