import logging

from .combinators import (
    LawReport,
    LawResult,
    after,
    check_associativity,
    check_laws,
    check_left_identity,
    check_right_identity,
    check_unit_collapse,
    constant,
    lift,
    memoize,
    pipe,
    traced,
)
from .config import Settings, configure_logging, get_settings, reload_settings
from .errors import CompositionTypeError, LawViolation
from .kernel import (
    UNIT,
    Arrow,
    Composite,
    Evidence,
    Morphism,
    Trace,
    Unit,
    compose,
    id,
    identity,
    unit,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
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
    "lift",
    "pipe",
    "after",
    "constant",
    "memoize",
    # Laws
    "check_left_identity",
    "check_right_identity",
    "check_associativity",
    "check_unit_collapse",
    "check_laws",
    "LawResult",
    "LawReport",
    # Tracing
    "Evidence",
    "Trace",
    "traced",
    # Errors
    "CompositionTypeError",
    "LawViolation",
    # Config
    "Settings",
    "get_settings",
    "reload_settings",
    "configure_logging",
]
