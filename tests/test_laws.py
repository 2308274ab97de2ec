"""Tests for law checks."""

from itertools import count

import pytest

from ctfp import (
    LawViolation,
    Trace,
    check_associativity,
    check_laws,
    check_left_identity,
    check_right_identity,
    check_unit_collapse,
)
from ctfp.combinators import LawReport, LawResult
from fakes import Ticker, double, explode, inc, square, to_str


def test_left_identity_holds() -> None:
    result = check_left_identity(inc, range(10))
    assert result.holds
    assert result.law == "left identity"
    assert result.subject == "inc"
    assert result.checked == 10


def test_right_identity_holds() -> None:
    result = check_right_identity(to_str, range(10))
    assert result.holds
    assert result.law == "right identity"


def test_associativity_holds() -> None:
    result = check_associativity(inc, double, square, range(-10, 10))
    assert result.holds
    assert result.subject == "inc, double, square"
    assert result.checked == 20


def test_unit_collapse_holds() -> None:
    result = check_unit_collapse([0, "a", None, [1], {"k": 1}, object()])
    assert result.holds
    assert result.checked == 6


def test_impure_function_breaks_identity() -> None:
    """Two calls of an impure function disagree, so the law check fails."""
    result = check_left_identity(Ticker(), [5, 6, 7])
    assert not result.holds
    assert result.checked == 1
    assert result.counterexample == 5
    assert result.left != result.right


def test_fresh_objects_break_identity_under_equality() -> None:
    result = check_right_identity(lambda _: object(), [1])
    assert not result.holds


def test_custom_equality() -> None:
    result = check_left_identity(inc, [1, 2], eq=lambda a, b: False)
    assert not result.holds
    assert result.counterexample == 1


def test_exceptions_from_functions_propagate() -> None:
    with pytest.raises(ValueError, match="boom"):
        check_left_identity(explode, [1])


def test_empty_samples_hold_vacuously() -> None:
    result = check_associativity(inc, double, square, [])
    assert result.holds
    assert result.checked == 0


def test_samples_are_capped_by_settings(monkeypatch) -> None:
    monkeypatch.setenv("CTFP_LAW_SAMPLES", "3")
    result = check_left_identity(inc, count())
    assert result.checked == 3


class TestCheckLaws:
    def test_report_for_lawful_functions(self):
        report = check_laws(inc, double, square, range(10))
        assert isinstance(report, LawReport)
        assert report.holds
        assert [r.law for r in report.results] == [
            "left identity",
            "right identity",
            "associativity",
            "unit collapse",
        ]
        report.raise_for_violation()

    def test_all_laws_see_the_same_inputs(self):
        report = check_laws(inc, double, square, iter(range(4)))
        assert [r.checked for r in report.results] == [4, 4, 4, 4]

    def test_violation_is_raised(self):
        report = check_laws(Ticker(), double, square, [1, 2])
        assert not report.holds
        assert report.violations[0].law == "left identity"
        with pytest.raises(LawViolation, match="left identity law violated") as excinfo:
            report.raise_for_violation()
        assert excinfo.value.result is report.violations[0]


def test_law_result_constructors() -> None:
    ok = LawResult.success("associativity", "f, g, h", 3)
    assert ok.holds and ok.counterexample is None

    bad = LawResult.failure("left identity", "f", 1, 0, 1, 2)
    assert not bad.holds
    assert (bad.counterexample, bad.left, bad.right) == (0, 1, 2)


def test_law_checks_are_traced() -> None:
    trace = Trace()
    check_left_identity(inc, [1, 2], trace=trace)

    assert [e.action for e in trace.get_events()] == ["law_begin", "sample", "sample", "law_end"]
    begin = trace.find("law_begin")[0]
    assert all(e.parent_id == begin.id for e in trace.get_events()[1:])
    assert trace.find("law_end", law="left identity")[0].info["holds"] is True
    assert [e.info["input"] for e in trace.find("sample")] == [1, 2]
