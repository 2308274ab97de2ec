import pytest

from ctfp import (
    CompositionTypeError,
    Morphism,
    Trace,
    after,
    compose,
    constant,
    lift,
    memoize,
    pipe,
    traced,
)
from fakes import CallCounter, add, double, explode, inc, square, to_str


class TestLift:
    def test_lift_wraps_callable(self):
        arrow = lift(inc)
        assert isinstance(arrow, Morphism)
        assert arrow(1) == 2
        assert str(arrow) == "inc"

    def test_lift_is_idempotent(self):
        arrow = lift(inc)
        assert lift(arrow) is arrow

    def test_lift_with_name(self):
        assert str(lift(inc, name="increment")) == "increment"

    def test_lift_rejects_non_unary(self):
        with pytest.raises(CompositionTypeError):
            lift(add)


class TestPipe:
    def test_empty_pipe_is_identity(self):
        value = object()
        assert pipe()(value) is value

    def test_single_function(self):
        arrow = pipe(inc)
        assert isinstance(arrow, Morphism)
        assert arrow(1) == 2

    def test_left_to_right(self):
        assert pipe(inc, double, square)(1) == 16
        assert pipe(square, double, inc)(1) == 3

    def test_pipe_is_left_nested_compose(self):
        assert pipe(inc, double, square) == compose(compose(inc, double), square)

    def test_pipe_checks_types(self):
        with pytest.raises(CompositionTypeError):
            pipe(inc, to_str, double)


def test_after_is_mathematical_order() -> None:
    assert after(double, inc)(1) == 4
    assert after(inc, double)(1) == 3


def test_constant_ignores_input() -> None:
    seven = constant(7)
    assert seven("x") == 7
    assert seven(None) == 7
    assert str(seven) == "constant(7)"


class TestMemoize:
    def test_runs_once_per_argument(self):
        counter = CallCounter(offset=1)
        cached = memoize(counter)
        assert cached(2) == 3
        assert cached(2) == 3
        assert cached(5) == 6
        assert counter.calls == [2, 5]

    def test_memoized_composite(self):
        first = CallCounter(offset=1)
        cached = memoize(compose(first, double))
        assert cached(1) == 4
        assert cached(1) == 4
        assert first.calls == [1]

    def test_keeps_types(self):
        cached = memoize(to_str)
        assert cached.domain is int
        assert cached.codomain is str

    def test_unhashable_argument(self):
        cached = memoize(lambda xs: len(xs))
        with pytest.raises(TypeError):
            cached([1, 2])


class TestTraced:
    def test_records_begin_and_end(self):
        trace = Trace()
        arrow = traced(inc, trace)

        assert arrow(1) == 2
        events = trace.get_events()
        assert [e.action for e in events] == ["call_begin", "call_end"]
        assert events[0].info == {"arrow": "inc"}
        assert events[1].parent_id == events[0].id
        assert events[1].duration_ms is not None

    def test_nested_calls_form_a_tree(self):
        trace = Trace()
        pipeline = traced(
            compose(traced(inc, trace), traced(double, trace)),
            trace,
            name="pipeline",
        )

        assert pipeline(1) == 4
        assert trace.as_tree() == {None: [0], 0: [1, 3, 5], 1: [2], 3: [4]}
        assert [e.info["arrow"] for e in trace.find("call_begin")] == ["pipeline", "inc", "double"]

    def test_error_is_recorded_and_reraised(self):
        trace = Trace()
        with pytest.raises(ValueError, match="boom: 1"):
            traced(explode, trace)(1)

        errors = trace.find("call_error")
        assert len(errors) == 1
        assert errors[0].info["error"] == "boom: 1"
        assert trace.find("call_end") == []
        # the stack unwound
        assert trace.get_events()[trace.record("after")].parent_id is None

    def test_disabled_trace_records_nothing(self):
        trace = Trace(enabled=False)
        assert traced(inc, trace)(1) == 2
        assert len(trace) == 0

    def test_traced_keeps_types(self):
        arrow = traced(to_str, Trace())
        assert arrow.domain is int
        assert arrow.codomain is str
        with pytest.raises(CompositionTypeError):
            compose(arrow, inc)
