"""
Checking the category laws on sample inputs, with a trace of what ran.

Pure functions satisfy identity and associativity; an impure one does not.
"""

import logging
from itertools import count

from ctfp import LawViolation, Trace, check_laws, configure_logging, traced


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def square(x: int) -> int:
    return x * x


class Ticker:
    def __init__(self) -> None:
        self.ticks = 0

    def __call__(self, x: int) -> int:
        self.ticks += 1
        return x + self.ticks


if __name__ == "__main__":
    logging.basicConfig(format="%(name)s %(levelname)s %(message)s")
    configure_logging("DEBUG")

    report = check_laws(inc, double, square, count())
    for result in report.results:
        print(f"{result.law:<16} holds={result.holds} checked={result.checked}")

    try:
        check_laws(Ticker(), double, square, range(3)).raise_for_violation()
    except LawViolation as exc:
        print(f"impure function: {exc}")

    trace = Trace()
    pipeline = traced(traced(inc, trace) >> traced(double, trace), trace, name="pipeline")
    print(f"pipeline(3) -> {pipeline(3)}")
    for ev in trace.get_events():
        print(f"  #{ev.id} parent={ev.parent_id} {ev.action} {ev.info}")
    print(trace.as_tree())
