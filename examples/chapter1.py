"""
Chapter one: identity and composition.

This example shows:
1. Identity returns its argument untouched
2. compose(f, g) applies f first, then g
3. Composition order matters
4. Identity is a unit on both sides of composition
"""

from ctfp import compose, id, lift


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def to_str(x: int) -> str:
    return str(x)


# =============================================================================
# Example 1: identity
# =============================================================================
def example_identity() -> None:
    print("=" * 60)
    print("Example 1: identity")
    print("=" * 60)
    print(f"id(1)    -> {id(1)!r}")
    print(f"id('OK') -> {id('OK')!r}")


# =============================================================================
# Example 2: composition and order
# =============================================================================
def example_compose() -> None:
    print("=" * 60)
    print("Example 2: composition")
    print("=" * 60)
    for h in (compose(id, inc), compose(inc, double), compose(double, inc)):
        print(f"{str(h):<20} (1) -> {h(1)}")

    pipeline = lift(inc) >> double >> to_str
    print(f"{str(pipeline):<20} (1) -> {pipeline(1)!r}")


# =============================================================================
# Example 3: identity is a unit
# =============================================================================
def example_unit_law() -> None:
    print("=" * 60)
    print("Example 3: identity on either side")
    print("=" * 60)
    for a in range(3):
        print(f"a={a}: inc={inc(a)} id.inc={compose(id, inc)(a)} inc.id={compose(inc, id)(a)}")


if __name__ == "__main__":
    example_identity()
    example_compose()
    example_unit_law()
