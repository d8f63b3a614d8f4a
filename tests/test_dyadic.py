import itertools

from hackenbush.analysis import edge_value
from hackenbush.core import (
    ZERO,
    DyadicNumber,
    EdgeColor,
    add_dyadic,
    compare_dyadic,
    format_dyadic,
    format_dyadic_mixed,
    simplify_dyadic,
)


def fields(d: DyadicNumber):
    return (d.numerator, d.denominator)


def test_simplify_reduces_to_canonical_form() -> None:
    assert fields(simplify_dyadic(DyadicNumber(4, 8))) == (1, 2)
    assert fields(simplify_dyadic(DyadicNumber(-12, 16))) == (-3, 4)
    assert fields(simplify_dyadic(DyadicNumber(6, 1))) == (6, 1)
    assert fields(simplify_dyadic(DyadicNumber(0, 16))) == (0, 1)
    assert fields(simplify_dyadic(DyadicNumber(3, 8))) == (3, 8)


def test_simplify_is_idempotent() -> None:
    for numerator in range(-20, 21):
        for exponent in range(7):
            once = simplify_dyadic(DyadicNumber(numerator, 1 << exponent))
            twice = simplify_dyadic(once)
            assert fields(once) == fields(twice)


def test_compare_uses_common_denominator() -> None:
    assert compare_dyadic(DyadicNumber(1, 2), DyadicNumber(2, 4)) == 0
    assert compare_dyadic(DyadicNumber(-1, 2), DyadicNumber(1, 4)) == -1
    assert compare_dyadic(DyadicNumber(3, 4), DyadicNumber(1, 2)) == 1
    assert compare_dyadic(DyadicNumber(5, 1), DyadicNumber(39, 8)) == 1


def test_add_simplifies_result() -> None:
    assert fields(add_dyadic(DyadicNumber(1, 2), DyadicNumber(1, 2))) == (1, 1)
    assert fields(add_dyadic(DyadicNumber(1, 4), DyadicNumber(-1, 4))) == (0, 1)
    assert fields(add_dyadic(DyadicNumber(1, 1), DyadicNumber(-1, 2))) == (1, 2)
    assert fields(add_dyadic(DyadicNumber(3, 8), DyadicNumber(1, 2))) == (7, 8)


def test_add_is_commutative_and_associative_on_edge_values() -> None:
    values = [edge_value(level, color) for level in range(1, 6) for color in (EdgeColor.RED, EdgeColor.BLUE)]
    for a, b in itertools.product(values, repeat=2):
        assert fields(add_dyadic(a, b)) == fields(add_dyadic(b, a))
    for a, b, c in itertools.product(values[:6], repeat=3):
        left = add_dyadic(add_dyadic(a, b), c)
        right = add_dyadic(a, add_dyadic(b, c))
        assert fields(left) == fields(right)


def test_operators_follow_value_semantics() -> None:
    assert DyadicNumber(1, 2) + DyadicNumber(1, 4) == DyadicNumber(3, 4)
    assert DyadicNumber(2, 4) == DyadicNumber(1, 2)
    assert hash(DyadicNumber(2, 4)) == hash(DyadicNumber(1, 2))
    assert -DyadicNumber(1, 2) < ZERO
    assert DyadicNumber(1, 8) <= DyadicNumber(1, 4)
    assert float(DyadicNumber(3, 8)) == 0.375
    assert sorted([DyadicNumber(1, 2), DyadicNumber(-1, 1), ZERO]) == [DyadicNumber(-1, 1), ZERO, DyadicNumber(1, 2)]


def test_formatting() -> None:
    assert format_dyadic(DyadicNumber(0, 4)) == "0"
    assert format_dyadic(DyadicNumber(3, 1)) == "3"
    assert format_dyadic(DyadicNumber(-3, 8)) == "-3/8"
    assert format_dyadic(DyadicNumber(2, 4)) == "1/2"
    assert str(DyadicNumber(5, 4)) == "5/4"
    assert format_dyadic_mixed(DyadicNumber(3, 2)) == "1 1/2"
    assert format_dyadic_mixed(DyadicNumber(-7, 4)) == "-1 3/4"
    assert format_dyadic_mixed(DyadicNumber(-1, 4)) == "-1/4"
    assert format_dyadic_mixed(DyadicNumber(4, 2)) == "2"
