from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, eq=False)
class DyadicNumber:
    numerator: int
    denominator: int = 1  # always a power of two

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DyadicNumber):
            return NotImplemented
        return compare_dyadic(self, other) == 0

    def __hash__(self) -> int:
        canonical = simplify_dyadic(self)
        return hash((canonical.numerator, canonical.denominator))

    def __add__(self, other: "DyadicNumber") -> "DyadicNumber":
        return add_dyadic(self, other)

    def __neg__(self) -> "DyadicNumber":
        return negate(self)

    def __lt__(self, other: "DyadicNumber") -> bool:
        return compare_dyadic(self, other) < 0

    def __float__(self) -> float:
        return to_float(self)

    def __str__(self) -> str:
        return format_dyadic(self)

    @classmethod
    def unit(cls, sign: int, exponent: int) -> "DyadicNumber":
        """``sign / 2**exponent``."""
        return cls(sign, 1 << exponent)

    def sign(self) -> int:
        return (self.numerator > 0) - (self.numerator < 0)


ZERO = DyadicNumber(0, 1)


def _shift(d: DyadicNumber, denominator: int) -> int:
    return d.numerator << (denominator.bit_length() - d.denominator.bit_length())


def simplify_dyadic(d: DyadicNumber) -> DyadicNumber:
    if d.numerator == 0:
        return ZERO
    num, den = d.numerator, d.denominator
    while num % 2 == 0 and den > 1:
        num //= 2
        den //= 2
    return DyadicNumber(num, den)


def compare_dyadic(a: DyadicNumber, b: DyadicNumber) -> int:
    common = max(a.denominator, b.denominator)
    a_num = _shift(a, common)
    b_num = _shift(b, common)
    if a_num > b_num:
        return 1
    if a_num < b_num:
        return -1
    return 0


def add_dyadic(a: DyadicNumber, b: DyadicNumber) -> DyadicNumber:
    common = max(a.denominator, b.denominator)
    return simplify_dyadic(DyadicNumber(_shift(a, common) + _shift(b, common), common))


def negate(d: DyadicNumber) -> DyadicNumber:
    return DyadicNumber(-d.numerator, d.denominator)


def absolute(d: DyadicNumber) -> DyadicNumber:
    return DyadicNumber(abs(d.numerator), d.denominator)


def to_float(d: DyadicNumber) -> float:
    return d.numerator / d.denominator


def format_dyadic(d: DyadicNumber) -> str:
    d = simplify_dyadic(d)
    if d.numerator == 0:
        return "0"
    if d.denominator == 1:
        return str(d.numerator)
    return f"{d.numerator}/{d.denominator}"


def format_dyadic_mixed(d: DyadicNumber) -> str:
    """Mixed-number form for display, e.g. ``-1 3/4``."""
    d = simplify_dyadic(d)
    if d.denominator == 1:
        return format_dyadic(d)
    whole, remainder = divmod(abs(d.numerator), d.denominator)
    prefix = "-" if d.numerator < 0 else ""
    if whole == 0:
        return f"{prefix}{remainder}/{d.denominator}"
    return f"{prefix}{whole} {remainder}/{d.denominator}"
