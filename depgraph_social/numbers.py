"""A small integer value and the operations used to build graphs from it."""

from dataclasses import dataclass

from depgraph_social.models import EarlyExit

I32_RANGE = (-(2**31), 2**31 - 1)
I64_RANGE = (-(2**63), 2**63 - 1)
SECONDS_PER_DAY = 24 * 60 * 60
SPICY_LIMIT = 100


def _checked(value: int, bounds: tuple, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} value must be an integer, got {value!r}")
    low, high = bounds
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in {name}")
    return value


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass
class SomeNumber:
    """A signed 32-bit integer value."""

    value: int = 0

    def __post_init__(self) -> None:
        _checked(self.value, I32_RANGE, "i32")

    def update(self, value: int) -> None:
        """Replace the value."""
        self.value = _checked(value, I32_RANGE, "i32")


@dataclass
class AnotherNumber:
    """A signed 64-bit integer value."""

    value: int = 0

    def __post_init__(self) -> None:
        _checked(self.value, I64_RANGE, "i64")


def _i32(value: int) -> SomeNumber:
    return SomeNumber(_checked(value, I32_RANGE, "i32"))


def square(number: SomeNumber) -> SomeNumber:
    """The square of a number."""
    return _i32(number.value**2)


def multiply(a: SomeNumber, b: SomeNumber) -> SomeNumber:
    """The product of two numbers."""
    return _i32(a.value * b.value)


def add(a: SomeNumber, b: SomeNumber) -> SomeNumber:
    """The sum of two numbers."""
    return _i32(a.value + b.value)


def subtract(a: SomeNumber, b: SomeNumber) -> SomeNumber:
    """The difference ``a - b``."""
    return _i32(a.value - b.value)


def cube(number: SomeNumber) -> AnotherNumber:
    """The cube of a number, widened to 64 bits."""
    cubed = _checked(number.value**3, I32_RANGE, "i32")
    return AnotherNumber(cubed)


def check_all_is_ok(number: SomeNumber) -> SomeNumber:
    """Pass the number through, or raise :class:`EarlyExit` once it reaches 100."""
    if number.value >= SPICY_LIMIT:
        raise EarlyExit("Things are a bit too spicy!")
    return SomeNumber(number.value)


@dataclass
class StuffToBuy:
    """A purchase budget that is refreshed at most once a day after pay day."""

    amount: int = 0
    last_purchase_time: int = 0

    def check_bank_balance(self, time: int, balance: int, balance_changed: bool) -> bool:
        """Spend a tenth of a changed balance if more than a day has passed.

        Returns whether a new purchase amount was set.
        """
        if not balance_changed:
            return False
        if time - self.last_purchase_time > SECONDS_PER_DAY:
            self.last_purchase_time = time
            self.amount = _truncating_div(balance, 10)
            return True
        return False