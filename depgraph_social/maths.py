"""Integer values and the arithmetic operations that combine them."""

from dataclasses import dataclass
from typing import Protocol

I32_RANGE = (-(2**31), 2**31 - 1)
I8_RANGE = (-(2**7), 2**7 - 1)


class NumberLike(Protocol):
    """Anything carrying an integer ``value``."""

    value: int


def _checked(value: int, bounds: tuple, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} value must be an integer, got {value!r}")
    low, high = bounds
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in {name}")
    return value


@dataclass
class NumberValueI32:
    """A signed 32-bit integer value."""

    value: int = 0

    def __post_init__(self) -> None:
        _checked(self.value, I32_RANGE, "i32")

    def update(self, value: int) -> None:
        """Replace the value."""
        self.value = _checked(value, I32_RANGE, "i32")


@dataclass
class NumberValueI8:
    """A signed 8-bit integer value."""

    value: int = 0

    def __post_init__(self) -> None:
        _checked(self.value, I8_RANGE, "i8")

    def update(self, value: int) -> None:
        """Replace the value."""
        self.value = _checked(value, I8_RANGE, "i8")


def _result(value: int) -> NumberValueI32:
    return NumberValueI32(_checked(value, I32_RANGE, "i32"))


def square(number: NumberLike) -> NumberValueI32:
    """The square of a number."""
    return _result(number.value**2)


def total(*args: NumberLike) -> NumberValueI32:
    """The sum of two or more numbers."""
    if len(args) < 2:
        raise TypeError(f"total needs at least two numbers, got {len(args)}")
    return _result(sum(number.value for number in args))


def multiply(a: NumberLike, b: NumberLike) -> NumberValueI32:
    """The product of two numbers."""
    return _result(a.value * b.value)