import pytest

from depgraph_social.models import EarlyExit
from depgraph_social.numbers import (
    AnotherNumber,
    SomeNumber,
    StuffToBuy,
    add,
    check_all_is_ok,
    cube,
    multiply,
    square,
    subtract,
)


def _resolve(a, b, c, d, e):
    a_times_b = multiply(a, b)
    d_minus_c = subtract(d, c)
    d_squared = square(d)
    e_squared = square(e)
    summed = add(a_times_b, d_minus_c)
    times_e_squared = multiply(summed, e_squared)
    minus_d_squared = subtract(times_e_squared, d_squared)
    return cube(minus_d_squared)


@pytest.fixture
def inputs():
    return [SomeNumber(1), SomeNumber(2), SomeNumber(3), SomeNumber(4), SomeNumber(2)]


def test_update_input():
    number = SomeNumber(2)
    number.update(6)
    assert number.value == 6


def test_update_rejects_overflow():
    number = SomeNumber(2)
    with pytest.raises(OverflowError):
        number.update(2**31)


def test_square():
    assert square(SomeNumber(2)) == SomeNumber(4)


def test_multiply_simple_graph():
    assert multiply(SomeNumber(6), SomeNumber(7)).value == 42
    assert multiply(SomeNumber(60), SomeNumber(7)).value == 420


def test_multiply_chain():
    a, b = SomeNumber(7), SomeNumber(6)
    assert multiply(multiply(a, b), b).value == 252


def test_add_and_subtract():
    assert add(SomeNumber(3), SomeNumber(4)).value == 7
    assert subtract(SomeNumber(3), SomeNumber(4)).value == -1


def test_cube_changes_type():
    result = cube(SomeNumber(-4))
    assert result == AnotherNumber(-64)


def test_cube_overflow():
    with pytest.raises(OverflowError):
        cube(SomeNumber(2000))


def test_complex_graph(inputs):
    a, b, c, d, e = inputs
    assert _resolve(a, b, c, d, e).value == -64
    e.update(3)
    assert _resolve(a, b, c, d, e).value == 1331
    a.update(2)
    b.update(1)
    assert _resolve(a, b, c, d, e).value == 1331
    b.update(-1)
    assert _resolve(a, b, c, d, e).value == -15625


def test_reducing_more_boilerplate(inputs):
    a, b, c, d, e = inputs
    assert _resolve(a, b, c, d, e).value == -64
    e.update(3)
    assert _resolve(a, b, c, d, e).value == 1331
    c.update(10)
    b.update(6)
    assert _resolve(a, b, c, d, e).value == -4096
    a.update(3)
    assert _resolve(a, b, c, d, e).value == 778688


def test_check_all_is_ok_passes_small_values():
    assert check_all_is_ok(SomeNumber(99)).value == 99


def test_check_all_is_ok_exits_early():
    with pytest.raises(EarlyExit, match="Things are a bit too spicy!"):
        check_all_is_ok(SomeNumber(100))


def test_stuff_to_buy_ignores_unchanged_balance():
    stuff = StuffToBuy(amount=5, last_purchase_time=0)
    assert stuff.check_bank_balance(10**6, 1000, False) is False
    assert stuff == StuffToBuy(amount=5, last_purchase_time=0)


def test_stuff_to_buy_purchases_after_a_day():
    stuff = StuffToBuy(amount=0, last_purchase_time=0)
    assert stuff.check_bank_balance(86401, 1005, True) is True
    assert stuff.amount == 100
    assert stuff.last_purchase_time == 86401


def test_stuff_to_buy_waits_a_full_day():
    stuff = StuffToBuy(amount=0, last_purchase_time=100)
    assert stuff.check_bank_balance(100 + 86400, 1000, True) is False
    assert stuff.amount == 0


def test_stuff_to_buy_truncates_negative_balance():
    stuff = StuffToBuy()
    stuff.check_bank_balance(90000, -15, True)
    assert stuff.amount == -1