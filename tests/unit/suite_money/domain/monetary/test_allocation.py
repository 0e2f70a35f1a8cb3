from __future__ import annotations

import pytest

from suite_money.domain.monetary.allocation import allocate_by_ratios, allocate_evenly
from suite_money.domain.monetary.currency_registry import USD
from suite_money.domain.monetary.errors import InvalidAllocationError
from suite_money.domain.monetary.money import Money


# region Allocation by count


@pytest.mark.parametrize(
    "amount, count, expected",
    [
        (5, 2, [3, 2]),
        (8, 3, [3, 3, 2]),
        (9, 3, [3, 3, 3]),
        (0, 4, [0, 0, 0, 0]),
        (1, 3, [1, 0, 0]),
        (7, 1, [7]),
        (-5, 2, [-2, -3]),
        (-1, 3, [0, 0, -1]),
    ],
)
def test_allocate_evenly_examples(amount, count, expected):
    assert allocate_evenly(amount, count) == expected


def test_allocate_evenly_is_exact_for_all_small_amounts():
    for amount in range(-60, 61):
        for count in range(1, 8):
            shares = allocate_evenly(amount, count)
            low = amount // count

            assert len(shares) == count
            assert sum(shares) == amount
            assert set(shares) <= {low, low + 1}
            assert shares.count(low + 1) == amount % count
            # high shares come first
            assert shares == sorted(shares, reverse=True)


@pytest.mark.parametrize("count", [0, -1, -10])
def test_allocate_evenly_rejects_non_positive_count(count):
    with pytest.raises(InvalidAllocationError, match="share count must be > 0"):
        allocate_evenly(100, count)


@pytest.mark.parametrize("count", [2.0, "2", True])
def test_allocate_evenly_rejects_non_int_count(count):
    with pytest.raises(InvalidAllocationError, match="share count must be an int"):
        allocate_evenly(100, count)


def test_money_allocate_rejects_zero_count():
    with pytest.raises(InvalidAllocationError):
        Money.dollars(1.00).allocate(0)


# endregion

# region Allocation by ratios


@pytest.mark.parametrize(
    "amount, ratios, expected",
    [
        (5, [3, 7], [2, 3]),
        (100, [1, 1, 1], [34, 33, 33]),
        (10000, [1, 1, 1], [3334, 3333, 3333]),
        (10, [1], [10]),
        (7, [0, 1, 1], [1, 3, 3]),
        (0, [2, 3], [0, 0]),
        (-5, [3, 7], [-1, -4]),
        (100, [70, 20, 10], [70, 20, 10]),
    ],
)
def test_allocate_by_ratios_examples(amount, ratios, expected):
    assert allocate_by_ratios(amount, ratios) == expected


def test_allocate_by_ratios_is_exact():
    ratio_sets = [[1, 2], [3, 7], [1, 1, 1], [5, 0, 3, 2], [13, 17, 19, 23], [1] * 9]
    for amount in range(-101, 102, 7):
        for ratios in ratio_sets:
            shares = allocate_by_ratios(amount, ratios)
            total = sum(ratios)
            base = [amount * ratio // total for ratio in ratios]
            remainder = amount - sum(base)

            assert sum(shares) == amount
            assert 0 <= remainder < len(ratios)
            # the leftover goes to the lowest indices, one unit each
            assert shares == [b + 1 if i < remainder else b for i, b in enumerate(base)]


@pytest.mark.parametrize(
    "ratios, message",
    [
        ([], "ratios must not be empty"),
        ([0, 0], "ratios must sum to a value > 0"),
        ([3, -1], "ratio -1 is negative"),
        ([1, 2.5], "ratio 2.5 is not an int"),
        ([1, True], "ratio True is not an int"),
    ],
)
def test_allocate_by_ratios_rejects_invalid_ratios(ratios, message):
    with pytest.raises(InvalidAllocationError, match=message):
        allocate_by_ratios(100, ratios)


def test_money_allocate_by_ratios_accepts_any_sequence():
    money = Money.from_minor_units(1000, USD)
    assert money.allocate((1, 3)) == money.allocate([1, 3]) == money.allocate(range(1, 4, 2))
    assert [share.minor_units for share in money.allocate((1, 3))] == [250, 750]


def test_invalid_allocation_error_is_value_error():
    with pytest.raises(ValueError):
        Money.dollars(0.05).allocate([0])


# endregion
