"""Remainder-preserving allocation of an integer amount of minor units.

Both algorithms hand the indivisible remainder to the earliest shares, one
minor unit each, so the shares always sum exactly to the original amount.
"""

from __future__ import annotations

from collections.abc import Sequence

from suite_money.domain.monetary.errors import InvalidAllocationError


def allocate_evenly(amount: int, count: int) -> list[int]:
    """Split $amount into $count shares that differ by at most one minor unit.

    The first `amount % count` shares get `amount // count + 1`, the rest get
    `amount // count`. Floor semantics keep this true for negative amounts.

    Args:
        amount: Amount in minor units.
        count: Number of shares, must be > 0.

    Returns:
        list[int]: $count shares summing to $amount.

    Raises:
        InvalidAllocationError: If $count is not a positive int.

    Examples:
        >>> allocate_evenly(5, 2)
        [3, 2]
        >>> allocate_evenly(8, 3)
        [3, 3, 2]
    """
    # Raise: count must be a positive int
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidAllocationError(count, "share count must be an int")
    if count <= 0:
        raise InvalidAllocationError(count, "share count must be > 0")

    low, remainder = divmod(amount, count)
    return [low + 1] * remainder + [low] * (count - remainder)


def allocate_by_ratios(amount: int, ratios: Sequence[int]) -> list[int]:
    """Split $amount proportionally to $ratios.

    Each share starts as `amount * ratio // total`; the leftover, which is always
    smaller than `len(ratios)`, is handed out one minor unit per share starting
    at index 0.

    Args:
        amount: Amount in minor units.
        ratios: Non-negative int weights with a positive sum.

    Returns:
        list[int]: One share per ratio, summing to $amount.

    Raises:
        InvalidAllocationError: If $ratios is empty, holds a non-int or negative value, or sums to 0.

    Examples:
        >>> allocate_by_ratios(5, [3, 7])
        [2, 3]
        >>> allocate_by_ratios(10000, [1, 1, 1])
        [3334, 3333, 3333]
    """
    ratios = list(ratios)

    # Raise: there must be something to allocate to
    if not ratios:
        raise InvalidAllocationError(ratios, "ratios must not be empty")

    for ratio in ratios:
        if isinstance(ratio, bool) or not isinstance(ratio, int):
            raise InvalidAllocationError(ratios, f"ratio {ratio!r} is not an int")
        if ratio < 0:
            raise InvalidAllocationError(ratios, f"ratio {ratio} is negative")

    total = sum(ratios)

    # Raise: a zero total would divide by zero
    if total <= 0:
        raise InvalidAllocationError(ratios, "ratios must sum to a value > 0")

    shares = [amount * ratio // total for ratio in ratios]
    remainder = amount - sum(shares)
    for i in range(remainder):
        shares[i] += 1
    return shares
