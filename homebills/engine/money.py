"""Fair penny distribution.

Floors each raw share to a whole cent, then hands the leftover cents to the
entries with the largest fractional remainders. Ties go to the lowest key so
the result never depends on input order.
"""

from decimal import Decimal, ROUND_FLOOR
from typing import Hashable, Sequence, TypeVar

K = TypeVar("K", bound=Hashable)


def distribute_pennies(total: int, raw_shares: Sequence[tuple[K, Decimal]]) -> list[tuple[K, int]]:
    """Round raw cent shares so they sum exactly to total.

    Args:
        total: Amount to partition, in cents
        raw_shares: (key, unrounded share in cents) pairs; shares are
            non-negative and sum to total within rounding

    Returns (key, cents) pairs in input order. Each amount differs from its
    raw share by less than one cent.
    """
    if not raw_shares:
        return []

    # Positional, so a repeated key keeps one entry per share
    floored: list[int] = []
    remainders: list[tuple[Decimal, K, int]] = []
    for index, (key, raw) in enumerate(raw_shares):
        raw = Decimal(raw)
        whole = int(raw.to_integral_value(ROUND_FLOOR))
        floored.append(whole)
        remainders.append((raw - whole, key, index))

    shortfall = total - sum(floored)

    # Largest remainder first, then ascending key, then position
    order = sorted(remainders, key=lambda item: (-item[0], item[1], item[2]))
    for i in range(max(shortfall, 0)):
        index = order[i % len(order)][2]
        floored[index] += 1

    return [(key, floored[index]) for index, (key, _) in enumerate(raw_shares)]
