"""In-place sort engine: selection sort and quicksort over a list of bids.

Both algorithms order bids ascending by title using Python's native ``str``
ordering (code point order) and mutate the list they are given. Neither is
stable, and the two may leave records with equal titles in different relative
orders; only the title order is guaranteed to agree.

Each function returns a :class:`~bid_sort.models.SortStats` so callers can
compare how much work each algorithm did on the same input.

Quicksort
---------
Hoare partitioning with the title of the middle element as the pivot value.
The pivot *value* is fixed before scanning; the record that held it may move
during exchanges. The returned boundary ``m`` satisfies: titles at
``[begin, m]`` are ``<= pivot`` and titles at ``(m, end]`` are ``>= pivot``;
records equal to the pivot can land on either side.

The sort itself runs off an explicit stack of pending ranges rather than
recursion, always taking the smaller sub-range next, so the stack never grows
beyond ``O(log n)`` entries regardless of input order.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from .logging_setup import get_logger
from .models import Bid, Bids, SortStats

_logger = get_logger("bid_sort.sorting")

SortKey: TypeAlias = Callable[[Bid], str]


def by_title(bid: Bid) -> str:
    return bid.title


class SortInvariantError(RuntimeError):
    """A partition scan ran past its range; this is a defect, not bad input."""


class _Tally:
    __slots__ = ("comparisons", "exchanges")

    def __init__(self) -> None:
        self.comparisons = 0
        self.exchanges = 0

    def freeze(self) -> SortStats:
        return SortStats(comparisons=self.comparisons, exchanges=self.exchanges)


def _exchange(bids: Bids, i: int, j: int, tally: _Tally) -> None:
    bids[i], bids[j] = bids[j], bids[i]
    tally.exchanges += 1


# ----------------------------------------------------------------------------
# Selection sort
# ----------------------------------------------------------------------------


def selection_sort(bids: Bids, *, key: SortKey = by_title) -> SortStats:
    """Sort ``bids`` in place by repeatedly selecting the smallest title.

    Always ``n * (n - 1) / 2`` comparisons; at most one exchange per outer
    pass, and none when the minimum is already in place. Empty and
    single-element lists return immediately.
    """

    tally = _Tally()
    size = len(bids)
    for i in range(size - 1):
        lowest = i
        for j in range(i + 1, size):
            tally.comparisons += 1
            if key(bids[j]) < key(bids[lowest]):
                lowest = j
        if lowest != i:
            _exchange(bids, i, lowest, tally)

    stats = tally.freeze()
    _logger.debug("selection_sort: n=%d %s", size, stats)
    return stats


# ----------------------------------------------------------------------------
# Quicksort
# ----------------------------------------------------------------------------


def _check_range(bids: Bids, begin: int, end: int) -> None:
    if not 0 <= begin <= end < len(bids):
        raise IndexError(
            f"range [{begin}, {end}] is outside the list bounds [0, {len(bids) - 1}]"
        )


def _partition(bids: Bids, begin: int, end: int, key: SortKey, tally: _Tally) -> int:
    pivot = key(bids[begin + (end - begin) // 2])
    low = begin
    high = end

    while True:
        tally.comparisons += 1
        while key(bids[low]) < pivot:
            low += 1
            if low > end:
                raise SortInvariantError(
                    f"low scan passed end={end} looking for pivot {pivot!r}"
                )
            tally.comparisons += 1

        tally.comparisons += 1
        while pivot < key(bids[high]):
            high -= 1
            if high < begin:
                raise SortInvariantError(
                    f"high scan passed begin={begin} looking for pivot {pivot!r}"
                )
            tally.comparisons += 1

        if low >= high:
            return high

        _exchange(bids, low, high, tally)
        low += 1
        high -= 1


def partition(
    bids: Bids, begin: int, end: int, *, key: SortKey = by_title
) -> int:
    """Partition ``bids[begin:end + 1]`` around its middle title; return the boundary.

    Raises ``IndexError`` when ``[begin, end]`` is empty or not inside the
    list.
    """

    _check_range(bids, begin, end)
    return _partition(bids, begin, end, key, _Tally())


def quicksort(
    bids: Bids,
    begin: int = 0,
    end: int | None = None,
    *,
    key: SortKey = by_title,
) -> SortStats:
    """Sort the inclusive range ``[begin, end]`` of ``bids`` in place.

    ``end`` defaults to the last index. An empty list, or a range holding at
    most one element, is left untouched. Average ``O(n log n)`` comparisons,
    ``O(n^2)`` in the worst case.
    """

    tally = _Tally()
    if not bids:
        return tally.freeze()
    if end is None:
        end = len(bids) - 1
    if begin >= end:
        return tally.freeze()
    _check_range(bids, begin, end)

    pending: list[tuple[int, int]] = [(begin, end)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        mid = _partition(bids, lo, hi, key, tally)
        left = (lo, mid)
        right = (mid + 1, hi)
        # Push the larger side first so the smaller one is popped next.
        if mid - lo < hi - mid - 1:
            pending.append(right)
            pending.append(left)
        else:
            pending.append(left)
            pending.append(right)

    stats = tally.freeze()
    _logger.debug("quicksort: range=[%d, %d] %s", begin, end, stats)
    return stats


__all__ = [
    "SortInvariantError",
    "by_title",
    "partition",
    "quicksort",
    "selection_sort",
]
