"""The in-memory record store: the application state the shell operates on.

:class:`BidStore` owns the one list of bids for the process. Loading replaces
the list wholesale; the sort methods reorder it in place.
"""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike

from .ingest.utils import load_bids
from .models import Bid, Bids, SortStats
from .sorting import quicksort, selection_sort


def format_bid(bid: Bid) -> str:
    """Render ``"<identifier>: <title> | <amount> | <category>"``."""

    return f"{bid.identifier}: {bid.title} | {bid.amount:g} | {bid.category}"


class BidStore:
    """Mutable, ordered collection of bids, file order until sorted."""

    __slots__ = ("_bids",)

    def __init__(self, bids: Bids | None = None) -> None:
        self._bids: Bids = list(bids) if bids is not None else []

    def __len__(self) -> int:
        return len(self._bids)

    def __iter__(self) -> Iterator[Bid]:
        return iter(self._bids)

    def __repr__(self) -> str:  # pragma: no cover - trivial repr
        return f"BidStore(size={len(self._bids)})"

    @property
    def bids(self) -> tuple[Bid, ...]:
        """A snapshot of the current order."""

        return tuple(self._bids)

    def replace(self, bids: Bids) -> None:
        """Discard the current contents and take a copy of ``bids``."""

        self._bids = list(bids)

    def load(self, csv_path: str | PathLike[str]) -> int:
        """Replace the contents with the bids read from ``csv_path``.

        Load errors are reported by :func:`~bid_sort.ingest.utils.load_bids`
        and leave the store holding whatever was read. Returns the new size.
        """

        self.replace(load_bids(csv_path))
        return len(self._bids)

    def render_lines(self) -> list[str]:
        return [format_bid(bid) for bid in self._bids]

    def selection_sort(self) -> SortStats:
        return selection_sort(self._bids)

    def quicksort(self) -> SortStats:
        # Empty stores never reach the partition step.
        if not self._bids:
            return SortStats()
        return quicksort(self._bids, 0, len(self._bids) - 1)


__all__ = ["BidStore", "format_bid"]
