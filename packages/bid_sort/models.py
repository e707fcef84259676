"""Data models and type aliases for ``bid_sort``.

A bid is the unit every other module works with: the CSV adapter builds them,
the store owns them, and the sort engine reorders them by title.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Bid:
    """A single bid row from the monthly sales export.

    Attributes
    ----------
    identifier:
        The auction's identifier (``Auction ID`` column). Not required to be
        unique; duplicates are kept as-is.
    title:
        The auction title. This is the sort key for both algorithms.
    category:
        The fund the bid belongs to (``Fund`` column).
    amount:
        Winning bid amount after currency-symbol stripping; ``0.0`` when the
        source value was missing or not numeric.
    """

    identifier: str
    title: str
    category: str
    amount: float = 0.0


@dataclass(frozen=True, slots=True)
class SortStats:
    """Work done by one sort call, reported next to the elapsed time."""

    comparisons: int = 0
    exchanges: int = 0


Bids: TypeAlias = list[Bid]
"""The mutable, ordered collection the sort engine works on in place."""


__all__ = ["Bid", "Bids", "SortStats"]
