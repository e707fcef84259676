"""Adapter mapping rows of the eBid monthly sales export to :class:`Bid`.

The export is read positionally; header names are never consulted. Columns
used (0-based):

- ``0``: Auction Title  -> ``title``
- ``1``: Auction ID     -> ``identifier``
- ``4``: Winning Bid    -> ``amount`` (``$`` stripped, zero-fallback)
- ``8``: Fund           -> ``category``

Failure mode
------------
A row with too few columns is a structural problem with the file, not a bad
value, and raises ``csv.Error``. Rows already yielded stay valid, so callers
that collect incrementally keep everything before the offending row.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator, Sequence

from ...models import Bid
from ...normalizers import coerce_amount

TITLE_COL = 0
IDENTIFIER_COL = 1
AMOUNT_COL = 4
CATEGORY_COL = 8

CURRENCY_SYMBOL = "$"

# A row must reach the right-most column we read.
MIN_COLUMNS = max(TITLE_COL, IDENTIFIER_COL, AMOUNT_COL, CATEGORY_COL) + 1


def row_to_bid(row: Sequence[str]) -> Bid:
    """Build one :class:`Bid` from a positional row (no length check)."""

    return Bid(
        identifier=row[IDENTIFIER_COL],
        title=row[TITLE_COL],
        category=row[CATEGORY_COL],
        amount=coerce_amount(row[AMOUNT_COL], CURRENCY_SYMBOL),
    )


def to_bids(rows: Iterable[Sequence[str]], *, first_row: int = 1) -> Iterator[Bid]:
    """Convert positional CSV rows to bids, in input order.

    ``first_row`` is the 1-based file row number of the first item of
    ``rows``, used only in error messages (``2`` after a header). Completely
    empty rows, which ``csv.reader`` produces for blank lines, are skipped.
    """

    for row_no, row in enumerate(rows, start=first_row):
        if not row:
            continue
        if len(row) < MIN_COLUMNS:
            raise csv.Error(
                f"row {row_no} has {len(row)} columns; expected at least {MIN_COLUMNS}"
            )
        yield row_to_bid(row)


__all__ = [
    "AMOUNT_COL",
    "CATEGORY_COL",
    "IDENTIFIER_COL",
    "MIN_COLUMNS",
    "TITLE_COL",
    "row_to_bid",
    "to_bids",
]
