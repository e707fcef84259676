"""Ingest utilities shared by the interactive shell and library callers.

Exposes :func:`load_bids`, the load boundary of the record store: every
structural failure is caught here, reported, and turned into a partial (or
empty) result instead of an exception.
"""

from __future__ import annotations

import csv
import sys
from os import PathLike
from pathlib import Path

from ..logging_setup import get_logger
from ..models import Bid
from .adapters.bids_csv import to_bids

_logger = get_logger("bid_sort.ingest")


def _report(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    _logger.warning(message)


def load_bids(csv_path: str | PathLike[str], *, has_header: bool = True) -> list[Bid]:
    """Read the sales export at ``csv_path`` and return its bids in file order.

    Parameters
    ----------
    csv_path:
        Filesystem path to the CSV file.
    has_header:
        When true (the default) the first row is consumed without mapping.

    Returns
    -------
    list[Bid]
        A new list. On a missing/unreadable file, a CSV syntax error, a decode
        error or a short row, the error is printed to stderr and the bids
        mapped before the failure are returned.
    """

    path = Path(csv_path)
    _logger.info("Loading CSV file %s", path)

    bids: list[Bid] = []
    try:
        with path.open(encoding="utf-8-sig", newline="") as f:
            reader = csv.reader(f)
            if has_header:
                next(reader, None)
            for bid in to_bids(reader, first_row=2 if has_header else 1):
                bids.append(bid)
    except FileNotFoundError:
        _report(f"File not found: {path}")
    except PermissionError:
        _report(f"Permission denied: {path}")
    except IsADirectoryError:
        _report(f"Not a file: {path}")
    except (csv.Error, UnicodeDecodeError) as e:
        _report(f"Failed to parse CSV '{path}' after {len(bids)} rows: {e}")
    except OSError as e:
        _report(f"Unexpected failure reading '{path}': {e}")

    _logger.info("Loaded %d bids from %s", len(bids), path)
    return bids


__all__ = ["load_bids"]
