"""Public interface for the ``bid_sort`` package.

Re-exports the models, the sort engine, the record store and the CSV loader
as the stable import surface. The interactive shell and console entrypoint
live in :mod:`bid_sort.shell` and :mod:`bid_sort.cli`.
"""

from .ingest.utils import load_bids
from .models import Bid, Bids, SortStats
from .normalizers import coerce_amount
from .sorting import SortInvariantError, partition, quicksort, selection_sort
from .store import BidStore, format_bid

__all__ = [
    # Models / types
    "Bid",
    "Bids",
    "SortStats",
    # Field coercion and loading
    "coerce_amount",
    "load_bids",
    # Sort engine
    "SortInvariantError",
    "partition",
    "quicksort",
    "selection_sort",
    # Record store
    "BidStore",
    "format_bid",
]
