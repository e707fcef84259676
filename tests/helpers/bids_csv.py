"""Helpers for building small bids CSV fixtures in tests."""

from __future__ import annotations

from pathlib import Path

HEADER = (
    "Title,Auction ID,Auction Date,End Date,Winning Bid,Fee,Department,"
    "Receipt Number,Fund,Vehicle ID"
)


def csv_row(title: str, auction_id: str, amount: str, fund: str = "General Fund") -> str:
    """Format one 10-column export row; cells containing commas are quoted."""

    cells = [title, auction_id, "12/1/2016", "12/3/2016", amount, "$1.00", "Police", "R1", fund, ""]
    return ",".join(f'"{c}"' if "," in c else c for c in cells)


def write_bids_csv(path: Path, rows: list[str], *, header: bool = True) -> Path:
    lines = ([HEADER] if header else []) + rows
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
