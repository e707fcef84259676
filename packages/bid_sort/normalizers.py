"""Field coercion helpers.

The amount column of the sales export is text such as ``"$1,234.50"``.
:func:`coerce_amount` turns it into a ``float`` with a deliberate zero-fallback
policy: a value that is not a number after cleanup becomes ``0.0`` instead of
raising, so one bad cell never aborts a load.
"""

from __future__ import annotations

import math

_GROUPING_SEPARATOR = ","


def coerce_amount(text: str | None, strip_char: str = "$") -> float:
    """Strip every ``strip_char`` from ``text`` and parse the rest as a float.

    Thousands separators are removed too. Returns ``0.0`` for ``None``, empty
    strings and anything that is not a plain finite decimal number: besides
    what ``float()`` rejects, that covers Python-only spellings such as
    digit underscores (``"1_000"``), ``"nan"`` and ``"inf"``.

    >>> coerce_amount("$1,234", "$")
    1234.0
    >>> coerce_amount("abc", "$")
    0.0
    """

    if text is None:
        return 0.0
    cleaned = text.replace(strip_char, "") if strip_char else text
    cleaned = cleaned.replace(_GROUPING_SEPARATOR, "").strip()
    if not cleaned or "_" in cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


__all__ = ["coerce_amount"]
