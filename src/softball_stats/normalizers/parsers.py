"""
Field parsing utilities for upstream stat records.

Upstream records have no fixed schema: the same column may arrive as
"AVG", "avg" or "BA", as a string or a number. These helpers read a field
from an ordered list of candidate keys and coerce it, never raising.

Design: Self-contained with no external dependencies beyond Python stdlib.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Optional, Sequence


class StatParsers:
    """Safe numeric coercion for upstream values.

    Each parser returns None when the value cannot be parsed, so callers
    can move on to the next candidate key.
    """

    @staticmethod
    def parse_float(value: Any) -> Optional[float]:
        """Parse a float from a number or string ("0.434", ".990", "1,088").

        Non-finite results (NaN, inf) are treated as unparsable.
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            result = float(value)
        elif isinstance(value, str):
            cleaned = value.replace(",", "").strip()
            if not cleaned:
                return None
            try:
                result = float(cleaned)
            except ValueError:
                return None
        else:
            return None

        return result if math.isfinite(result) else None

    @staticmethod
    def parse_int(value: Any) -> Optional[int]:
        """Parse an int, truncating decimals ("178.2" -> 178)."""
        result = StatParsers.parse_float(value)
        if result is None:
            return None
        return int(result)


def first_number(
    record: Mapping[str, Any],
    keys: Sequence[str],
    parser: Callable[[Any], Optional[float]] = StatParsers.parse_float,
) -> Optional[float]:
    """Return the first present-and-parsable value among `keys`, else None."""
    for key in keys:
        if key not in record:
            continue
        parsed = parser(record[key])
        if parsed is not None:
            return parsed
    return None


def first_text(record: Mapping[str, Any], keys: Sequence[str], default: str = "") -> str:
    """Return the first non-empty value among `keys` as a stripped string."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return default


def has_any(record: Mapping[str, Any], keys: Sequence[str]) -> bool:
    """True if any of `keys` is present in the record."""
    return any(key in record for key in keys)
