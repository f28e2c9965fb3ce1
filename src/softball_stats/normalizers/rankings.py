"""
Team rankings normalization.

The upstream poll occasionally emits keys with stray whitespace and has
used different names for the same column over time. The front-end reads
COLLEGE and "PREVIOUS RANK"; every other column passes through.
"""

from __future__ import annotations

from typing import Any, Mapping

# Canonical column -> upstream variants, in priority order (canonical first)
RANKING_FIELD_VARIANTS: dict[str, tuple[str, ...]] = {
    "COLLEGE": ("COLLEGE", "SCHOOL", "TEAM"),
    "PREVIOUS RANK": ("PREVIOUS RANK", "PREVIOUS"),
}


def normalize_ranking_row(row: Mapping[str, Any]) -> dict[str, Any]:
    """Trim keys and fill the canonical columns from their variants."""
    normalized = {str(key).strip(): value for key, value in row.items()}

    for canonical, variants in RANKING_FIELD_VARIANTS.items():
        if normalized.get(canonical):
            continue
        normalized[canonical] = next(
            (normalized[key] for key in variants if normalized.get(key)),
            "",
        )

    return normalized


def normalize_rankings(rows: Any) -> list[dict[str, Any]]:
    """
    Normalize a list of upstream ranking rows.

    Non-list input yields an empty list; rows that are not mappings are dropped.
    """
    if not isinstance(rows, list):
        return []
    return [normalize_ranking_row(row) for row in rows if isinstance(row, Mapping)]
