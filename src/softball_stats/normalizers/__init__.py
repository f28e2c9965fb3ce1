"""
Normalizers that reshape upstream NCAA payloads into the canonical contract.

- leaders: per-category rule table, record normalizer, leaderboard assembler
- rankings: team poll key cleanup
- parsers: safe numeric coercion and key fallback helpers
"""

from .leaders import (
    CATEGORY_RULES,
    CategoryRule,
    StatField,
    assemble_leaderboard,
    normalize_record,
)
from .parsers import StatParsers
from .rankings import normalize_ranking_row, normalize_rankings

__all__ = [
    "CATEGORY_RULES",
    "CategoryRule",
    "StatField",
    "StatParsers",
    "assemble_leaderboard",
    "normalize_record",
    "normalize_ranking_row",
    "normalize_rankings",
]
