"""
Leaderboard normalization.

Maps heterogeneous upstream stat records into the canonical LeaderEntry
shape. Each category is described by a CategoryRule in CATEGORY_RULES:

- value:   the headline stat, read from an ordered list of upstream keys
- stats:   supporting counting stats exposed as additionalStats
- derive:  extra stats computed from the supporting ones (e.g. HR/G)
- compute: a formula for the headline value from counts; when it yields
           a result it wins over the upstream field

Adding a category means adding a rule, not a branch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from itertools import islice
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from ..core.models import Leaderboard, LeaderEntry, PlayerInfo, TeamInfo
from ..core.types import (
    MAX_LEADERS,
    SPORT_NAME,
    StatCategory,
    get_category_title,
    resolve_category,
)
from .parsers import StatParsers, first_number, first_text, has_any

logger = logging.getLogger(__name__)

Number = Union[int, float]
StatLine = dict[str, Number]


@dataclass(frozen=True)
class StatField:
    """A canonical stat name and the upstream keys it may arrive under."""

    name: str
    keys: tuple[str, ...]
    parser: Callable[[Any], Optional[Number]] = StatParsers.parse_int
    # Optional fields are omitted from additionalStats when the upstream
    # record has none of their keys
    optional: bool = False

    def read(self, record: Mapping[str, Any]) -> Optional[Number]:
        return first_number(record, self.keys, self.parser)

    def read_or_zero(self, record: Mapping[str, Any]) -> Number:
        result = self.read(record)
        if result is not None:
            return result
        return 0.0 if self.parser is StatParsers.parse_float else 0

    def as_optional(self) -> "StatField":
        return StatField(self.name, self.keys, self.parser, optional=True)


@dataclass(frozen=True)
class CategoryRule:
    """Normalization rule for one stat category."""

    value: Optional[StatField]
    stats: tuple[StatField, ...] = ()
    derive: Optional[Callable[[StatLine], StatLine]] = None
    compute: Optional[Callable[[StatLine], Optional[Number]]] = None

    def extract_stats(self, record: Mapping[str, Any]) -> StatLine:
        stats: StatLine = {}
        for stat in self.stats:
            if stat.optional and not has_any(record, stat.keys):
                continue
            stats[stat.name] = stat.read_or_zero(record)
        if self.derive:
            stats.update(self.derive(stats))
        return stats

    def extract_value(self, record: Mapping[str, Any], stats: StatLine) -> Number:
        if self.compute:
            computed = self.compute(stats)
            if computed is not None:
                return computed
        if self.value is None:
            return 0
        return self.value.read_or_zero(record)


# =============================================================================
# Upstream key variants
# =============================================================================

RANK_KEYS = ("Rank", "rank", "RANK")
NAME_KEYS = ("Name", "name")
POSITION_KEYS = ("Position", "POS", "pos")
CLASS_YEAR_KEYS = ("Cl", "cl")
TEAM_KEYS = ("Team", "TEAM", "team")

_float = StatParsers.parse_float

G = StatField("g", ("G", "g"))
AB = StatField("ab", ("AB", "ab"))
H = StatField("h", ("H", "h"))
BB = StatField("bb", ("BB", "bb"))
HBP = StatField("hbp", ("HBP", "hbp"))
SF = StatField("sf", ("SF", "sf"))
SH = StatField("sh", ("SH", "sh"))
HR = StatField("hr", ("HR", "hr"))
TB = StatField("tb", ("TB", "tb"))
DOUBLES = StatField("2b", ("2B", "2b"))
TRIPLES = StatField("3b", ("3B", "3b"))
APP = StatField("app", ("App", "APP", "app"))
IP = StatField("ip", ("IP", "ip"), _float)
ER = StatField("er", ("ER", "er"))
R = StatField("r", ("R", "r"))
SO = StatField("so", ("SO", "so"))


# =============================================================================
# Derived formulas
# =============================================================================


def home_runs_per_game(stats: StatLine) -> StatLine:
    """HR/G rounded to 2 decimals; 0 when no games played."""
    games = stats.get("g", 0)
    return {"hr_g": round(stats.get("hr", 0) / games, 2) if games > 0 else 0}


def on_base_percentage(stats: StatLine) -> Optional[float]:
    """(H + BB + HBP) / (AB + BB + HBP + SF) to 3 decimals; None if undefined."""
    on_base = stats.get("h", 0) + stats.get("bb", 0) + stats.get("hbp", 0)
    chances = stats.get("ab", 0) + stats.get("bb", 0) + stats.get("hbp", 0) + stats.get("sf", 0)
    if chances <= 0:
        return None
    return round(on_base / chances, 3)


# =============================================================================
# CATEGORY RULES
# =============================================================================

CATEGORY_RULES: dict[StatCategory, CategoryRule] = {
    StatCategory.batting: CategoryRule(
        value=StatField("value", ("BA", "AVG", "avg", "ba"), _float),
        stats=(G, AB, H),
    ),
    StatCategory.hits: CategoryRule(
        value=H,
        stats=(G,),
    ),
    StatCategory.homeRuns: CategoryRule(
        value=HR,
        stats=(G, HR),
        derive=home_runs_per_game,
    ),
    StatCategory.obp: CategoryRule(
        value=StatField("value", ("PCT", "OBP", "obp"), _float),
        stats=(G, AB, H, BB, HBP, SF, SH),
        compute=on_base_percentage,
    ),
    StatCategory.slg: CategoryRule(
        value=StatField("value", ("SLG PCT", "SLG", "slg"), _float),
        stats=(
            G,
            AB,
            TB,
            H.as_optional(),
            DOUBLES.as_optional(),
            TRIPLES.as_optional(),
            HR.as_optional(),
        ),
    ),
    StatCategory.era: CategoryRule(
        value=StatField("value", ("ERA", "era"), _float),
        stats=(APP, IP, ER, R.as_optional()),
    ),
    StatCategory.strikeoutsPerSeven: CategoryRule(
        value=StatField("value", ("K/7", "K7", "Value", "value"), _float),
        stats=(APP, IP, SO),
    ),
    StatCategory.strikeouts: CategoryRule(
        value=StatField("value", ("SO", "so", "Value", "value")),
        stats=(APP, SO),
    ),
}


def get_rule(category: "str | StatCategory") -> CategoryRule:
    """Look up the normalization rule. Raises InvalidCategory if unknown."""
    return CATEGORY_RULES[resolve_category(category)]


def normalize_record(
    record: Mapping[str, Any],
    category: "str | StatCategory",
    position_index: int,
) -> LeaderEntry:
    """
    Normalize one upstream record into a LeaderEntry.

    Args:
        record: Raw upstream row (any key casing/spelling)
        category: Stat category the row belongs to
        position_index: 0-based position within the truncated batch,
            used as the rank when the upstream rank is missing

    Raises:
        InvalidCategory: If the category is unknown
    """
    rule = get_rule(category)
    if not isinstance(record, Mapping):
        record = {}

    rank = first_number(record, RANK_KEYS, StatParsers.parse_int)
    if rank is None or rank < 1:
        rank = position_index + 1

    stats = rule.extract_stats(record)
    return LeaderEntry(
        rank=rank,
        player=PlayerInfo(
            name=first_text(record, NAME_KEYS),
            position=first_text(record, POSITION_KEYS),
            class_year=first_text(record, CLASS_YEAR_KEYS),
        ),
        team=TeamInfo(name=first_text(record, TEAM_KEYS)),
        value=rule.extract_value(record, stats),
        additional_stats=stats,
    )


def default_updated() -> str:
    """Today's date as M/D/YYYY."""
    today = date.today()
    return f"{today.month}/{today.day}/{today.year}"


def assemble_leaderboard(
    category: "str | StatCategory",
    records: Iterable[Mapping[str, Any]] | None,
    updated: str | None = None,
) -> Leaderboard:
    """
    Build a leaderboard from raw upstream records.

    Keeps the first MAX_LEADERS records in upstream order (no re-sort).
    Any iterable is accepted; None, a mapping or a string yields no leaders.
    The title falls back to a generic label for unknown categories.
    """
    if records is None or isinstance(records, (Mapping, str, bytes)):
        rows = []
    else:
        rows = list(islice(records, MAX_LEADERS + 1))
    truncated = rows[:MAX_LEADERS]
    if len(rows) > MAX_LEADERS:
        logger.debug(f"Truncating {category} leaderboard to {MAX_LEADERS} rows")

    return Leaderboard(
        sport=SPORT_NAME,
        category=get_category_title(category),
        updated=updated or default_updated(),
        leaders=[
            normalize_record(record, category, index)
            for index, record in enumerate(truncated)
        ],
    )
