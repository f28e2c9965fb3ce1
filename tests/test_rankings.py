"""
Tests for team rankings normalization.
"""

from softball_stats.normalizers.rankings import normalize_ranking_row, normalize_rankings


def test_trims_keys_and_applies_both_fallbacks():
    rows = normalize_rankings([{" SCHOOL ": "Tennessee", "PREVIOUS": "3"}])

    assert len(rows) == 1
    assert rows[0]["COLLEGE"] == "Tennessee"
    assert rows[0]["PREVIOUS RANK"] == "3"
    assert " SCHOOL " not in rows[0]


def test_college_priority_order():
    row = normalize_ranking_row({"SCHOOL": "Texas", "TEAM": "Texas Longhorns"})
    assert row["COLLEGE"] == "Texas"

    row = normalize_ranking_row({"TEAM": "UCLA"})
    assert row["COLLEGE"] == "UCLA"


def test_existing_values_are_not_overwritten():
    row = normalize_ranking_row(
        {"COLLEGE": "Florida", "SCHOOL": "Other", "PREVIOUS RANK": "2", "PREVIOUS": "9"}
    )
    assert row["COLLEGE"] == "Florida"
    assert row["PREVIOUS RANK"] == "2"


def test_empty_canonical_value_is_filled_from_variant():
    row = normalize_ranking_row({"COLLEGE": "", "SCHOOL": "Duke"})
    assert row["COLLEGE"] == "Duke"


def test_missing_variants_default_to_empty_string():
    row = normalize_ranking_row({"RANK": "1", "RECORD": "45-2", "POINTS": "750"})

    assert row["COLLEGE"] == ""
    assert row["PREVIOUS RANK"] == ""
    assert row["RECORD"] == "45-2"
    assert row["POINTS"] == "750"


def test_other_fields_pass_through():
    row = normalize_ranking_row({"RANK ": "4", "FIRST PLACE VOTES": "0", "TEAM": "Alabama"})

    assert row["RANK"] == "4"
    assert row["FIRST PLACE VOTES"] == "0"


def test_non_list_input_yields_empty():
    assert normalize_rankings(None) == []
    assert normalize_rankings({"data": []}) == []
    assert normalize_rankings("rankings") == []


def test_non_mapping_rows_are_dropped():
    rows = normalize_rankings([{"TEAM": "LSU"}, "junk", None])
    assert [row["COLLEGE"] for row in rows] == ["LSU"]
