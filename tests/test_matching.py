import pytest

from campaign_validator.utils import (
    matches_any,
    matches_pattern,
    normalize_column_name,
    normalize_row,
)


@pytest.mark.parametrize(
    ("value", "pattern"),
    [
        ("us", "US"),
        ("  Canada ", "canada"),
        ("anything", "*"),
        ("summer_promo_2024", "*promo*"),
        ("Launch-Week", "launch*"),
        ("brand_awareness", "*awareness"),
    ],
)
def test_matches_pattern_accepts(value, pattern):
    assert matches_pattern(value, pattern) is True


@pytest.mark.parametrize(
    ("value", "pattern"),
    [
        ("FR", "US"),
        ("AUSTRALIA", "US"),
        ("prelaunch", "launch*"),
        ("promo.", "promo"),
        ("a+b", "a.b*"),
    ],
)
def test_matches_pattern_rejects(value, pattern):
    assert matches_pattern(value, pattern) is False


def test_absent_value_never_matches_even_the_wildcard():
    assert matches_pattern(None, "*") is False
    assert matches_any(None, ["US", "*"]) is False


def test_empty_value_matches_only_wildcards_and_empty_patterns():
    assert matches_pattern("", "*") is True
    assert matches_pattern("", "") is True
    assert matches_pattern("", "US") is False


def test_matches_any_is_disjunctive():
    assert matches_any("ca", ["US", "CA"]) is True
    assert matches_any("mx", ["US", "CA"]) is False
    assert matches_any("mx", []) is False


def test_normalize_column_name_collapses_case_and_spacing():
    assert normalize_column_name("  Campaign   Name ") == "campaign name"
    assert normalize_column_name("COUNTRY") == "country"


def test_normalize_row_rekeys_columns():
    assert normalize_row({" Country ": "US", "STATE": "CA"}) == {
        "country": "US",
        "state": "CA",
    }
