import itertools
import math

import pytest

from apps.soupboard.catalog_store import (
    SUPPORTED_SOUPS,
    CatalogError,
    CatalogStore,
    build_catalog,
    parse_minutes,
)

from conftest import HEADER, csv_row


def _text(*rows):
    return "\n".join((HEADER,) + rows)


def test_unrecognized_names_are_dropped():
    cat = build_catalog(_text(csv_row("ABC Soup"), csv_row("Miso Soup")))
    assert [r.name for r in cat] == ["ABC Soup"]


def test_fields_map_by_position():
    cat = build_catalog(_text(csv_row("ABC Soup", "Hard", "corn, carrots", "75", "1) Boil.", "Grandma")))
    r = cat[0]
    assert r.difficulty == "Hard"
    assert r.ingredients_raw == "corn, carrots"
    assert r.cook_time_minutes == 75
    assert r.instructions_raw == "1) Boil."
    assert r.source == "Grandma"


def test_order_follows_allow_list_for_every_permutation():
    rows = [csv_row(n) for n in SUPPORTED_SOUPS]
    for perm in itertools.permutations(rows):
        assert [r.name for r in build_catalog(_text(*perm))] == list(SUPPORTED_SOUPS)


def test_short_rows_are_skipped():
    cat = build_catalog(_text("ABC Soup,Easy,corn,30,Boil.", csv_row("Watercress Soup")))
    assert [r.name for r in cat] == ["Watercress Soup"]


def test_header_is_not_validated():
    cat = build_catalog("whatever\n" + csv_row("ABC Soup"))
    assert len(cat) == 1


def test_header_only_and_empty_text_give_empty_catalog():
    assert build_catalog(HEADER) == []
    assert build_catalog("") == []


def test_duplicates_are_kept_in_input_order():
    cat = build_catalog(_text(
        csv_row("Watercress Soup", source="first"),
        csv_row("ABC Soup"),
        csv_row("Watercress Soup", source="second"),
    ))
    assert [r.name for r in cat] == ["ABC Soup", "Watercress Soup", "Watercress Soup"]
    assert [r.source for r in cat[1:]] == ["first", "second"]


def test_every_allowed_name_once_when_rows_are_unique():
    cat = build_catalog(_text(*[csv_row(n) for n in reversed(SUPPORTED_SOUPS)], csv_row("Other")))
    names = [r.name for r in cat]
    assert sorted(names) == sorted(SUPPORTED_SOUPS)
    assert len(names) == len(set(names))


def test_catalog_never_exceeds_allow_list_without_duplicates():
    cat = build_catalog(_text(*[csv_row(n) for n in SUPPORTED_SOUPS + ("A", "B", "C")]))
    assert len(cat) <= len(SUPPORTED_SOUPS)
    assert all(r.name in SUPPORTED_SOUPS for r in cat)


@pytest.mark.parametrize("raw, expected", [("45", 45), (" 90 ", 90), ("45 min", 45), ("-5", -5)])
def test_parse_minutes_leading_integer(raw, expected):
    assert parse_minutes(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "about 45"])
def test_parse_minutes_nan_sentinel(raw):
    assert math.isnan(parse_minutes(raw))


def test_unparsable_duration_is_kept_as_nan():
    cat = build_catalog(_text(csv_row("ABC Soup", minutes="soon")))
    assert not cat[0].has_cook_time


def test_store_load_and_lookup(sample_csv):
    store = CatalogStore(sample_csv)
    assert store.load() is True
    assert store.names() == ["ABC Soup", "Watercress Soup", "Herbal Chicken Soup"]
    assert store.get("ABC Soup").cook_time_minutes == 90
    assert store.get("Hot and Sour Soup") is None
    assert store.get("") is None
    assert store.load_error() is None


def test_store_load_skips_when_unchanged(sample_csv):
    store = CatalogStore(sample_csv)
    store.load()
    assert store.load(force=False) is False
    assert store.load(force=True) is True


def test_store_missing_file_raises(tmp_path):
    store = CatalogStore(tmp_path / "nope.csv")
    with pytest.raises(CatalogError):
        store.load()


def test_replace_all_swaps_the_whole_catalog(sample_csv):
    store = CatalogStore(sample_csv)
    store.load()
    store.load_text(_text(csv_row("Old Cucumber Soup")))
    assert store.names() == ["Old Cucumber Soup"]


def test_mark_failed_empties_catalog(sample_csv):
    store = CatalogStore(sample_csv)
    store.load()
    store.mark_failed("boom")
    assert store.count() == 0
    assert store.load_error() == "boom"


def test_store_path_under_a_file_raises_catalog_error(tmp_path):
    afile = tmp_path / "afile"
    afile.write_text("x", encoding="utf-8")
    with pytest.raises(CatalogError):
        CatalogStore(afile / "soups.csv").load()


def test_parse_minutes_only_ascii_digits():
    assert math.isnan(parse_minutes("４５"))
    assert math.isnan(parse_minutes("٤٥"))
