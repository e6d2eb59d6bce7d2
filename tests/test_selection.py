from apps.soupboard.catalog_store import CatalogStore
from apps.soupboard.selection import SelectionState


def _selection(sample_csv):
    store = CatalogStore(sample_csv)
    store.load()
    return SelectionState(store)


def test_starts_closed(sample_csv):
    sel = _selection(sample_csv)
    assert sel.selected is None
    assert not sel.is_open()


def test_open_close_twice_returns_to_closed(sample_csv):
    sel = _selection(sample_csv)
    initial = sel.selected
    for _ in range(2):
        assert sel.select("ABC Soup") is True
        assert sel.selected == "ABC Soup"
        sel.clear()
    assert sel.selected == initial


def test_unknown_name_leaves_state_unchanged(sample_csv):
    sel = _selection(sample_csv)
    sel.select("ABC Soup")
    assert sel.select("Miso Soup") is False
    assert sel.selected == "ABC Soup"


def test_only_one_open_at_a_time(sample_csv):
    sel = _selection(sample_csv)
    sel.select("ABC Soup")
    sel.select("Watercress Soup")
    assert sel.selected == "Watercress Soup"


def test_clear_is_idempotent(sample_csv):
    sel = _selection(sample_csv)
    sel.clear()
    sel.clear()
    assert not sel.is_open()


def test_selection_closes_when_catalog_drops_the_name(sample_csv):
    store = CatalogStore(sample_csv)
    store.load()
    sel = SelectionState(store)
    sel.select("ABC Soup")
    store.load_text("header\nWatercress Soup,Easy,cress,30,Boil.,Test")
    assert sel.selected is None
    assert not sel.is_open()
