import pytest
from rich.console import Console

from apps.cli import soups


@pytest.fixture
def console(monkeypatch):
    c = Console(record=True, width=200)
    monkeypatch.setattr(soups, "console", c)
    return c


def test_list(sample_csv, console):
    assert soups.main(["--data", str(sample_csv), "list"]) == 0
    out = console.export_text()
    assert "ABC Soup" in out
    assert out.index("ABC Soup") < out.index("Herbal Chicken Soup")
    assert "Hot and Sour Soup" not in out


def test_show(sample_csv, console):
    assert soups.main(["--data", str(sample_csv), "show", "ABC", "Soup"]) == 0
    out = console.export_text()
    assert "1. Boil." in out
    assert "pork ribs" in out
    assert "(numbered)" in out


def test_show_unknown(sample_csv, console):
    assert soups.main(["--data", str(sample_csv), "show", "Miso"]) == 1
    assert "Recipe not found" in console.export_text()


def test_missing_file(tmp_path, console):
    assert soups.main(["--data", str(tmp_path / "none.csv"), "list"]) == 1
