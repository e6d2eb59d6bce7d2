import pytest

from core.config.loader import ConfigLoader


def test_shipped_settings_resolve_data_path():
    cfg = ConfigLoader()
    p = cfg.get_path("PATHS", "DATA_CSV")
    assert p is not None and p.name == "EhCookWhat_Soup_Recipe.csv"
    assert cfg.get_int("SERVER", "PORT") == 8000


def test_custom_file_and_user_expansion(tmp_path):
    ini = tmp_path / "settings.ini"
    ini.write_text("[PATHS]\nDATA_CSV = ~/soups.csv\n", encoding="utf-8")
    cfg = ConfigLoader(ini)
    assert "~" not in cfg.get("PATHS", "DATA_CSV")
    assert cfg.get("PATHS", "MISSING") is None
    assert cfg.get_path("PATHS", "MISSING") is None


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(tmp_path / "nope.ini")
