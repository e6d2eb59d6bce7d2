import configparser
import os
from pathlib import Path
from typing import Optional


class ConfigLoader:
    def __init__(self, config_path: Optional[Path] = None):
        # project root (core/config/*)
        self.project_root = Path(__file__).resolve().parents[2]
        self.config_path = Path(config_path) if config_path else self.project_root / "conf" / "settings.ini"

        self.config = configparser.ConfigParser()
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file missing: {self.config_path}")

        self.config.read(self.config_path, encoding="utf-8")

    def get(self, section, key, fallback=None):
        """Get a value, expanding user paths (~)."""
        val = self.config.get(section, key, fallback=fallback)
        if val and "~" in val:
            return os.path.expanduser(val)
        return val

    def get_int(self, section, key, fallback: int = 0) -> int:
        return self.config.getint(section, key, fallback=fallback)

    def get_path(self, section, key) -> Optional[Path]:
        """Like get(), but relative paths resolve against the project root."""
        val = self.get(section, key)
        if not val:
            return None
        p = Path(val)
        return p if p.is_absolute() else (self.project_root / p)


# module-level instance
soupboard_config = ConfigLoader()

if __name__ == "__main__":
    print(f"Project Root: {soupboard_config.project_root}")
    print(f"Data CSV: {soupboard_config.get_path('PATHS', 'DATA_CSV')}")
