# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import math
import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Display order of the catalog; also the filter for which rows are kept.
SUPPORTED_SOUPS: Sequence[str] = (
    "Lotus Root with Peanut Soup",
    "ABC Soup",
    "Watercress Soup",
    "Old Cucumber Soup",
    "Herbal Chicken Soup",
)

_SOUP_ORDER: Dict[str, int] = {name: i for i, name in enumerate(SUPPORTED_SOUPS)}

# name, difficulty, ingredients, cook_time_minutes, instructions, source
MIN_FIELDS = 6

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")

Minutes = Union[int, float]


@dataclass(frozen=True)
class SoupRecipe:
    """One catalog row.

    Notes
    - `cook_time_minutes` is float('nan') when the source value has no leading integer.
    - `ingredients_raw` / `instructions_raw` are kept verbatim; see presenter for segmentation.
    """

    name: str
    difficulty: str
    ingredients_raw: str
    cook_time_minutes: Minutes
    instructions_raw: str
    source: str

    @property
    def has_cook_time(self) -> bool:
        return not (isinstance(self.cook_time_minutes, float) and math.isnan(self.cook_time_minutes))


class CatalogError(RuntimeError):
    pass


def parse_csv_line(line: str) -> List[str]:
    """Split one CSV line into trimmed fields.

    A double quote toggles "inside quotes" and is dropped; commas inside quotes are
    literal. Doubled quotes are NOT an escape: `"a""b"` reads as `ab`.
    An unmatched quote simply runs to the end of the line.
    """
    out: List[str] = []
    cur: List[str] = []
    in_quotes = False
    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            out.append("".join(cur).strip())
            cur = []
        else:
            cur.append(ch)
    out.append("".join(cur).strip())
    return out


def parse_minutes(value: str) -> Minutes:
    """Leading-integer parse ("45", "45 min" -> 45); anything else -> nan."""
    m = _LEADING_INT_RE.match(value or "")
    if not m:
        return math.nan
    return int(m.group(1))


def _row_to_recipe(values: List[str]) -> SoupRecipe:
    return SoupRecipe(
        name=values[0],
        difficulty=values[1],
        ingredients_raw=values[2],
        cook_time_minutes=parse_minutes(values[3]),
        instructions_raw=values[4],
        source=values[5],
    )


def build_catalog(text: str, allowed: Sequence[str] = SUPPORTED_SOUPS) -> List[SoupRecipe]:
    """Parse CSV text into the ordered, allow-listed catalog.

    - first line is a header (skipped, not validated)
    - rows with fewer than 6 fields are skipped
    - rows whose name is not allowed are dropped
    - result is stably sorted by position in `allowed`; duplicates are kept
    """
    order = _SOUP_ORDER if allowed is SUPPORTED_SOUPS else {n: i for i, n in enumerate(allowed)}

    lines = (text or "").strip().split("\n")
    out: List[SoupRecipe] = []
    for lineno, line in enumerate(lines[1:], start=2):
        values = parse_csv_line(line)
        if len(values) < MIN_FIELDS:
            logger.debug("skip line %d: %d fields", lineno, len(values))
            continue
        rec = _row_to_recipe(values)
        if rec.name not in order:
            continue
        out.append(rec)

    out.sort(key=lambda r: order[r.name])
    return out


class CatalogStore:
    """Own the in-memory soup catalog (thread-safe).

    Data source:
      - data/EhCookWhat_Soup_Recipe.csv

    The catalog is only ever replaced as a whole (`replace_all`); there is no
    partial mutation API. Readers get tuples / frozen records.
    """

    def __init__(self, data_path: Optional[Path] = None, allowed: Sequence[str] = SUPPORTED_SOUPS):
        self._path = Path(data_path) if data_path else None
        self._allowed = tuple(allowed)
        self._lock = threading.RLock()
        self._mtime: float = -1.0
        self._recipes: tuple = ()
        self._load_error: Optional[str] = None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def allowed(self) -> Sequence[str]:
        return self._allowed

    def mtime(self) -> float:
        with self._lock:
            return self._mtime

    # ----------------- load / reload -----------------

    def load(self, force: bool = False) -> bool:
        """Load catalog file if changed.

        Returns True if a replace occurred. Raises CatalogError if the file cannot be read.
        """
        if self._path is None:
            raise CatalogError("Catalog has no data path")
        with self._lock:
            try:
                mtime = self._path.stat().st_mtime
            except FileNotFoundError as e:
                raise CatalogError(f"Catalog file not found: {self._path}") from e
            except OSError as e:
                raise CatalogError(f"Catalog file unreadable: {self._path}: {e}") from e

            if (not force) and self._mtime == mtime and self._load_error is None:
                return False

            try:
                text = self._path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise CatalogError(f"Catalog file unreadable: {self._path}: {e}") from e

            self.load_text(text)
            self._mtime = mtime
            logger.info("Loaded %d recipes from %s", len(self._recipes), self._path)
            return True

    def load_text(self, text: str) -> None:
        self.replace_all(build_catalog(text, self._allowed))

    def replace_all(self, recipes: Iterable[SoupRecipe]) -> None:
        with self._lock:
            self._recipes = tuple(recipes)
            self._load_error = None

    def mark_failed(self, message: str) -> None:
        """Record a load failure; the catalog is emptied."""
        with self._lock:
            self._recipes = ()
            self._load_error = str(message)

    def load_error(self) -> Optional[str]:
        with self._lock:
            return self._load_error

    # ----------------- queries -----------------

    def recipes(self) -> tuple:
        with self._lock:
            return self._recipes

    def names(self) -> List[str]:
        with self._lock:
            return [r.name for r in self._recipes]

    def count(self) -> int:
        with self._lock:
            return len(self._recipes)

    def get(self, name: str) -> Optional[SoupRecipe]:
        """First recipe with this exact name (None if absent)."""
        if not name:
            return None
        with self._lock:
            for r in self._recipes:
                if r.name == name:
                    return r
        return None
