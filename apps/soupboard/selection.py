# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import threading
from typing import Optional

from .catalog_store import CatalogStore

logger = logging.getLogger(__name__)


class SelectionState:
    """Which recipe (if any) has its detail overlay open.

    Two transitions: select(name) and clear(). Both are idempotent; at most one
    name is open at a time.
    """

    def __init__(self, store: CatalogStore):
        self._store = store
        self._lock = threading.RLock()
        self._selected: Optional[str] = None

    @property
    def selected(self) -> Optional[str]:
        """Open name; dropped once a catalog reload no longer contains it."""
        with self._lock:
            if self._selected is not None and self._store.get(self._selected) is None:
                logger.info("Selected recipe no longer in catalog: %r", self._selected)
                self._selected = None
            return self._selected

    def is_open(self) -> bool:
        return self.selected is not None

    def select(self, name: str) -> bool:
        """Open the detail view for `name`. Returns False (state unchanged) if unknown."""
        if self._store.get(name) is None:
            logger.warning("Cannot open detail, recipe not found: %r", name)
            return False
        with self._lock:
            self._selected = name
        return True

    def clear(self) -> None:
        with self._lock:
            self._selected = None
