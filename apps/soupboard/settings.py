# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class SoupBoardSettings:
    """Runtime settings for SoupBoard server.

    Notes
    - data_path points to the recipe CSV (header line + one row per soup).
    - pictures_dir is served under /Pictures so image references resolve.
    - root_path is for reverse-proxy mount (e.g. '/soups')
    """

    data_path: Path
    pictures_dir: Optional[Path] = None
    root_path: str = ""
    cors_allow_origins: Optional[List[str]] = None
    gzip_minimum_size: int = 800
    auto_reload_catalog: bool = False

    @staticmethod
    def normalize_root_path(root_path: str) -> str:
        rp = (root_path or "").strip()
        if not rp:
            return ""
        if not rp.startswith("/"):
            rp = "/" + rp
        rp = rp.rstrip("/")
        return rp
