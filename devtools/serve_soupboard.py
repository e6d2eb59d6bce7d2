#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Run SoupBoard server (FastAPI + Uvicorn).

Usage:
  python3 devtools/serve_soupboard.py --host 0.0.0.0 --port 8000 --no-open
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import uvicorn  # type: ignore

from apps.soupboard.app import create_app  # noqa: E402
from core.config import soupboard_config  # noqa: E402


def _default_path(env_key: str, ini_key: str) -> str:
    env = os.environ.get(env_key, "").strip()
    if env:
        return env
    p = soupboard_config.get_path("PATHS", ini_key)
    return str(p) if p else ""


def main() -> None:
    parser = argparse.ArgumentParser(description="SoupBoard (FastAPI) server.")
    parser.add_argument("--data", default=_default_path("SOUPBOARD_DATA_CSV", "DATA_CSV"), help="Recipe CSV path")
    parser.add_argument(
        "--pictures",
        default=_default_path("SOUPBOARD_PICTURES", "PICTURES_DIR"),
        help="Directory served as /Pictures (default: data dir/Pictures)",
    )
    parser.add_argument("--host", default=soupboard_config.get("SERVER", "HOST", fallback="127.0.0.1"))
    parser.add_argument("--port", type=int, default=soupboard_config.get_int("SERVER", "PORT", fallback=8000))
    parser.add_argument(
        "--root-path",
        default=soupboard_config.get("SERVER", "ROOT_PATH", fallback="") or "",
        help="Reverse proxy mount path, e.g. /soups",
    )
    parser.add_argument("--reload", action="store_true", help="Auto-reload code (development)")
    parser.add_argument("--reload-catalog", action="store_true", help="Re-read the CSV when it changes")
    parser.add_argument("--no-open", action="store_true", help="Do not open browser")
    parser.add_argument("--log-level", default="info", choices=["critical", "error", "warning", "info", "debug", "trace"])
    parser.add_argument("--cors-allow-origin", action="append", default=[], help="CORS allow origin (repeatable)")
    args = parser.parse_args()

    level = "DEBUG" if args.log_level == "trace" else args.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    data_path = Path(args.data).expanduser().resolve()
    if not data_path.exists():
        # the page still comes up and shows the load error message
        logging.getLogger(__name__).warning("Recipe data not found: %s", data_path)

    app = create_app(
        data_path=data_path,
        pictures_dir=(Path(args.pictures).expanduser().resolve() if args.pictures else None),
        root_path=args.root_path,
        cors_allow_origins=(args.cors_allow_origin or None),
        gzip_minimum_size=800,
        auto_reload_catalog=bool(args.reload_catalog),
    )

    host = str(args.host)
    port = int(args.port)
    rp = (args.root_path or "").rstrip("/")
    url = f"http://{'127.0.0.1' if host == '0.0.0.0' else host}:{port}{rp}/"
    print(f"SoupBoard: {url}")
    print(f"Data: {data_path}")

    if not args.no_open:
        try:
            webbrowser.open(url)
        except webbrowser.Error:
            pass

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=args.log_level,
        reload=bool(args.reload),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
