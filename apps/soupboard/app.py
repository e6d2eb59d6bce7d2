# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from .api import get_store, reload_if_stale, router as api_router
from .catalog_store import CatalogStore
from .presenter import render_cards, render_detail
from .selection import SelectionState
from .settings import SoupBoardSettings
from .ui import render_index_html

logger = logging.getLogger(__name__)


def create_app(
    data_path: Path,
    *,
    pictures_dir: Optional[Path] = None,
    root_path: str = "",
    cors_allow_origins: Optional[Sequence[str]] = None,
    gzip_minimum_size: int = 800,
    auto_reload_catalog: bool = False,
) -> FastAPI:
    """FastAPI app factory.

    The catalog is loaded once here. A load failure is logged and leaves the
    catalog empty; the page then shows a static error message instead of cards.
    """

    settings = SoupBoardSettings(
        data_path=Path(data_path),
        pictures_dir=Path(pictures_dir) if pictures_dir else None,
        root_path=SoupBoardSettings.normalize_root_path(root_path),
        cors_allow_origins=list(cors_allow_origins) if cors_allow_origins else None,
        gzip_minimum_size=int(gzip_minimum_size),
        auto_reload_catalog=bool(auto_reload_catalog),
    )

    app = FastAPI(
        title="SoupBoard API",
        version="1.0",
        root_path=settings.root_path,
        docs_url="/docs",
        redoc_url=None,
    )
    app.state.settings = settings

    # static: image references are "Pictures/<file>"
    pics = settings.pictures_dir or (settings.data_path.parent / "Pictures")
    app.mount("/Pictures", StaticFiles(directory=str(pics), check_dir=False), name="pictures")

    # state
    store = CatalogStore(settings.data_path)
    reload_if_stale(store)
    app.state.store = store
    app.state.selection = SelectionState(store)
    app.state.auto_reload_catalog = settings.auto_reload_catalog

    # middleware
    if settings.gzip_minimum_size > 0:
        app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # routes
    app.include_router(api_router)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, recipe: Optional[str] = None):
        # root_path is already applied by FastAPI; still need it for link prefixing
        root = request.scope.get("root_path") or ""
        st = get_store(request)
        selection: SelectionState = request.app.state.selection

        # ?recipe=<name> opens the overlay; anything else (incl. unknown names) closes it
        if not (recipe and selection.select(recipe)):
            selection.clear()

        detail = render_detail(st, selection.selected) if selection.is_open() else None
        return HTMLResponse(
            render_index_html(
                render_cards(st),
                detail=detail,
                load_error=st.load_error(),
                app_root=str(root),
            )
        )

    return app
