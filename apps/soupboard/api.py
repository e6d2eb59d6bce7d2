# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .catalog_store import CatalogError, CatalogStore
from .presenter import render_cards, render_detail
from .selection import SelectionState

logger = logging.getLogger(__name__)


def reload_if_stale(store: CatalogStore) -> None:
    """Re-read the data file if it changed; a failed read empties the catalog."""
    try:
        store.load(force=False)
    except CatalogError as e:
        logger.exception("Error loading recipes")
        store.mark_failed(str(e))


def get_store(request: Request) -> CatalogStore:
    """Resolve the catalog store from app state (with optional auto-reload)."""

    store: CatalogStore = request.app.state.store  # type: ignore[attr-defined]
    if bool(getattr(request.app.state, "auto_reload_catalog", False)) and store.path is not None:
        reload_if_stale(store)
    return store


def get_selection(request: Request) -> SelectionState:
    return request.app.state.selection  # type: ignore[attr-defined]


def _json(data: Dict[str, Any], *, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=data, status_code=status_code)


router = APIRouter(prefix="/api/v1")


class SelectRequest(BaseModel):
    name: str


@router.get("/meta")
def meta(store: CatalogStore = Depends(get_store)):
    return _json(
        {
            "count": store.count(),
            "supported": list(store.allowed),
            "data_path": str(store.path) if store.path else None,
            "load_error": store.load_error(),
        }
    )


@router.get("/recipes")
def recipes(store: CatalogStore = Depends(get_store)):
    cards = [c.to_dict() for c in render_cards(store)]
    return _json({"recipes": cards, "count": len(cards), "load_error": store.load_error()})


@router.get("/recipes/{name}")
def recipe_detail(name: str, store: CatalogStore = Depends(get_store)):
    detail = render_detail(store, name)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Recipe not found: {name}")
    return _json({"recipe": detail.to_dict()})


def _selection_payload(selection: SelectionState, store: CatalogStore) -> Dict[str, Any]:
    name: Optional[str] = selection.selected
    detail = render_detail(store, name) if name else None
    return {"open": detail is not None, "name": name, "recipe": detail.to_dict() if detail else None}


@router.get("/selection")
def selection_get(
    store: CatalogStore = Depends(get_store),
    selection: SelectionState = Depends(get_selection),
):
    return _json(_selection_payload(selection, store))


@router.post("/selection")
def selection_open(
    body: SelectRequest,
    store: CatalogStore = Depends(get_store),
    selection: SelectionState = Depends(get_selection),
):
    if not selection.select(body.name):
        raise HTTPException(status_code=404, detail=f"Recipe not found: {body.name}")
    return _json(_selection_payload(selection, store))


@router.delete("/selection")
def selection_close(
    store: CatalogStore = Depends(get_store),
    selection: SelectionState = Depends(get_selection),
):
    selection.clear()
    return _json(_selection_payload(selection, store))
