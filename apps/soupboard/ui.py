# -*- coding: utf-8 -*-
from __future__ import annotations

from html import escape
from typing import List, Optional, Sequence
from urllib.parse import quote

from .presenter import RecipeCard, RecipeDetail

# NOTE:
# - Keep HTML/CSS/JS as a normal triple-quoted string.
# - Do NOT use Python f-strings here: the template contains many `{}` (CSS/JS).

_PAGE_TEMPLATE = r"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <meta name="app-root" content="__SOUPBOARD_APP_ROOT__" />
  <title>EhCookWhat Soups</title>
  <style>
    :root {
      --bg: #fdf8f3;
      --panel: #ffffff;
      --text: #3d2c22;
      --muted: #8a7264;
      --border: #eadbcf;
      --accent: #c97d60;
    }
    html, body {
      margin: 0; padding: 0;
      background: var(--bg);
      color: var(--text);
      font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial;
    }
    body.modal-open { overflow: hidden; }
    a { color: var(--accent); text-decoration: none; }
    .topbar {
      padding: 18px 24px;
      border-bottom: 1px solid var(--border);
      background: var(--panel);
    }
    .topbar h1 { margin: 0; font-size: 22px; color: var(--accent); }
    .recipe-grid {
      display: grid;
      grid-template-columns: repeat(auto-fill, minmax(260px, 1fr));
      gap: 18px;
      padding: 24px;
    }
    .recipe-card {
      background: var(--panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      overflow: hidden;
      display: flex;
      flex-direction: column;
    }
    .recipe-card-image { width: 100%; height: 170px; object-fit: cover; background: var(--border); }
    .recipe-card-content { padding: 14px; display: flex; flex-direction: column; gap: 8px; flex: 1; }
    .recipe-card-title { margin: 0; font-size: 17px; }
    .recipe-card-badges { display: flex; gap: 6px; flex-wrap: wrap; }
    .recipe-badge {
      font-size: 12px;
      padding: 3px 8px;
      border-radius: 999px;
      border: 1px solid var(--border);
      color: var(--muted);
    }
    .recipe-card-description { margin: 0; color: var(--muted); font-size: 14px; flex: 1; }
    .recipe-card-button {
      align-self: flex-start;
      padding: 8px 12px;
      border-radius: 8px;
      background: var(--accent);
      color: #fff;
    }
    .message { color: #C97D60; text-align: center; grid-column: 1 / -1; }
    .modal {
      position: fixed; inset: 0;
      background: rgba(61, 44, 34, 0.55);
      overflow: auto;
    }
    .modal-content {
      max-width: 720px;
      margin: 40px auto;
      background: var(--panel);
      border-radius: 12px;
      overflow: hidden;
    }
    .modal-image { width: 100%; max-height: 300px; object-fit: cover; }
    .modal-body { padding: 18px 24px 24px; }
    .modal-close { float: right; font-size: 26px; line-height: 1; color: var(--muted); }
    .modal-meta { display: flex; gap: 10px; color: var(--muted); font-size: 14px; }
    .modal-source { color: var(--muted); font-size: 12px; margin-top: 16px; }
  </style>
</head>
<body class="__SOUPBOARD_BODY_CLASS__">
  <div class="topbar"><h1>EhCookWhat Soups</h1></div>
  <div class="recipe-grid" id="recipeGrid">
__SOUPBOARD_GRID__
  </div>
__SOUPBOARD_MODAL__
  <script>
    const APP_ROOT = (document.querySelector('meta[name="app-root"]')?.content || '').replace(/\/+$/,'');
    function closeRecipeModal() { window.location.href = APP_ROOT + '/'; }
    const modal = document.getElementById('recipeModal');
    if (modal) {
      modal.addEventListener('click', (e) => { if (e.target === modal) closeRecipeModal(); });
      document.addEventListener('keydown', (e) => { if (e.key === 'Escape') closeRecipeModal(); });
    }
  </script>
</body>
</html>
"""

MSG_LOAD_ERROR = "Error loading recipes. Please try again later."
MSG_EMPTY = "No recipes available at the moment."
MSG_NO_COOK_TIME = "Cook time unavailable"


def _asset_url(app_root: str, ref: str) -> str:
    return f"{app_root}/{ref.lstrip('/')}"


def _cook_time_label(cook_time: Optional[str]) -> str:
    return cook_time if cook_time is not None else MSG_NO_COOK_TIME


def render_card_html(card: RecipeCard, app_root: str = "") -> str:
    name = escape(card.name)
    href = f"{app_root}/?recipe={quote(card.name)}"
    return (
        '    <div class="recipe-card">\n'
        f'      <img src="{escape(_asset_url(app_root, card.image))}" alt="{name}" class="recipe-card-image">\n'
        '      <div class="recipe-card-content">\n'
        f'        <h3 class="recipe-card-title">{name}</h3>\n'
        '        <div class="recipe-card-badges">\n'
        f'          <span class="recipe-badge time">&#9201; {escape(_cook_time_label(card.cook_time))}</span>\n'
        f'          <span class="recipe-badge difficulty">&#128293; {escape(card.difficulty)}</span>\n'
        '        </div>\n'
        f'        <p class="recipe-card-description">{escape(card.description)}</p>\n'
        f'        <a class="recipe-card-button" href="{escape(href)}">View Full Recipe</a>\n'
        '      </div>\n'
        '    </div>'
    )


def render_grid_html(cards: Sequence[RecipeCard], *, load_error: Optional[str] = None, app_root: str = "") -> str:
    """Card grid body, or the static fallback message."""
    if load_error:
        return f'    <p class="message">{escape(MSG_LOAD_ERROR)}</p>'
    if not cards:
        return f'    <p class="message">{escape(MSG_EMPTY)}</p>'
    return "\n".join(render_card_html(c, app_root=app_root) for c in cards)


def render_detail_html(detail: RecipeDetail, app_root: str = "") -> str:
    ingredients = "".join(f"<li>{escape(x)}</li>" for x in detail.ingredients)
    instructions = "".join(f"<li>{escape(x)}</li>" for x in detail.instructions)
    return (
        '  <div class="modal active" id="recipeModal" style="display: block">\n'
        '    <div class="modal-content">\n'
        f'      <img id="modalImage" class="modal-image" src="{escape(_asset_url(app_root, detail.image))}" alt="{escape(detail.name)}">\n'
        '      <div class="modal-body">\n'
        f'        <a class="modal-close" href="{escape(app_root)}/" title="Close">&times;</a>\n'
        f'        <h2 id="modalTitle">{escape(detail.name)}</h2>\n'
        '        <div class="modal-meta">\n'
        f'          <span id="modalCookTime">{escape(_cook_time_label(detail.cook_time))}</span>\n'
        f'          <span id="modalDifficulty">{escape(detail.difficulty)}</span>\n'
        '        </div>\n'
        '        <h3>Ingredients</h3>\n'
        f'        <ul id="modalIngredients">{ingredients}</ul>\n'
        '        <h3>Instructions</h3>\n'
        f'        <ol id="modalInstructions" data-format="{detail.instruction_format.value}">{instructions}</ol>\n'
        f'        <p class="modal-source">Source: {escape(detail.source)}</p>\n'
        '      </div>\n'
        '    </div>\n'
        '  </div>'
    )


def render_index_html(
    cards: List[RecipeCard],
    *,
    detail: Optional[RecipeDetail] = None,
    load_error: Optional[str] = None,
    app_root: str = "",
) -> str:
    """Render the catalog page (grid + optional detail overlay)."""
    root = (app_root or "").rstrip("/")
    return (
        _PAGE_TEMPLATE.replace("__SOUPBOARD_APP_ROOT__", escape(root))
        .replace("__SOUPBOARD_BODY_CLASS__", "modal-open" if detail is not None else "")
        .replace("__SOUPBOARD_GRID__", render_grid_html(cards, load_error=load_error, app_root=root))
        .replace("__SOUPBOARD_MODAL__", render_detail_html(detail, app_root=root) if detail is not None else "")
    )
