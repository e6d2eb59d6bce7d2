#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""apps/cli/soups.py

Terminal view of the soup catalog.

  soups list            catalog as a table (allow-list order)
  soups show <name>     detail view of one soup

Notes
- Thin UI layer; parsing and formatting live in apps.soupboard.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.soupboard.catalog_store import CatalogError, CatalogStore  # noqa: E402
from apps.soupboard.presenter import RecipeDetail, render_cards, render_detail  # noqa: E402
from apps.soupboard.ui import MSG_EMPTY, MSG_NO_COOK_TIME  # noqa: E402

console = Console()


def build_table(store: CatalogStore) -> Table:
    table = Table(title="EhCookWhat Soups", border_style="blue")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Cook time", style="white")
    table.add_column("Difficulty", style="magenta")
    table.add_column("Description", style="dim")
    for i, card in enumerate(render_cards(store), start=1):
        cook = card.cook_time or f"[red]{MSG_NO_COOK_TIME}[/red]"
        table.add_row(str(i), escape(card.name), cook, escape(card.difficulty), escape(card.description))
    return table


def build_detail_panel(detail: RecipeDetail) -> Panel:
    lines: List[str] = [
        f"[bold]Cook time:[/bold] {detail.cook_time or MSG_NO_COOK_TIME}",
        f"[bold]Difficulty:[/bold] {escape(detail.difficulty)}",
        "",
        "[bold]Ingredients[/bold]",
    ]
    lines += [f"  • {escape(x)}" for x in detail.ingredients]
    lines += ["", f"[bold]Instructions[/bold] [dim]({detail.instruction_format.value})[/dim]"]
    lines += [f"  {i}. {escape(x)}" for i, x in enumerate(detail.instructions, start=1)]
    lines += ["", f"[dim]Source: {escape(detail.source)}[/dim]"]
    return Panel("\n".join(lines), title=f"[cyan]{escape(detail.name)}[/cyan]", border_style="blue")


def main(argv: Optional[List[str]] = None) -> int:
    from core.config import soupboard_config

    default_data = soupboard_config.get_path("PATHS", "DATA_CSV")
    parser = argparse.ArgumentParser(prog="soups", description="Soup catalog viewer")
    parser.add_argument("--data", default=str(default_data) if default_data else None, help="Recipe CSV path")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list", help="List the catalog")
    p_show = sub.add_parser("show", help="Show one recipe")
    p_show.add_argument("name", nargs="+")
    args = parser.parse_args(argv)

    if not args.data:
        console.print("[red]No recipe data configured (--data)[/red]")
        return 2

    store = CatalogStore(Path(args.data).expanduser())
    try:
        store.load(force=True)
    except CatalogError as e:
        console.print(f"[red]Error loading recipes: {escape(str(e))}[/red]")
        return 1

    if args.command == "show":
        name = " ".join(args.name)
        detail = render_detail(store, name)
        if detail is None:
            console.print(f"[red]Recipe not found: {escape(name)}[/red]")
            return 1
        console.print(build_detail_panel(detail))
        return 0

    if store.count() == 0:
        console.print(f"[yellow]{MSG_EMPTY}[/yellow]")
        return 0
    console.print(build_table(store))
    return 0


if __name__ == "__main__":
    sys.exit(main())
