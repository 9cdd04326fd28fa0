"""
Commandes CLI de gestion de la liste "My List".
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.helpers import console, with_container
from src.adapters.cli.rendering import render_items

mylist_app = typer.Typer(help="Gestion de la liste My List")

ItemId = Annotated[int, typer.Argument(help="ID TMDB")]


@mylist_app.command("list")
def mylist_list() -> None:
    """Affiche les elements sauvegardes (resolus via TMDB)."""
    asyncio.run(_mylist_list_async())


@with_container()
async def _mylist_list_async(container) -> None:
    """Implementation async de la commande mylist list."""
    service = container.saved_items_service()
    item_ids = service.list_ids()
    if not item_ids:
        console.print("[yellow]La liste est vide.[/yellow]")
        return

    items = await service.resolve_saved()
    render_items("My List", items)

    missing = len(item_ids) - len(items)
    if missing > 0:
        console.print(f"[dim]{missing} element(s) introuvable(s) sur TMDB[/dim]")


@mylist_app.command("add")
def mylist_add(item_id: ItemId) -> None:
    """Ajoute un element a la liste."""
    asyncio.run(_mylist_update_async("add", item_id))


@mylist_app.command("remove")
def mylist_remove(item_id: ItemId) -> None:
    """Retire un element de la liste."""
    asyncio.run(_mylist_update_async("remove", item_id))


@mylist_app.command("toggle")
def mylist_toggle(item_id: ItemId) -> None:
    """Ajoute ou retire un element selon sa presence."""
    asyncio.run(_mylist_update_async("toggle", item_id))


@with_container(requires_tmdb=False)
async def _mylist_update_async(container, action: str, item_id: int) -> None:
    """Implementation commune de add / remove / toggle."""
    service = container.saved_items_service()

    if action == "add":
        changed = service.add(item_id)
        message = "ajoute" if changed else "deja present"
    elif action == "remove":
        changed = service.remove(item_id)
        message = "retire" if changed else "absent de la liste"
    else:
        message = "ajoute" if service.toggle(item_id) else "retire"

    console.print(f"[green]✓[/green] {item_id} {message}")
