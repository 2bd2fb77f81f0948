from __future__ import annotations
import logging
from pathlib import Path
from typing import NoReturn
import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from shopping_list_editor.codec import MalformedDocument
from shopping_list_editor.config import Config
from shopping_list_editor.models import Entry
from shopping_list_editor.shopping_list import IndexOutOfRange, InvalidEntry, ShoppingList
from shopping_list_editor.store import ListStore

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(1)


def _load_config() -> Config:
    try:
        return Config()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e.errors()[0]['msg']}")


def _load_current(store: ListStore) -> ShoppingList:
    try:
        return store.load_current()
    except MalformedDocument as e:
        _fail(f"{escape(str(e))}\nRun [bold]shoplist new[/bold] to start over.")


def _check_quantity(quantity: int, config: Config) -> None:
    if not 0 <= quantity <= config.max_quantity:
        _fail(f"Quantity must be between 0 and {config.max_quantity}, got {quantity}.")


@click.group()
def cli():
    """Shopping list editor: keep a list of items and amounts, save it as JSON."""
    config = _load_config()
    logging.basicConfig(level=config.log_level)


@cli.command()
def new():
    """Start a new, empty shopping list."""
    ListStore().save_current(ShoppingList())
    console.print("\n[green]✓[/green] Started a new shopping list.")
    console.print("Run [bold]shoplist add[/bold] to add items.\n")


@cli.command()
@click.argument("name")
@click.argument("quantity", type=int, default=1)
def add(name: str, quantity: int):
    """Add an item with an amount to the end of the list."""
    _check_quantity(quantity, _load_config())
    store = ListStore()
    shopping_list = _load_current(store)
    entry = Entry(name=name, quantity=quantity)
    try:
        shopping_list.add(entry)
    except InvalidEntry as e:
        _fail(str(e))
    store.save_current(shopping_list)
    console.print(f"[green]✓[/green] Added: {escape(str(entry))}")


@cli.command()
@click.argument("index", type=int)
def remove(index: int):
    """Remove an item by its index (from 'list')."""
    store = ListStore()
    shopping_list = _load_current(store)
    try:
        removed = shopping_list.remove_at(index - 1)
    except IndexOutOfRange:
        _fail(f"Index {index} is out of range. Use 'shoplist list' to see valid indices.")
    store.save_current(shopping_list)
    console.print(f"[green]✓[/green] Removed: {escape(str(removed))}")


@cli.command()
@click.argument("index", type=int)
@click.argument("name")
@click.argument("quantity", type=int)
def replace(index: int, name: str, quantity: int):
    """Replace the item at INDEX, keeping its position in the list."""
    _check_quantity(quantity, _load_config())
    store = ListStore()
    shopping_list = _load_current(store)
    entry = Entry(name=name, quantity=quantity)
    try:
        previous = shopping_list.replace_at(index - 1, entry)
    except IndexOutOfRange:
        _fail(f"Index {index} is out of range. Use 'shoplist list' to see valid indices.")
    except InvalidEntry as e:
        _fail(str(e))
    store.save_current(shopping_list)
    console.print(f"[green]✓[/green] Replaced {escape(str(previous))} with {escape(str(entry))}")


@cli.command("list")
def list_entries():
    """Show the current shopping list."""
    shopping_list = _load_current(ListStore())
    if not len(shopping_list):
        console.print("The list is empty. Use [bold]shoplist add[/bold] to add items.")
        return

    table = Table(title="Shopping List")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Item", style="cyan")
    table.add_column("Amount", justify="right")

    for i, entry in enumerate(shopping_list, start=1):
        table.add_row(str(i), escape(entry.name), str(entry.quantity))

    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def save(path: Path):
    """Save the current list as a JSON file."""
    store = ListStore()
    shopping_list = _load_current(store)
    try:
        written = store.save_as(shopping_list, path)
    except OSError as e:
        _fail(f"Could not write {path}: {e.strerror or e}")
    console.print(f"[green]✓[/green] Saved {len(shopping_list)} item(s) to [bold]{escape(str(written))}[/bold]")


@cli.command("open")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def open_file(path: Path):
    """Replace the current list with the contents of a JSON file."""
    store = ListStore()
    try:
        entries = store.open_file(path)
    except (FileNotFoundError, MalformedDocument) as e:
        _fail(f"{escape(str(e))}\nThe current list was left unchanged.")
    except OSError as e:
        _fail(f"Could not read {escape(str(path))}: {e.strerror or e}\nThe current list was left unchanged.")
    store.save_current(ShoppingList(entries))
    console.print(f"[green]✓[/green] Opened {len(entries)} item(s) from [bold]{escape(str(path))}[/bold]")
