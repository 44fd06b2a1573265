"""Hotelplan — Haupt-CLI für Zimmer-Observationen.

Verwendung:
  python main.py config init              Standard-Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen
  python main.py extract <liste.txt>      Ausstattung extrahieren (Build-Schritt)
  python main.py floor <n>                Etagenplan anzeigen
  python main.py room <nummer>            Zimmerdetails + Observationen
  python main.py note add <nummer> <text> Observation erfassen
  python main.py note delete <nummer> <id> Observation löschen
  python main.py note list                Alle Zimmer mit Observationen
  python main.py suggest <text>           Vorschläge aus der Mängelliste
  python main.py reset                    Alle Observationen löschen
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

console = Console()


def _setup_logging(level: str) -> None:
    """Richtet das Root-Logging einmalig über rich ein."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _open_book(config):
    """Öffnet das ObservationBook gemäß Konfiguration."""
    from store.book import ObservationBook
    from store.storage import ObservationStorage

    storage = ObservationStorage(Path(config.storage.data_dir), config.storage.blob_name)
    return ObservationBook.open(storage)


def _find_room_or_abort(number: str):
    from data.catalog import find_room

    room = find_room(number)
    if room is None or room.is_service:
        console.print(f"[red]Zimmer '{number}' existiert nicht.[/red]")
        sys.exit(1)
    return room


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Standard-Konfiguration an."""
    from config.defaults import default_app_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        return
    mgr.save(default_app_config())


@cmd_config.command("show")
@click.pass_obj
def config_show(config):
    """Zeigt die aktuelle Konfiguration an."""
    console.print(Panel(f"[bold]{escape(config.hotel_name)}[/bold]",
                        title="Hotel-Konfiguration", border_style="cyan"))

    table = Table(box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("Ablage", f"{config.storage.data_dir}/{config.storage.blob_name}.json")
    table.add_row("Inventarliste", config.fixtures.input_path)
    table.add_row("Ausstattungsmodul", config.fixtures.module_path)
    table.add_row("Vorschläge (max.)", str(config.suggestions.limit))
    table.add_row("Log-Level", config.logging.level)
    console.print(table)


# ─── EXTRACT ──────────────────────────────────────────────────────────────────

@click.command("extract")
@click.argument("datei", type=click.Path(path_type=Path), required=False)
@click.option("--output", "-o", default=None,
              help="Zielpfad (Standard: fixtures.module_path aus der Config).")
@click.option("--json", "as_json", is_flag=True, default=False,
              help="JSON statt Python-Modul ausgeben (auf stdout ohne --output).")
@click.pass_obj
def cmd_extract(config, datei, output, as_json: bool):
    """Extrahiert die Zimmerausstattung aus der tab-getrennten Inventarliste."""
    from data.fixture_extract import (
        FixtureImportError, extract_file, render_fixture_json, write_fixture_module,
    )

    source = datei or Path(config.fixtures.input_path)
    try:
        details = extract_file(source)
    except FixtureImportError as e:
        console.print(f"[red bold]Extraktion fehlgeschlagen:[/red bold]\n{e}")
        sys.exit(1)

    if as_json:
        text = render_fixture_json(details)
        if output is None:
            click.echo(text, nl=False)
            return
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    else:
        out_path = write_fixture_module(details, Path(output or config.fixtures.module_path))

    console.print(f"[green]✓[/green] {len(details)} Zimmer extrahiert: {out_path}")


# ─── FLOOR / ROOM ─────────────────────────────────────────────────────────────

@click.command("floor")
@click.argument("etage", type=int)
@click.pass_obj
def cmd_floor(config, etage: int):
    """Zeigt den Etagenplan mit markierten Observationen."""
    from data.catalog import get_floor_data
    from export.floor_view import print_floor

    try:
        floor_data = get_floor_data(etage)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    print_floor(floor_data, _open_book(config), console, hotel_name=config.hotel_name)


@click.command("room")
@click.argument("nummer")
@click.pass_obj
def cmd_room(config, nummer: str):
    """Zeigt Ausstattung und Observationen eines Zimmers."""
    from export.floor_view import print_room

    room = _find_room_or_abort(nummer)
    book = _open_book(config)
    print_room(room, book.observations(room.id), console)


# ─── NOTE ─────────────────────────────────────────────────────────────────────

@click.group("note")
def cmd_note():
    """Observationen erfassen, löschen, auflisten."""


@cmd_note.command("add")
@click.argument("nummer")
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def note_add(config, nummer: str, text: tuple[str, ...]):
    """Erfasst eine Observation für ein Zimmer."""
    from store.book import ObservationError

    room = _find_room_or_abort(nummer)
    book = _open_book(config)
    book.select(room.id)
    try:
        obs = book.add(" ".join(text))
    except ObservationError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    console.print(f"[green]✓[/green] Zimmer {room.number}: „{escape(obs.text)}“ [dim]({obs.id})[/dim]")


@cmd_note.command("delete")
@click.argument("nummer")
@click.argument("obs_id")
@click.pass_obj
def note_delete(config, nummer: str, obs_id: str):
    """Löscht eine Observation (ID oder eindeutiges ID-Präfix)."""
    obs_id = obs_id.strip()
    if not obs_id:
        console.print("[red]Keine Observation-ID angegeben.[/red]")
        sys.exit(1)
    room = _find_room_or_abort(nummer)
    book = _open_book(config)
    book.select(room.id)

    matches = [o for o in book.observations() if o.id.startswith(obs_id)]
    if len(matches) > 1:
        console.print(f"[red]ID-Präfix '{escape(obs_id)}' ist nicht eindeutig.[/red]")
        sys.exit(1)
    if not matches:
        console.print(f"[yellow]Keine Observation '{escape(obs_id)}' in Zimmer {room.number}.[/yellow]")
        return
    book.remove(matches[0].id)
    console.print(f"[green]✓[/green] Gelöscht: „{escape(matches[0].text)}“")


@cmd_note.command("list")
@click.option("--floor", "etage", type=int, default=None, help="Nur diese Etage.")
@click.pass_obj
def note_list(config, etage):
    """Listet alle Zimmer mit Observationen."""
    from data.catalog import find_room
    from export.floor_view import format_timestamp

    book = _open_book(config)
    table = Table(title="Observationen", box=box.ROUNDED)
    table.add_column("Zimmer", style="bold")
    table.add_column("Zeitpunkt")
    table.add_column("Text")

    for room_id in book.rooms_with_observations():
        room = find_room(room_id)
        if etage is not None and (room is None or room.floor != etage):
            continue
        label = room.number if room else f"{room_id} [dim](unbekannt)[/dim]"
        for obs in book.observations(room_id):
            table.add_row(label, format_timestamp(obs.timestamp), escape(obs.text))

    if not table.row_count:
        console.print("[dim]Keine Observationen vorhanden.[/dim]")
        return
    console.print(table)


# ─── SUGGEST ──────────────────────────────────────────────────────────────────

@click.command("suggest")
@click.argument("suchtext")
@click.option("--limit", type=int, default=None,
              help="Maximale Anzahl (Standard aus der Config).")
@click.pass_obj
def cmd_suggest(config, suchtext: str, limit):
    """Zeigt passende Einträge aus der Mängelliste."""
    from data.issues import get_all_issues
    from data.suggestions import suggest

    hits = suggest(get_all_issues(), suchtext,
                   limit=config.suggestions.limit if limit is None else limit)
    if not hits:
        console.print("[dim]Keine Vorschläge.[/dim]")
        return
    for hit in hits:
        console.print(f"  • {hit}")


# ─── RESET ────────────────────────────────────────────────────────────────────

@click.command("reset")
@click.option("--yes", is_flag=True, default=False, help="Ohne Rückfrage löschen.")
@click.pass_obj
def cmd_reset(config, yes: bool):
    """Löscht ALLE gespeicherten Observationen."""
    from store.storage import ObservationStorage

    storage = ObservationStorage(Path(config.storage.data_dir), config.storage.blob_name)
    if not storage.exists():
        console.print("[dim]Keine gespeicherten Observationen.[/dim]")
        return
    if not yes and not click.confirm("Wirklich alle Observationen löschen?", default=False):
        return
    storage.clear()
    console.print("[green]✓[/green] Alle Observationen gelöscht.")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgabe (DEBUG).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Hotelplan: Etagenpläne und Zimmer-Observationen.

    Starten Sie mit: python main.py floor 1
    """
    from config.manager import ConfigManager

    try:
        config = ConfigManager().load_or_default()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    _setup_logging("DEBUG" if verbose else config.logging.level)
    ctx.obj = config


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_config)
cli.add_command(cmd_extract)
cli.add_command(cmd_floor)
cli.add_command(cmd_room)
cli.add_command(cmd_note)
cli.add_command(cmd_suggest)
cli.add_command(cmd_reset)


if __name__ == "__main__":
    main()
