"""Terminal-Anzeige des Etagenplans und der Zimmerdetails.

Die render_*-Funktionen liefern reine Tabellenzeilen, die print_*-Funktionen
geben sie über rich aus.
"""

from datetime import datetime
from itertools import zip_longest
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from models.observation import Observation
from models.room import FloorData, Room
from store.book import ObservationBook

ACCESSIBLE_MARK = "♿"
NOTE_MARK = "●"


def format_timestamp(timestamp: int) -> str:
    """Millisekunden seit Epoche → lokale Zeit 'DD.MM.YYYY HH:MM'."""
    return datetime.fromtimestamp(timestamp / 1000).strftime("%d.%m.%Y %H:%M")


def room_cell(room: Optional[Room], note_count: int = 0) -> str:
    """Zellentext für ein Zimmer: Nummer, Barrierefreiheit, Anzahl Observationen."""
    if room is None:
        return ""
    if room.is_service:
        return f"── {room.display_name} ──"
    parts = [room.number]
    if room.is_accessible:
        parts.append(ACCESSIBLE_MARK)
    if note_count:
        parts.append(f"{NOTE_MARK}{note_count}")
    return " ".join(parts)


def _count(book: ObservationBook, room: Optional[Room]) -> int:
    if room is None or room.is_service:
        return 0
    return len(book.observations(room.id))


def render_top_row(floor_data: FloorData, book: ObservationBook) -> list[str]:
    """Zellen der oberen Zimmerreihe (Meerseite)."""
    return [room_cell(r, _count(book, r)) for r in floor_data.top_rooms]


def render_floor_rows(floor_data: FloorData, book: ObservationBook) -> list[list[str]]:
    """Zeilen für linke und rechte Spalte: [links, Flur, rechts]."""
    rows: list[list[str]] = []
    for left, right in zip_longest(floor_data.left_rooms, floor_data.right_rooms):
        rows.append([
            room_cell(left, _count(book, left)),
            "│",
            room_cell(right, _count(book, right)),
        ])
    return rows


def render_observation_rows(observations: list[Observation]) -> list[list[str]]:
    """Zeilen [ID, Zeitpunkt, Text] in gespeicherter Reihenfolge (neueste zuerst)."""
    return [[o.id, format_timestamp(o.timestamp), o.text] for o in observations]


def print_floor(
    floor_data: FloorData,
    book: ObservationBook,
    console: Optional[Console] = None,
    hotel_name: str = "",
) -> None:
    console = console or Console()

    top = Table(box=box.SQUARE, show_header=False, title="Meer / Süden")
    for _ in floor_data.top_rooms:
        top.add_column(justify="center", min_width=8)
    top.add_row(*render_top_row(floor_data, book))
    console.print(top)

    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("Links", justify="left", min_width=14)
    table.add_column("", justify="center")
    table.add_column("Rechts", justify="right", min_width=14)
    for row in render_floor_rows(floor_data, book):
        table.add_row(*row)
    console.print(table)

    title = f"Etage {floor_data.floor}" + (f" — {escape(hotel_name)}" if hotel_name else "")
    console.print(Panel(
        f"[bold]{NOTE_MARK}[/bold] mit Observationen  |  "
        f"{ACCESSIBLE_MARK} barrierefrei  |  Straße / Norden ↓",
        title=title,
        border_style="cyan",
    ))


def print_room(
    room: Room,
    observations: list[Observation],
    console: Optional[Console] = None,
) -> None:
    console = console or Console()

    fixtures = room.fixtures
    lines = [
        f"[bold]Typ:[/bold] {room.room_type.value}"
        + ("  [bold]barrierefrei[/bold]" if room.is_accessible else ""),
    ]
    if fixtures.is_empty:
        lines.append("[dim]Keine Ausstattung erfasst.[/dim]")
    else:
        lines += [
            f"[bold]Kopfteil:[/bold] {escape(fixtures.headboard or '—')}",
            f"[bold]TV:[/bold] {escape(fixtures.tv or '—')}",
            f"[bold]Safe:[/bold] {escape(fixtures.safe or '—')}",
        ]
    console.print(Panel("\n".join(lines), title=f"Zimmer {room.number}", border_style="cyan"))

    if not observations:
        console.print("[dim]Keine Observationen erfasst.[/dim]")
        return

    table = Table(title="Observationen", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Zeitpunkt")
    table.add_column("Text", style="bold")
    for obs_id, when, text in render_observation_rows(observations):
        table.add_row(obs_id, when, escape(text))
    console.print(table)
