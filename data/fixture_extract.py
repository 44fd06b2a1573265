"""Ausstattungs-Import aus der tab-getrennten Zimmerliste.

Die Inventarliste packt pro Zeile beliebig viele Vierergruppen
(Zimmernummer, Kopfteil, TV, Safe) nebeneinander. Das Ergebnis wird als
generiertes Python-Modul (data/room_details.py) eingecheckt und vom
Zimmerkatalog eingelesen; die Extraktion läuft also nur zur Build-Zeit.
"""

import json
import logging
import re
from pathlib import Path

from models.fixture import FixtureRecord

logger = logging.getLogger(__name__)

GROUP_SIZE = 4

_ROOM_NUMBER = re.compile(r"[0-9]+")

_MODULE_HEADER = '''\
"""Zimmerausstattung (Kopfteil, TV, Safe) je Zimmernummer.

GENERIERT von `python main.py extract` — nicht von Hand bearbeiten.
"""

'''


class FixtureImportError(Exception):
    """Fehler beim Lesen der Inventarliste."""


def _groups(cells: list[str]):
    """Zerlegt eine Zeile in Vierergruppen; fehlende Zellen gelten als leer."""
    for start in range(0, len(cells), GROUP_SIZE):
        group = cells[start:start + GROUP_SIZE]
        group += [""] * (GROUP_SIZE - len(group))
        yield [c.strip() for c in group]


def extract(raw_text: str) -> dict[str, FixtureRecord]:
    """Wandelt die Inventarliste in eine Zuordnung Zimmernummer → Ausstattung.

    Regeln:
    - Leere Zeilen werden verworfen.
    - Gruppen, deren erste Zelle keine reine Ziffernfolge ist, werden
      übersprungen (Überschriften, Lücken zwischen Tabellenspalten).
    - Ein Datensatz entsteht nur, wenn mindestens Kopfteil, TV oder Safe
      gesetzt ist. Eine spätere leere Gruppe für dasselbe Zimmer löscht
      einen früheren Datensatz NICHT.
    """
    details: dict[str, FixtureRecord] = {}
    skipped = 0

    for line in raw_text.split("\n"):
        if not line.strip():
            continue
        for room, headboard, tv, safe in _groups(line.split("\t")):
            if not _ROOM_NUMBER.fullmatch(room):
                skipped += 1
                continue
            if not (headboard or tv or safe):
                continue
            details[room] = FixtureRecord(
                headboard=headboard or None,
                tv=tv or None,
                safe=safe or None,
            )

    logger.debug(f"Ausstattung: {len(details)} Zimmer erkannt, {skipped} Gruppen übersprungen")
    return details


def extract_file(path: Path) -> dict[str, FixtureRecord]:
    """Liest die Inventarliste (UTF-8) und extrahiert die Ausstattung."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureImportError(f"Inventarliste nicht lesbar: {path} ({e})") from e
    return extract(raw)


def _sorted_payload(details: dict[str, FixtureRecord]) -> dict[str, dict[str, str]]:
    return {room: details[room].as_dict() for room in sorted(details, key=int)}


def render_fixture_json(details: dict[str, FixtureRecord]) -> str:
    """Gibt die Ausstattung als JSON-Text zurück (Zimmer numerisch sortiert)."""
    return json.dumps(_sorted_payload(details), indent=2, ensure_ascii=False) + "\n"


def render_fixture_module(details: dict[str, FixtureRecord]) -> str:
    """Erzeugt den Quelltext von data/room_details.py."""
    # Ein JSON-Objekt aus Strings ist zugleich ein gültiges Python-Literal.
    body = json.dumps(_sorted_payload(details), indent=4, ensure_ascii=False)
    return _MODULE_HEADER + f"ROOM_DETAILS: dict[str, dict[str, str]] = {body}\n"


def write_fixture_module(details: dict[str, FixtureRecord], path: Path) -> Path:
    """Schreibt das generierte Modul und gibt den Pfad zurück."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(render_fixture_module(details))
    logger.info(f"Ausstattungsmodul geschrieben: {path} ({len(details)} Zimmer)")
    return path
