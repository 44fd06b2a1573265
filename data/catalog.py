"""Zimmerkatalog: Anordnung der Zimmer je Etage.

Jede Etage (1–9) hat dieselbe Grundform: sechs Zimmer in der oberen Reihe
(Meerblick), links und rechts je eine Spalte entlang des Flurs mit einem
Servicebereich. Zimmernummern sind Etage + zweistellige Position, z.B. 125.
Die Ausstattung stammt aus dem generierten Modul data/room_details.py.
"""

import re
from typing import Optional

from data.room_details import ROOM_DETAILS
from models.room import FloorData, Room, RoomType

FLOORS = range(1, 10)

_ROOM_NUMBER = re.compile(r"[0-9]+")

# Positionen je Etage; None markiert einen Servicebereich
_TOP = ["01", "02", "03", "04", "05", "06"]
_LEFT = ["07", "08", "09", "10", "11", None, "12", "13", "14", "15", "16"]
_RIGHT = ["17", "18", "19", "20", "21", None, "22", "23", "24", "25", "26"]

_SIDE_TYPES = {"top": RoomType.PVM, "left": RoomType.PREMIUM, "right": RoomType.STANDARD}
_SERVICE_LABELS = {"left": "AUFZUG", "right": "FLUR"}

# Barrierefreie Zimmer laut Legende des Etagenplans
ACCESSIBLE_ROOMS = frozenset(
    ["125", "126", "225"] + [f"{floor}26" for floor in range(2, 10)]
)


def room_id_for(number: str) -> str:
    """Stabile Zimmer-ID aus der Zimmernummer: "101" → "1-101"."""
    number = number.strip()
    if len(number) < 3 or not _ROOM_NUMBER.fullmatch(number):
        raise ValueError(f"Ungültige Zimmernummer: '{number}'")
    return f"{int(number[:-2])}-{number}"


def _make_room(floor: int, position: Optional[str], side: str) -> Room:
    if position is None:
        label = _SERVICE_LABELS[side]
        return Room(
            id=f"{floor}-{label}",
            number="",
            floor=floor,
            room_type=RoomType.SERVICE,
            label=label,
        )
    number = f"{floor}{position}"
    return Room(
        id=room_id_for(number),
        number=number,
        floor=floor,
        room_type=_SIDE_TYPES[side],
        is_accessible=number in ACCESSIBLE_ROOMS,
        **ROOM_DETAILS.get(number, {}),
    )


def get_floor_data(floor: int) -> FloorData:
    """Gibt die Zimmeranordnung einer Etage zurück."""
    if floor not in FLOORS:
        raise ValueError(
            f"Etage {floor} existiert nicht (erlaubt: {FLOORS.start}–{FLOORS.stop - 1})"
        )
    return FloorData(
        floor=floor,
        top_rooms=[_make_room(floor, p, "top") for p in _TOP],
        left_rooms=[_make_room(floor, p, "left") for p in _LEFT],
        right_rooms=[_make_room(floor, p, "right") for p in _RIGHT],
    )


def find_room(key: str) -> Optional[Room]:
    """Sucht ein Zimmer über Zimmernummer ("101") oder Zimmer-ID ("1-101")."""
    key = key.strip()
    number = key.split("-", 1)[1] if "-" in key else key
    try:
        room_id = room_id_for(number)
    except ValueError:
        return None
    if "-" in key and key != room_id:
        return None
    floor = int(room_id.split("-", 1)[0])
    if floor not in FLOORS:
        return None
    return next(
        (r for r in get_floor_data(floor).all_rooms() if r.id == room_id),
        None,
    )
