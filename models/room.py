"""Datenmodell für Zimmer und Etagen (Pydantic v2)."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from models.fixture import FixtureRecord


class RoomType(str, Enum):
    PVM = "PVM"
    PREMIUM = "PREMIUM"
    STANDARD = "STANDARD"
    SERVICE = "SERVICE"


class Room(BaseModel):
    """Ein Zimmer (oder ein Servicebereich) im Etagenplan."""

    id: str                          # "1-101", "3-AUFZUG"
    number: str                      # "101"; leer bei Servicebereichen
    floor: int
    room_type: RoomType
    is_accessible: bool = False
    label: Optional[str] = None      # Nur Servicebereiche: "AUFZUG", "FLUR"
    headboard: Optional[str] = None
    tv: Optional[str] = None
    safe: Optional[str] = None

    @property
    def is_service(self) -> bool:
        return self.room_type == RoomType.SERVICE

    @property
    def fixtures(self) -> FixtureRecord:
        """Ausstattung des Zimmers als FixtureRecord."""
        return FixtureRecord(headboard=self.headboard, tv=self.tv, safe=self.safe)

    @property
    def display_name(self) -> str:
        return self.label if self.is_service and self.label else self.number


class FloorData(BaseModel):
    """Anordnung einer Etage: obere Reihe, linke und rechte Spalte."""

    floor: int
    top_rooms: list[Room]
    left_rooms: list[Room]
    right_rooms: list[Room]

    def all_rooms(self) -> list[Room]:
        """Alle Einträge der Etage in Anzeigereihenfolge."""
        return [*self.top_rooms, *self.left_rooms, *self.right_rooms]
