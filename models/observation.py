"""Datenmodell für eine Zimmer-Observation (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field

# 31.12.9999 00:00 UTC; datetime kann größere Werte nicht darstellen
MAX_TIMESTAMP_MS = 253_402_214_400_000


class Observation(BaseModel):
    """Eine Notiz mit Zeitstempel zu genau einem Zimmer.

    Nach dem Anlegen unveränderlich; es gibt nur Löschen, kein Bearbeiten.
    Serialisiert als {id, roomId, text, timestamp}.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    room_id: str = Field(alias="roomId")  # Room.id, wird nicht gegen den Katalog geprüft
    text: str
    timestamp: int = Field(ge=0, le=MAX_TIMESTAMP_MS)  # Millisekunden seit Epoche
