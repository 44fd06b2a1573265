"""Datenmodell für die Zimmerausstattung (Kopfteil, TV, Safe)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class FixtureRecord(BaseModel):
    """Ausstattungs-Codes eines Zimmers.

    Jedes Feld ist nur gesetzt, wenn die Quellzelle nach dem Trimmen nicht
    leer war. Ein Datensatz ohne ein einziges Feld wird nie erzeugt.
    """

    model_config = ConfigDict(frozen=True)

    headboard: Optional[str] = None  # Kopfteil-Modell, z.B. "H1"
    tv: Optional[str] = None         # TV-Modell
    safe: Optional[str] = None       # Safe-Modell

    @property
    def is_empty(self) -> bool:
        return not (self.headboard or self.tv or self.safe)

    def as_dict(self) -> dict[str, str]:
        """Nur die gesetzten Felder (dünnbesetzte Form für den Export)."""
        return self.model_dump(exclude_none=True)
