"""ObservationBook: Zimmer-Observationen mit Auswahl und automatischem Speichern.

Dies ist die Schnittstelle für CLI und Anzeige. Jede Änderung wird sofort
als kompletter Schnappschuss gespeichert, sodass der Blob nach jeder
Aktion dem Stand im Speicher entspricht.
"""

import logging
from typing import Optional

from models.observation import Observation
from store.observations import (
    ObservationMap,
    add_observation,
    remove_observation,
    room_observations,
)
from store.storage import ObservationStorage

logger = logging.getLogger(__name__)


class ObservationError(Exception):
    """Observation wurde abgelehnt (kein Zimmer gewählt, leerer Text)."""


class ObservationBook:
    def __init__(self, storage: ObservationStorage, store: Optional[ObservationMap] = None) -> None:
        self.storage = storage
        self._store: ObservationMap = dict(store or {})
        self.selected_room_id: Optional[str] = None

    @classmethod
    def open(cls, storage: ObservationStorage) -> "ObservationBook":
        """Erzeugt ein Buch mit dem gespeicherten Stand."""
        return cls(storage, storage.load())

    # ─── Auswahl ───

    def select(self, room_id: str) -> None:
        self.selected_room_id = room_id

    def clear_selection(self) -> None:
        self.selected_room_id = None

    def _target(self, room_id: Optional[str]) -> str:
        target = room_id or self.selected_room_id
        if not target:
            raise ObservationError("Kein Zimmer ausgewählt.")
        return target

    # ─── Änderungen ───

    def add(self, text: str, room_id: Optional[str] = None) -> Observation:
        """Fügt eine Observation hinzu und speichert sofort."""
        target = self._target(room_id)
        if not text.strip():
            raise ObservationError("Leere Observation wird nicht gespeichert.")
        self._store, observation = add_observation(self._store, target, text)
        self.storage.persist(self._store)
        return observation

    def remove(self, observation_id: str, room_id: Optional[str] = None) -> bool:
        """Löscht eine Observation und speichert; True wenn etwas entfernt wurde."""
        target = self._target(room_id)
        before = len(self._store.get(target, []))
        self._store = remove_observation(self._store, target, observation_id)
        self.storage.persist(self._store)
        removed = len(self._store.get(target, [])) < before
        if not removed:
            logger.debug(f"Observation {observation_id} in Zimmer {target} nicht gefunden")
        return removed

    # ─── Abfragen ───

    def observations(self, room_id: Optional[str] = None) -> list[Observation]:
        target = room_id or self.selected_room_id
        if not target:
            return []
        return room_observations(self._store, target)

    def has_observations(self, room_id: str) -> bool:
        return bool(self._store.get(room_id))

    def rooms_with_observations(self) -> list[str]:
        """Zimmer-IDs mit mindestens einer Observation (Einfügereihenfolge)."""
        return [room_id for room_id, obs in self._store.items() if obs]

    def snapshot(self) -> ObservationMap:
        """Kopie der aktuellen Zuordnung."""
        return {room_id: list(obs) for room_id, obs in self._store.items()}
