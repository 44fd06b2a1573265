"""Observationen je Zimmer: reine Operationen auf der Zuordnung.

Die Zuordnung room_id → Liste[Observation] ist nach Einfügereihenfolge
sortiert, neueste zuerst. Die Funktionen verändern ihre Eingabe nicht und
speichern NICHT selbst; der Aufrufer muss nach jeder Änderung
ObservationStorage.persist() aufrufen (ObservationBook erledigt das).
"""

import logging
import time
import uuid
from typing import Callable, Optional

from models.observation import Observation

logger = logging.getLogger(__name__)

ObservationMap = dict[str, list[Observation]]


def new_observation_id() -> str:
    return str(uuid.uuid4())


def now_ms() -> int:
    """Aktuelle Zeit in Millisekunden seit Epoche."""
    return int(time.time() * 1000)


def room_observations(store: ObservationMap, room_id: str) -> list[Observation]:
    """Observationen eines Zimmers (neueste zuerst); unbekanntes Zimmer → []."""
    return list(store.get(room_id, []))


def add_observation(
    store: ObservationMap,
    room_id: str,
    text: str,
    *,
    timestamp: Optional[int] = None,
    id_factory: Callable[[], str] = new_observation_id,
) -> tuple[ObservationMap, Observation]:
    """Legt eine neue Observation an und stellt sie an den Anfang der Zimmerliste.

    Der Text wird getrimmt. Leere Texte oder fehlende Zimmerauswahl prüft
    der Aufrufer, nicht diese Funktion.
    """
    observation = Observation(
        id=id_factory(),
        room_id=room_id,
        text=text.strip(),
        timestamp=now_ms() if timestamp is None else timestamp,
    )
    updated = dict(store)
    updated[room_id] = [observation, *store.get(room_id, [])]
    logger.info(f"Observation {observation.id} zu Zimmer {room_id} hinzugefügt")
    return updated, observation


def remove_observation(
    store: ObservationMap, room_id: str, observation_id: str
) -> ObservationMap:
    """Entfernt eine Observation; unbekanntes Zimmer oder ID ist kein Fehler."""
    current = store.get(room_id)
    if not current:
        return dict(store)
    remaining = [o for o in current if o.id != observation_id]
    updated = dict(store)
    updated[room_id] = remaining
    if len(remaining) != len(current):
        logger.info(f"Observation {observation_id} aus Zimmer {room_id} gelöscht")
    return updated
