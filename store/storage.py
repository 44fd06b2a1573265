"""Dauerhafte Ablage der Observationen als einzelner JSON-Blob."""

import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from models.observation import Observation
from store.observations import ObservationMap

logger = logging.getLogger(__name__)

_MAP_ADAPTER = TypeAdapter(dict[str, list[Observation]])


class ObservationStorage:
    """Liest und schreibt die komplette Zuordnung room_id → Observationen.

    Es gibt nur vollständige Schnappschüsse, keine inkrementellen Updates.
    """

    def __init__(self, data_dir: Path, blob_name: str = "hotel-observations") -> None:
        self.data_dir = Path(data_dir)
        self.blob_name = blob_name

    @property
    def path(self) -> Path:
        return self.data_dir / f"{self.blob_name}.json"

    def exists(self) -> bool:
        return self.path.exists()

    # ─── Laden ───

    def load(self) -> ObservationMap:
        """Lädt den Blob. Fehlt er oder ist er ungültig → leere Zuordnung.

        Lese- und Formatfehler werden protokolliert, aber nie weitergereicht.
        """
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
            store = _MAP_ADAPTER.validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Observationen konnten nicht geladen werden ({self.path}): {e}")
            return {}
        return self._drop_duplicates(store)

    def _drop_duplicates(self, store: ObservationMap) -> ObservationMap:
        """Entfernt doppelte IDs je Zimmer (erste Fundstelle bleibt)."""
        cleaned: ObservationMap = {}
        for room_id, observations in store.items():
            seen: set[str] = set()
            kept = []
            for obs in observations:
                if obs.id in seen:
                    logger.warning(f"Doppelte Observation {obs.id} in Zimmer {room_id} verworfen")
                    continue
                seen.add(obs.id)
                kept.append(obs)
            cleaned[room_id] = kept
        return cleaned

    # ─── Speichern ───

    def persist(self, store: ObservationMap) -> None:
        """Überschreibt den Blob atomar (temporäre Datei + os.replace)."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        payload = _MAP_ADAPTER.dump_json(store, by_alias=True, indent=2)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.data_dir, prefix=f".{self.blob_name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"{sum(len(v) for v in store.values())} Observationen gespeichert: {self.path}")

    def clear(self) -> None:
        """Löscht den Blob endgültig."""
        self.path.unlink(missing_ok=True)
        logger.info(f"Observationen gelöscht: {self.path}")
