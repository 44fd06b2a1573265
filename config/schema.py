

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ─── ABLAGE DER OBSERVATIONEN ───

class StorageConfig(BaseModel):
    """Ort des JSON-Blobs mit allen Observationen."""
    # Verzeichnis für den Blob (relativ zum Arbeitsverzeichnis)
    data_dir: str = Field("storage",
        description="Verzeichnis für gespeicherte Observationen")
    # Name des Blobs (Dateiname ohne .json)
    blob_name: str = Field("hotel-observations", min_length=1,
        description="Name des Observations-Blobs")


# ─── AUSSTATTUNGS-IMPORT ───

class FixtureConfig(BaseModel):
    """Pfade für die Extraktion der Zimmerausstattung."""
    # Tab-getrennte Inventarliste
    input_path: str = Field("rooms_input.txt",
        description="Tab-getrennte Inventarliste")
    # Generiertes Python-Modul, das der Zimmerkatalog importiert
    module_path: str = Field("data/room_details.py",
        description="Generiertes Ausstattungsmodul")


# ─── VORSCHLÄGE ───

class SuggestionConfig(BaseModel):
    """Autovervollständigung beim Erfassen von Observationen."""
    # Maximale Anzahl angezeigter Vorschläge
    limit: int = Field(5, ge=1, le=20,
        description="Maximale Anzahl Vorschläge")


# ─── PROTOKOLLIERUNG ───

class LoggingConfig(BaseModel):
    """Log-Ausgabe über rich."""
    # Standard-Level (DEBUG, INFO, WARNING, ERROR)
    level: str = Field("WARNING",
        description="Log-Level")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unbekanntes Log-Level: '{v}'")
        return level


# ─── GESAMT-CONFIG ───

class AppConfig(BaseModel):
    """Gesamtkonfiguration des Hotelplans."""
    # Name des Hotels (Anzeige)
    hotel_name: str = Field("Hotel Arenal",
        description="Name des Hotels")
    # Ablage der Observationen
    storage: StorageConfig = Field(default_factory=StorageConfig)
    # Ausstattungs-Import
    fixtures: FixtureConfig = Field(default_factory=FixtureConfig)
    # Vorschläge
    suggestions: SuggestionConfig = Field(default_factory=SuggestionConfig)
    # Protokollierung
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
