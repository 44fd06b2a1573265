from config.schema import (
    AppConfig,
    FixtureConfig,
    LoggingConfig,
    StorageConfig,
    SuggestionConfig,
)


def default_app_config() -> AppConfig:
    """Standard-Konfiguration: Blob unter storage/, 5 Vorschläge, Log-Level WARNING."""
    return AppConfig(
        hotel_name="Hotel Arenal",
        storage=StorageConfig(data_dir="storage", blob_name="hotel-observations"),
        fixtures=FixtureConfig(
            input_path="rooms_input.txt",
            module_path="data/room_details.py",
        ),
        suggestions=SuggestionConfig(limit=5),
        logging=LoggingConfig(level="WARNING"),
    )
