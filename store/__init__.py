from store.observations import (
    ObservationMap,
    add_observation,
    remove_observation,
    room_observations,
)
from store.storage import ObservationStorage
from store.book import ObservationBook, ObservationError

__all__ = [
    "ObservationMap",
    "add_observation",
    "remove_observation",
    "room_observations",
    "ObservationStorage",
    "ObservationBook",
    "ObservationError",
]
