from models.fixture import FixtureRecord
from models.room import Room, RoomType, FloorData
from models.observation import Observation

__all__ = [
    "FixtureRecord",
    "Room",
    "RoomType",
    "FloorData",
    "Observation",
]
