"""
schemas/journey.py
------------------
Dataclass definitions for the in-progress journey form: the form header,
and the scheduled activities ("places") that make up each day.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class PlaceType(str, Enum):
    STAY = "stay"
    ACTIVITY = "activity"
    FOOD = "food"
    TRANSPORT = "transport"
    NOTE = "note"


class JourneyMediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


PLACEHOLDER_NAMES: dict[PlaceType, str] = {
    PlaceType.STAY:      "New Hotel",
    PlaceType.ACTIVITY:  "New Activity",
    PlaceType.FOOD:      "New Restaurant",
    PlaceType.TRANSPORT: "New Transport",
    PlaceType.NOTE:      "New Note",
}


@dataclass
class Activity:
    """
    A single scheduled item within a day.

    start_time / end_time are "HH:mm" strings, or "" when unset.
    has_manual_start / has_manual_end mark boundaries the user typed in;
    the time-link engine never overwrites those.
    Descriptive fields (name .. photos) are carried through untouched.
    """
    type: PlaceType = PlaceType.ACTIVITY
    name: str = ""
    description: str = ""
    start_time: str = ""
    end_time: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    photos: list[str] = field(default_factory=list)
    has_manual_start: bool = False
    has_manual_end: bool = False

    @property
    def is_note(self) -> bool:
        return self.type == PlaceType.NOTE


@dataclass
class JourneyFormData:
    """Header fields of the journey form."""
    title: str = ""
    description: str = ""
    start_date: date = field(default_factory=date.today)
    cover_image_url: Optional[str] = None
    cover_image_key: Optional[str] = None
    photos: list[str] = field(default_factory=list)
