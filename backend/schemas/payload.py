"""
schemas/payload.py
------------------
Pydantic models for the createJourney request body.

Field names are snake_case in Python and camelCase on the wire; dump with
``model_dump(by_alias=True, exclude_unset=True)`` so that ``media`` only
appears on places that actually carry photos.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from schemas.journey import JourneyMediaType, PlaceType


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MediaPayload(_CamelModel):
    type: JourneyMediaType = JourneyMediaType.IMAGE
    url: str
    order: int = Field(0, ge=0)


class PlacePayload(_CamelModel):
    type: PlaceType
    name: str
    description: str = ""
    start_time: str = ""
    end_time: str = ""
    address: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    media: Optional[list[MediaPayload]] = None


class DayPayload(_CamelModel):
    day_number: int = Field(..., ge=0, description="Zero-based day index")
    date: str = Field(..., description="ISO-8601 date YYYY-MM-DD")
    notes: str = ""
    places: list[PlacePayload] = Field(default_factory=list)


class CreateJourneyPayload(_CamelModel):
    title: str
    description: str = ""
    cover_image: Optional[str] = None
    days: list[DayPayload] = Field(default_factory=list)

    def to_request_body(self) -> dict:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
