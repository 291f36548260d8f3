from __future__ import annotations

import datetime as dt
from typing import Callable

import pytest

from modules.journey.day_store import DayActivityStore
from modules.journey.journey_form import JourneyForm
from schemas.journey import Activity, JourneyFormData, PlaceType


@pytest.fixture()
def sample_start() -> dt.date:
    # a Monday
    return dt.date(2024, 1, 1)


@pytest.fixture()
def store() -> DayActivityStore:
    return DayActivityStore()


@pytest.fixture()
def three_activities(store: DayActivityStore) -> DayActivityStore:
    """Active day holds A 09:00-10:00, B 10:00-11:00, C 11:00-12:00, all unpinned."""
    for _ in range(3):
        store.add_activity(PlaceType.ACTIVITY)
    for index, name in enumerate("ABC"):
        store.update_field(index, "name", name)
    return store


@pytest.fixture()
def form(sample_start: dt.date) -> JourneyForm:
    return JourneyForm(data=JourneyFormData(title="Paris", description="Two days", start_date=sample_start))


@pytest.fixture()
def make_activity() -> Callable[..., Activity]:
    def _make(start: str = "", end: str = "", **kwargs) -> Activity:
        kwargs.setdefault("type", PlaceType.ACTIVITY)
        return Activity(start_time=start, end_time=end, **kwargs)
    return _make
