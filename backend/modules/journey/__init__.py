"""modules/journey — journey-creation form state and submission."""

from modules.journey.api_client import JourneyApiClient, JourneySubmissionError, extract_journey_id
from modules.journey.day_store import DayActivityStore, day_label
from modules.journey.journey_form import JourneyForm
from modules.journey.payload import build_day_payload, build_journey_payload

__all__ = [
    "JourneyApiClient",
    "JourneySubmissionError",
    "extract_journey_id",
    "DayActivityStore",
    "day_label",
    "JourneyForm",
    "build_day_payload",
    "build_journey_payload",
]
