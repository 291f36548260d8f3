"""
modules/journey/api_client.py
------------------------------
HTTP client for the journey backend's createJourney endpoint.

Config knobs (config.py):
  JOURNEY_API_BASE_URL -- base URL; journeys are POSTed to {base}/journeys
  JOURNEY_API_TIMEOUT  -- request timeout in seconds (default: 30)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

import config

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Failed to create journey"
_ID_FIELDS = ("id", "_id", "journeyId", "journey_id")


class JourneySubmissionError(RuntimeError):
    """The backend rejected the journey, or its answer carried no journey id."""


def extract_journey_id(body: dict[str, Any]) -> Optional[str]:
    """
    Find the new journey's id in a createJourney response body.

    Looked up in order: data.id, id, data (when it is a bare string), then
    data._id / data.journeyId / data.journey_id.
    """
    data = body.get("data")
    if isinstance(data, dict) and data.get("id"):
        return str(data["id"])
    if body.get("id"):
        return str(body["id"])
    if isinstance(data, str) and data:
        return data
    if isinstance(data, dict):
        for name in _ID_FIELDS:
            if data.get(name):
                return str(data[name])
    return None


class JourneyApiClient:
    """Thin wrapper over a requests.Session for the journey backend."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url: str = (base_url or config.JOURNEY_API_BASE_URL).rstrip("/")
        self.timeout: float = timeout if timeout is not None else config.JOURNEY_API_TIMEOUT
        self._session = session or requests.Session()

    def create_journey(self, payload: dict[str, Any]) -> str:
        """POST the payload and return the new journey's id."""
        url = f"{self.base_url}/journeys"
        logger.info("Submitting journey %r (%d days) to %s",
                    payload.get("title"), len(payload.get("days", [])), url)
        try:
            resp = self._session.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            message = _error_message(exc.response) or str(exc)
            logger.warning("Journey submission rejected: %s", message)
            raise JourneySubmissionError(message) from exc
        except requests.RequestException as exc:
            logger.warning("Journey submission failed: %s", exc)
            raise JourneySubmissionError(str(exc)) from exc

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not isinstance(body, dict) or (
            not body.get("data") and body.get("statusCode") not in (200, 201)
        ):
            message = (body or {}).get("message") if isinstance(body, dict) else None
            raise JourneySubmissionError(message or DEFAULT_FAILURE_MESSAGE)

        journey_id = extract_journey_id(body)
        if not journey_id:
            raise JourneySubmissionError("No journey ID found in server response")

        logger.info("Journey created: %s", journey_id)
        return journey_id


def _error_message(resp: Optional[requests.Response]) -> Optional[str]:
    if resp is None:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
