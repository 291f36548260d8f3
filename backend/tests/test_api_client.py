from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from modules.journey.api_client import (
    JourneyApiClient,
    JourneySubmissionError,
    extract_journey_id,
)

PAYLOAD = {"title": "Paris", "description": "", "coverImage": None, "days": []}


def _client(body=None, *, json_error: Exception | None = None):
    session = MagicMock(spec=requests.Session)
    resp = MagicMock()
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = body
    session.post.return_value = resp
    return JourneyApiClient(base_url="http://api.test/", timeout=5, session=session), session


def test_posts_payload_and_returns_id():
    client, session = _client({"statusCode": 201, "data": {"id": "j-1"}})
    assert client.create_journey(PAYLOAD) == "j-1"
    session.post.assert_called_once_with("http://api.test/journeys", json=PAYLOAD, timeout=5)


@pytest.mark.parametrize(
    "body, expected",
    [
        ({"data": {"id": "a", "_id": "b"}, "id": "c"}, "a"),
        ({"data": {"name": "x"}, "id": "c"}, "c"),
        ({"data": "plain-id"}, "plain-id"),
        ({"data": {"_id": "mongo"}}, "mongo"),
        ({"data": {"journeyId": "camel"}}, "camel"),
        ({"data": {"journey_id": "snake"}}, "snake"),
        ({"data": {"name": "x"}}, None),
    ],
)
def test_extract_journey_id_lookup_order(body, expected):
    assert extract_journey_id(body) == expected


def test_top_level_id_with_ok_status():
    client, _ = _client({"statusCode": 200, "id": "top"})
    assert client.create_journey(PAYLOAD) == "top"


def test_rejection_message_from_body():
    client, _ = _client({"statusCode": 400, "message": "Title is required"})
    with pytest.raises(JourneySubmissionError, match="Title is required"):
        client.create_journey(PAYLOAD)


def test_rejection_without_message_uses_default():
    client, _ = _client({"statusCode": 500})
    with pytest.raises(JourneySubmissionError, match="Failed to create journey"):
        client.create_journey(PAYLOAD)


def test_non_json_body_is_a_failure():
    client, _ = _client(json_error=ValueError("no json"))
    with pytest.raises(JourneySubmissionError, match="Failed to create journey"):
        client.create_journey(PAYLOAD)


def test_missing_id_is_a_failure():
    client, _ = _client({"statusCode": 201, "data": {"title": "Paris"}})
    with pytest.raises(JourneySubmissionError, match="No journey ID"):
        client.create_journey(PAYLOAD)


def test_http_error_surfaces_server_message():
    client, session = _client({})
    error_resp = MagicMock()
    error_resp.json.return_value = {"message": "Session expired"}
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError(response=error_resp)
    with pytest.raises(JourneySubmissionError, match="Session expired"):
        client.create_journey(PAYLOAD)


def test_network_error_is_wrapped():
    client, session = _client({})
    cause = requests.ConnectionError("connection refused")
    session.post.side_effect = cause
    with pytest.raises(JourneySubmissionError) as info:
        client.create_journey(PAYLOAD)
    assert info.value.__cause__ is cause
