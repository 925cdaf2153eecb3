"""
Entry creation API coverage.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from daylio_dashboard.schemas.result import StorageResult
from daylio_dashboard.services.storage_service import StorageService
from tests.integration.helpers import EndpointCase, assert_status_codes

# 2024-03-17 10:40:00 UTC
ENTRY_DATETIME = 1710672000000


def test_create_entry_returns_stored_record(populated_client: TestClient):
    response = populated_client.post(
        "/api/entries",
        json={
            "mood": 2,
            "datetime": ENTRY_DATETIME,
            "note_title": "Morning run",
            "note": "5k\nfelt good",
            "tags": [1],
        },
    )

    assert response.status_code == 201
    assert response.json() == {
        "id": 6,
        "minute": 40,
        "hour": 10,
        "day": 17,
        "month": 3,
        "year": 2024,
        "datetime": ENTRY_DATETIME,
        "timeZoneOffset": 0,
        "mood": 2,
        "note_title": "Morning run",
        "note": "5k\nfelt good",
        "tags": [1],
    }


def test_created_entry_is_listed_first(populated_client: TestClient):
    populated_client.post("/api/entries", json={"mood": 3, "datetime": ENTRY_DATETIME})

    entries = populated_client.get("/entries").json()

    assert entries[0]["id"] == 6
    assert entries[0]["date_formatted"] == "17th Mar 2024"
    assert entries[0]["time"] == "10:40 AM"
    assert entries[0]["day"] == "Sunday"
    assert populated_client.get("/metadata").json()["numberOfEntries"] == 6
    assert populated_client.get("/structured_data").json()["2024"]["3"] == {"17": 3}


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"datetime": ENTRY_DATETIME}, "mood is required"),
        ({"mood": 1}, "datetime is required"),
        ({"mood": 1, "datetime": ENTRY_DATETIME, "tags": {}}, "tags must be an array"),
        ({"mood": 1, "datetime": ENTRY_DATETIME, "tags": None}, "tags must be an array"),
        ({"mood": 1, "datetime": "not-a-number"}, "datetime must be a valid number"),
    ],
)
def test_invalid_payload_returns_400(client: TestClient, payload, message):
    response = client.post("/api/entries", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert client.get("/entries").json() == []


def test_mood_zero_is_accepted(client: TestClient):
    response = client.post("/api/entries", json={"mood": 0, "datetime": ENTRY_DATETIME})
    assert response.status_code == 201
    assert response.json()["mood"] == 0


def test_non_object_body_is_rejected(client: TestClient):
    assert_status_codes(
        client,
        [
            EndpointCase("POST", "/api/entries", json=[1, 2, 3], description="array body"),
            EndpointCase("POST", "/api/entries", json="mood", description="string body"),
        ],
        expected_status=(422,),
    )


def test_storage_failure_returns_500(client: TestClient):
    with patch.object(
        StorageService,
        "insert_entry",
        return_value=StorageResult.fail("database is locked"),
    ):
        response = client.post("/api/entries", json={"mood": 1, "datetime": ENTRY_DATETIME})

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to create entry",
        "details": "database is locked",
    }
