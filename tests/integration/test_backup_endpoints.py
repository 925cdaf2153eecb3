"""
Backup import/export API coverage.
"""
import base64
import json

from fastapi.testclient import TestClient

from tests.fixtures.backups import encode_backup, sample_backup
from tests.integration.helpers import upload_backup


def test_import_then_read_dashboard(client: TestClient):
    response = upload_backup(client, encode_backup(sample_backup()))

    assert response.status_code == 200
    assert response.json() == {
        "moods_imported": 5,
        "tag_groups_imported": 2,
        "tags_imported": 4,
        "entries_imported": 5,
        "warnings": [],
    }
    assert [entry["id"] for entry in client.get("/entries").json()] == [1, 2, 3, 4, 5]
    assert client.get("/metadata").json() == {"longestDaysInRow": 5, "numberOfEntries": 5}


def test_import_replaces_existing_data(populated_client: TestClient):
    document = sample_backup()
    document["dayEntries"] = document["dayEntries"][2:]
    document["metadata"]["number_of_entries"] = 3

    response = upload_backup(populated_client, encode_backup(document))

    assert response.status_code == 200
    assert [entry["id"] for entry in populated_client.get("/entries").json()] == [3, 4, 5]


def test_import_invalid_backup_returns_400(populated_client: TestClient):
    response = upload_backup(populated_client, "%%% not a backup %%%")

    assert response.status_code == 400
    assert "base64" in response.json()["detail"]
    assert len(populated_client.get("/entries").json()) == 5


def test_import_unrepresentable_datetime_returns_400(populated_client: TestClient):
    document = sample_backup()
    document["dayEntries"][0]["datetime"] = 10**18

    response = upload_backup(populated_client, encode_backup(document))

    assert response.status_code == 400
    entries = populated_client.get("/entries")
    assert entries.status_code == 200
    assert len(entries.json()) == 5


def test_import_conflicting_ids_returns_500_and_keeps_data(populated_client: TestClient):
    document = sample_backup()
    document["dayEntries"].append(dict(document["dayEntries"][0]))

    response = upload_backup(populated_client, encode_backup(document))

    assert response.status_code == 500
    assert [entry["id"] for entry in populated_client.get("/entries").json()] == [1, 2, 3, 4, 5]


def test_export_download(populated_client: TestClient):
    response = populated_client.get("/api/export")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/octet-stream"
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="daylio_export_')
    assert disposition.endswith('.daylio"')

    document = json.loads(base64.b64decode(response.content))
    assert document["version"] == 22
    assert document["dayEntries"] == sample_backup()["dayEntries"]


def test_export_includes_created_entries(populated_client: TestClient):
    populated_client.post("/api/entries", json={"mood": 2, "datetime": 1710672000000})

    document = json.loads(base64.b64decode(populated_client.get("/api/export").content))

    assert [entry["id"] for entry in document["dayEntries"]] == [1, 2, 3, 4, 5, 6]
    assert document["metadata"]["number_of_entries"] == 6


def test_export_then_import_round_trip(populated_client: TestClient):
    before = populated_client.get("/entries").json()
    exported = populated_client.get("/api/export").content

    response = upload_backup(populated_client, exported)

    assert response.status_code == 200
    assert populated_client.get("/entries").json() == before
