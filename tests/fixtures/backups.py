"""
Sample Daylio backup documents shared by the test suites.
"""
from __future__ import annotations

import base64
import copy
import json
from typing import Any

CREATED_AT = 1704067200000

# Five entries on 11..15 January 2024; entry N uses mood N, whose group is N.
SAMPLE_BACKUP: dict[str, Any] = {
    "version": 22,
    "daysInRowLongestChain": 5,
    "metadata": {"number_of_entries": 5},
    "customMoods": [
        {"id": 1, "custom_name": "rad", "mood_group_id": 1, "icon_id": 1,
         "predefined_name_id": 1, "state": 0, "createdAt": CREATED_AT},
        {"id": 2, "custom_name": "good", "mood_group_id": 2, "icon_id": 2,
         "predefined_name_id": 2, "state": 0, "createdAt": CREATED_AT},
        {"id": 3, "custom_name": "meh", "mood_group_id": 3, "icon_id": 3,
         "predefined_name_id": 3, "state": 0, "createdAt": CREATED_AT},
        {"id": 4, "custom_name": "bad", "mood_group_id": 4, "icon_id": 4,
         "predefined_name_id": 4, "state": 0, "createdAt": CREATED_AT},
        {"id": 5, "custom_name": "awful", "mood_group_id": 5, "icon_id": None,
         "predefined_name_id": None, "state": 0, "createdAt": CREATED_AT},
    ],
    "tag_groups": [
        {"id": 1, "name": "Hobbies", "order": 0},
        {"id": 2, "name": "Responsibilities", "order": 1},
    ],
    "tags": [
        {"id": 1, "name": "Exercise", "id_tag_group": 1, "icon": "fitness",
         "order": 0, "state": 0, "createdAt": CREATED_AT},
        {"id": 2, "name": "Reading", "id_tag_group": 1, "icon": "book",
         "order": 1, "state": 0, "createdAt": CREATED_AT},
        {"id": 3, "name": "Work", "id_tag_group": 2, "icon": None,
         "order": 2, "state": 0, "createdAt": CREATED_AT},
        {"id": 4, "name": "Chores", "id_tag_group": None, "icon": "broom",
         "order": 3, "state": 1, "createdAt": CREATED_AT},
    ],
    "dayEntries": [
        {"id": 1, "minute": 0, "hour": 14, "day": 15, "month": 1, "year": 2024,
         "datetime": 1705327200000, "timeZoneOffset": 0, "mood": 1,
         "note_title": "Great Day", "note": "Had a wonderful day with friends.",
         "tags": [1, 2]},
        {"id": 2, "minute": 30, "hour": 9, "day": 14, "month": 1, "year": 2024,
         "datetime": 1705224600000, "timeZoneOffset": 0, "mood": 2,
         "note_title": "Good Morning", "note": "Started the day with exercise.",
         "tags": [3]},
        {"id": 3, "minute": 0, "hour": 20, "day": 13, "month": 1, "year": 2024,
         "datetime": 1705176000000, "timeZoneOffset": 0, "mood": 3,
         "note_title": "", "note": "Regular day at work.", "tags": [1]},
        {"id": 4, "minute": 15, "hour": 18, "day": 12, "month": 1, "year": 2024,
         "datetime": 1705083300000, "timeZoneOffset": 3600000, "mood": 4,
         "note_title": "Stressful", "note": "Too many deadlines.\nNeed rest.",
         "tags": [4, 1]},
        {"id": 5, "minute": 0, "hour": 22, "day": 11, "month": 1, "year": 2024,
         "datetime": 1705010400000, "timeZoneOffset": 0, "mood": 5,
         "note_title": "Rough Day", "note": "Everything went wrong.", "tags": []},
    ],
}


def sample_backup() -> dict[str, Any]:
    """Fresh deep copy of the sample backup document."""
    return copy.deepcopy(SAMPLE_BACKUP)


def encode_backup(document: dict[str, Any]) -> str:
    """Encode a backup document the way the Daylio app does."""
    return base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")


def make_entry(entry_id: int, *, day: int, mood: int, datetime: int, **overrides: Any) -> dict[str, Any]:
    """Build a dayEntries item for January 2024."""
    entry = {
        "id": entry_id,
        "minute": 0,
        "hour": 12,
        "day": day,
        "month": 1,
        "year": 2024,
        "datetime": datetime,
        "timeZoneOffset": 0,
        "mood": mood,
        "note_title": "",
        "note": "",
        "tags": [],
    }
    entry.update(overrides)
    return entry
