"""
View models served to the dashboard UI.
"""
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field


class EntryView(BaseModel):
    """One row of the entry list."""
    id: Optional[int]
    date: str
    date_formatted: str
    time: str
    day: str
    journal: Tuple[str, str]
    mood: int
    activities: List[int]


class ActivityView(BaseModel):
    name: str
    group: Optional[int]
    icon: Optional[str]


class VitalView(BaseModel):
    """Lookup tables for rendering ids as labels. Keys are stringified ids."""
    available_activities: Dict[str, ActivityView]
    available_activity_groups: Dict[str, str]
    available_moods: Dict[str, str]
    available_mood_groups: Dict[str, int]
    ordered_mood_list: List[str]
    months: List[str]


class MetadataView(BaseModel):
    longest_days_in_row: int = Field(..., serialization_alias="longestDaysInRow")
    number_of_entries: Optional[int] = Field(None, serialization_alias="numberOfEntries")


# year -> month -> day -> score
MoodAggregate = Dict[str, Dict[str, Dict[str, Union[int, float]]]]
