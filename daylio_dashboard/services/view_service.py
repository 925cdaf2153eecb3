"""
Dashboard view builders.

Pure functions turning a loaded dataset into the shapes the UI renders:
the entry list, the reference ("vital") lookup tables, the
year -> month -> day mood aggregate and the header metadata.
"""
from typing import List, Mapping, Optional, Sequence

from daylio_dashboard.core.logging_config import log_warning
from daylio_dashboard.core.time_utils import from_epoch_ms
from daylio_dashboard.data_transfer.daylio import (
    DaylioBackup,
    DaylioEntry,
    DaylioMood,
    DaylioTag,
    DaylioTagGroup,
)
from daylio_dashboard.schemas.views import (
    ActivityView,
    EntryView,
    MetadataView,
    MoodAggregate,
    VitalView,
)

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

# Chart score for mood groups 1..5; the chart puts 5 at the top.
REVERSED_MOOD_SCORES = [5, 4, 3, 2, 1]

# The UI inserts note text as HTML.
NOTE_LINE_BREAK = "<br>"


def ordinal(day: int) -> str:
    """1 -> "1st", 2 -> "2nd", 11 -> "11th", 23 -> "23rd"."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_entry_date(entry: DaylioEntry) -> str:
    return f"{ordinal(entry.day)} {MONTHS[entry.month - 1]} {entry.year}"


def build_entry_view(entries: Sequence[DaylioEntry]) -> List[EntryView]:
    """
    One view row per entry, in input order.

    ``date`` fields come from the stored calendar fields; ``time`` and
    ``day`` from ``datetime + timeZoneOffset`` read as UTC.
    """
    views = []
    for entry in entries:
        local_time = from_epoch_ms(entry.datetime, entry.time_zone_offset)
        views.append(
            EntryView(
                id=entry.id,
                date=f"{entry.day}-{entry.month}-{entry.year}",
                date_formatted=format_entry_date(entry),
                time=local_time.strftime("%I:%M %p"),
                day=local_time.strftime("%A"),
                journal=(entry.note_title, entry.note.replace("\n", NOTE_LINE_BREAK)),
                mood=entry.mood,
                activities=list(entry.tags),
            )
        )
    return views


def build_vital_view(
    tags: Sequence[DaylioTag],
    tag_groups: Sequence[DaylioTagGroup],
    moods: Sequence[DaylioMood],
) -> VitalView:
    """Lookup tables keyed by stringified id; mood order follows ``moods``."""
    return VitalView(
        available_activities={
            str(tag.id): ActivityView(name=tag.name, group=tag.id_tag_group, icon=tag.icon)
            for tag in tags
        },
        available_activity_groups={str(group.id): group.name for group in tag_groups},
        available_moods={str(mood.id): mood.custom_name for mood in moods},
        available_mood_groups={str(mood.id): mood.mood_group_id for mood in moods},
        ordered_mood_list=[mood.custom_name for mood in moods],
        months=list(MONTHS),
    )


def reversed_mood_score(mood_group: int) -> int:
    return REVERSED_MOOD_SCORES[mood_group - 1]


def build_mood_aggregate(
    entries: Sequence[DaylioEntry],
    mood_groups: Mapping[str, int],
) -> MoodAggregate:
    """
    Map year -> month -> day -> chart score.

    A day with several entries keeps a running pair average,
    ``value = (value + score) / 2``, applied in input order, not a mean:
    scores 1, 5, 5 give 4.0 rather than 3.67.
    """
    structured: MoodAggregate = {}
    for entry in entries:
        mood_group: Optional[int] = mood_groups.get(str(entry.mood))
        if mood_group is None or not 1 <= mood_group <= len(REVERSED_MOOD_SCORES):
            log_warning(
                "Skipping entry with unknown mood in aggregate",
                entry_id=entry.id,
                mood=entry.mood,
            )
            continue

        score = reversed_mood_score(mood_group)
        days = structured.setdefault(str(entry.year), {}).setdefault(str(entry.month), {})
        day_key = str(entry.day)
        if day_key in days:
            days[day_key] = (days[day_key] + score) / 2
        else:
            days[day_key] = score
    return structured


def build_metadata_view(dataset: DaylioBackup) -> MetadataView:
    return MetadataView(
        longest_days_in_row=dataset.days_in_row_longest_chain,
        number_of_entries=dataset.metadata.number_of_entries,
    )

