"""
Dashboard read endpoints.

Each request recomputes its view from a fresh read of the store.
"""
from typing import List

from fastapi import APIRouter

from daylio_dashboard.api.dependencies import DatasetDep
from daylio_dashboard.schemas.views import EntryView, MetadataView, MoodAggregate, VitalView
from daylio_dashboard.services.view_service import (
    build_entry_view,
    build_metadata_view,
    build_mood_aggregate,
    build_vital_view,
)

router = APIRouter(tags=["dashboard"])


@router.get("/vital", response_model=VitalView)
async def get_vital(dataset: DatasetDep):
    """Lookup tables for moods, mood groups, activities and activity groups."""
    return build_vital_view(dataset.tags, dataset.tag_groups, dataset.custom_moods)


@router.get("/entries", response_model=List[EntryView])
async def get_entries(dataset: DatasetDep):
    """Entry list, newest first."""
    return build_entry_view(dataset.day_entries)


@router.get("/structured_data", response_model=MoodAggregate)
async def get_structured_data(dataset: DatasetDep):
    """Year -> month -> day mood scores for the calendar chart."""
    mood_groups = {str(mood.id): mood.mood_group_id for mood in dataset.custom_moods}
    return build_mood_aggregate(dataset.day_entries, mood_groups)


@router.get("/metadata", response_model=MetadataView)
async def get_metadata(dataset: DatasetDep):
    return build_metadata_view(dataset)
