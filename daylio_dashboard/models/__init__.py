# Import all models for easy access
from .dataset_info import DatasetInfo, SchemaVersion
from .entry import Entry
from .mood import Mood
from .tag import Tag, TagGroup

__all__ = [
    "DatasetInfo",
    "Entry",
    "Mood",
    "SchemaVersion",
    "Tag",
    "TagGroup",
]
