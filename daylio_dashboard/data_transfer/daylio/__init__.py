"""
Daylio backup module.

Handles decoding, validating and encoding Daylio backup files.
"""
from .models import (
    DaylioBackup,
    DaylioEntry,
    DaylioMetadata,
    DaylioMood,
    DaylioTag,
    DaylioTagGroup,
)
from .parser import DaylioBackupParser

__all__ = [
    "DaylioBackupParser",
    "DaylioBackup",
    "DaylioEntry",
    "DaylioMetadata",
    "DaylioMood",
    "DaylioTag",
    "DaylioTagGroup",
]
