# src/dirlist/models.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from dirlist.config import DEFAULT_MAX_DEPTH, DEFAULT_MIN_DEPTH, DEFAULT_ROOT


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class Entry:
    """One filesystem object yielded by the walker."""
    path: Path
    depth: int
    name: str


@dataclass(frozen=True)
class Attributes:
    size: int
    modified: datetime
    kind: EntryKind


@dataclass(frozen=True)
class WalkOptions:
    root: Path = Path(DEFAULT_ROOT)
    min_depth: int = DEFAULT_MIN_DEPTH
    max_depth: int = DEFAULT_MAX_DEPTH
    show_hidden: bool = False


@dataclass(frozen=True)
class DisplayOptions:
    show_headers: bool = False
    show_modified: bool = False
