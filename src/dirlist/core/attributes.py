# src/dirlist/core/attributes.py
import os
import stat
from datetime import datetime, timezone

from dirlist.config import KIND_STYLES
from dirlist.errors import AttributeResolutionError
from dirlist.models import Attributes, Entry, EntryKind


def classify_mode(mode: int) -> EntryKind:
    """Maps an lstat mode to an EntryKind. Anything that is not a link or directory counts as a file."""
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.FILE


def kind_style(kind: EntryKind) -> str:
    return KIND_STYLES[kind.value]


def resolve_attributes(entry: Entry) -> Attributes:
    """
    Reads size, modification time and kind of an entry without following links.
    Raises AttributeResolutionError naming the entry path on any OS failure.
    """
    try:
        st = os.lstat(entry.path)
    except OSError as e:
        raise AttributeResolutionError(entry.path, e) from e

    return Attributes(
        size=st.st_size,
        modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        kind=classify_mode(st.st_mode),
    )
