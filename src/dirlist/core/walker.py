# src/dirlist/core/walker.py
import os
import stat
from pathlib import Path
from typing import Iterator, List, Tuple

from dirlist.config import HIDDEN_MARKER
from dirlist.errors import TraversalError
from dirlist.models import Entry, WalkOptions


def entry_name(path: Path) -> str:
    """Final path component, or the path itself for roots like '.' or '/'."""
    return path.name or str(path)


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_MARKER)


class PathWalker:
    def __init__(self, options: WalkOptions):
        self.options = options

    def _children(self, entry: Entry) -> List[Tuple[Entry, bool]]:
        """
        Reads one directory level, dropping hidden names unless requested.
        Returns (entry, is_directory) pairs sorted by name.
        """
        children = []
        try:
            with os.scandir(entry.path) as it:
                for dirent in it:
                    if not self.options.show_hidden and is_hidden(dirent.name):
                        continue
                    child = Entry(path=Path(dirent.path), depth=entry.depth + 1, name=dirent.name)
                    # Symlinks are never descended into
                    children.append((child, dirent.is_dir(follow_symlinks=False)))
        except OSError as e:
            raise TraversalError(entry.path, e) from e

        children.sort(key=lambda pair: pair[0].name)
        return children

    def walk(self) -> Iterator[Entry]:
        """
        Yields entries in pre-order whose depth lies in [min_depth, max_depth].
        Directories shallower than min_depth are descended but not yielded;
        nothing below max_depth is ever read.
        """
        min_depth = self.options.min_depth
        max_depth = self.options.max_depth
        if min_depth > max_depth:
            return

        root = self.options.root
        try:
            root_is_dir = stat.S_ISDIR(os.stat(root).st_mode)
        except OSError as e:
            raise TraversalError(root, e) from e

        stack = [(Entry(path=root, depth=0, name=entry_name(root)), root_is_dir)]
        while stack:
            entry, is_dir = stack.pop()
            if entry.depth >= min_depth:
                yield entry
            if is_dir and entry.depth < max_depth:
                # Reversed so the first sibling is popped first
                stack.extend(reversed(self._children(entry)))
