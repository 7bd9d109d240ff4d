# src/dirlist/core/render.py
from typing import Iterator, List, Optional, Tuple

from rich.color import ColorSystem
from rich.style import Style

from dirlist.config import (
    HEADER_STYLE,
    INDENT_STYLE,
    MODIFIED_STYLE,
    MODIFIED_WIDTH,
    NAME_WIDTH,
    SIZE_STYLE,
    SIZE_WIDTH,
)
from dirlist.core.attributes import kind_style, resolve_attributes
from dirlist.core.walker import PathWalker
from dirlist.models import Attributes, DisplayOptions, Entry, WalkOptions
from dirlist.utils.formatting import format_indent, format_size, format_timestamp

# A field is a run of (text, style) pieces right-aligned as one column
Pieces = List[Tuple[str, str]]


class LineRenderer:
    """
    Composes tab-separated, right-aligned columns: size, optional modified
    time, then indent + name. Padding is measured on plain text, so styling
    never shifts the columns.
    """

    def __init__(self, display: DisplayOptions, min_depth: int, color_system: Optional[ColorSystem] = None):
        self.display = display
        self.min_depth = min_depth
        self.color_system = color_system

    def _paint(self, text: str, style: str) -> str:
        return Style.parse(style).render(text, color_system=self.color_system)

    def _column(self, pieces: Pieces, width: int) -> str:
        plain = "".join(text for text, _ in pieces)
        padding = " " * max(0, width - len(plain))
        return padding + "".join(self._paint(text, style) for text, style in pieces)

    def _join(self, size: Pieces, modified: Pieces, name: Pieces) -> str:
        columns = [self._column(size, SIZE_WIDTH)]
        if self.display.show_modified:
            columns.append(self._column(modified, MODIFIED_WIDTH))
        columns.append(self._column(name, NAME_WIDTH))
        return "\t".join(columns)

    def header(self) -> str:
        return self._join(
            [("Size", HEADER_STYLE)],
            [("Modified at", HEADER_STYLE)],
            [("Name", HEADER_STYLE)],
        )

    def render(self, entry: Entry, attributes: Attributes) -> str:
        modified = []
        if self.display.show_modified:
            modified = [(format_timestamp(attributes.modified), MODIFIED_STYLE)]
        return self._join(
            [(format_size(attributes.size), SIZE_STYLE)],
            modified,
            [
                (format_indent(entry.depth, self.min_depth), INDENT_STYLE),
                (entry.name, kind_style(attributes.kind)),
            ],
        )


def iter_lines(
    walk: WalkOptions,
    display: DisplayOptions,
    color_system: Optional[ColorSystem] = None,
) -> Iterator[str]:
    """
    Streams the listing: the header (if requested) first, then one line per
    walked entry. Traversal and attribute errors propagate to the caller.
    """
    renderer = LineRenderer(display, walk.min_depth, color_system)
    if display.show_headers:
        yield renderer.header()

    for entry in PathWalker(walk).walk():
        attributes = resolve_attributes(entry)
        yield renderer.render(entry, attributes)
