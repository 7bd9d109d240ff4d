# src/dirlist/config.py

VERSION = "0.1.0"

DEFAULT_ROOT = "."
DEFAULT_MIN_DEPTH = 1
DEFAULT_MAX_DEPTH = 1

HIDDEN_MARKER = "."
INDENT_MARKER = "⤷ "

# Column widths (right-aligned)
SIZE_WIDTH = 9
MODIFIED_WIDTH = 25
NAME_WIDTH = 15

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB", "EB"]
SIZE_STEP = 1024

# rich style strings
SIZE_STYLE = "green"
MODIFIED_STYLE = "blue"
INDENT_STYLE = "dim"
HEADER_STYLE = "bold underline"
KIND_STYLES = {
    "file": "white",
    "directory": "blue",
    "symlink": "yellow",
}
