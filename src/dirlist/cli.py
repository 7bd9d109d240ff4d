# src/dirlist/cli.py
import sys
import argparse
from pathlib import Path
from typing import Optional

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console

from dirlist.config import DEFAULT_MAX_DEPTH, DEFAULT_MIN_DEPTH, DEFAULT_ROOT, VERSION
from dirlist.core.render import iter_lines
from dirlist.errors import DirlistError
from dirlist.models import DisplayOptions, WalkOptions


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"depth must be non-negative, got {number}")
    return number


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="dirlist",
        description="List directory entries with sizes, optionally indented by depth and colored by kind.",
    )
    parser.add_argument("root", type=str, nargs="?", default=None, help="Directory to list (default: current directory)")
    parser.add_argument("-p", "--path", type=str, default=None, help="Same as the positional root")
    parser.add_argument("--min-depth", type=non_negative_int, default=DEFAULT_MIN_DEPTH, help="Shallowest depth listed (root is 0)")
    parser.add_argument("--max-depth", type=non_negative_int, default=DEFAULT_MAX_DEPTH, help="Deepest depth listed and descended into")
    parser.add_argument("--headers", action="store_true", help="Print a column header line")
    parser.add_argument("--hidden", action="store_true", help="Include dot-prefixed entries and their contents")
    parser.add_argument("--modified", action="store_true", help="Show the modification time column")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def detect_color_system(disabled: bool) -> Optional[ColorSystem]:
    """Lets rich decide what stdout supports (TTY, NO_COLOR, TERM)."""
    if disabled:
        return None
    name = Console().color_system
    return COLOR_SYSTEMS.get(name) if name else None


def build_options(args):
    root = args.path or args.root or DEFAULT_ROOT
    walk = WalkOptions(
        root=Path(root),
        min_depth=args.min_depth,
        max_depth=args.max_depth,
        show_hidden=args.hidden,
    )
    display = DisplayOptions(show_headers=args.headers, show_modified=args.modified)
    return walk, display


def main(argv=None):
    parser = create_arg_parser()
    args = parser.parse_args(argv)
    walk, display = build_options(args)
    color_system = detect_color_system(args.no_color)

    try:
        for line in iter_lines(walk, display, color_system):
            print(line)

    except DirlistError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
