#!/usr/bin/env python3
"""fdmfc: choose a file (or directory) by walking the filesystem one menu at a time.

Starts in the given directory. Backing out of a menu climbs to the parent
directory, all the way up to the filesystem root; backing out there gives up.
Directories are re-read every time they're shown.
"""

import argparse
import logging
import os
from pathlib import Path

from dmx.apps import add_picker_arguments, emit, picker_from_args, render_output, setup_logging
from dmx.picker.items import Ordering, directory_sentinels
from dmx.picker.items.files import FileEntry, path_trail
from dmx.picker.navigator import HierarchyNavigator, PickedAction, Selection
from dmx.picker.pickers import ItemPickerBase
from dmx.sink.errors import DmxError

logger = logging.getLogger(__name__)

HIDDEN_MARKER = '.'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fdmfc',
        description='Choose a file (or directory) by walking the filesystem.')
    parser.add_argument('directory', nargs='?', default='.', help='where to start (default: current directory)')
    parser.add_argument('-d', dest='select_directory', default=False, action='store_true',
                        help='allow Directory selection')
    parser.add_argument('-H', dest='show_hidden', default=False, action='store_true',
                        help='show Hidden files by default')
    parser.add_argument('-s', dest='case_sensitive', default=False, action='store_true',
                        help='case-Sensitive filename sorting')
    parser.add_argument('-f', dest='format', default='%s\n', help='output Formatting string')
    add_picker_arguments(parser)
    return parser


def run(args: argparse.Namespace, picker: ItemPickerBase) -> int:
    base_dir = Path(os.path.abspath(args.directory))
    logger.debug(f'base directory: {base_dir}')

    ordering = Ordering(containers_first=True, case_sensitive=args.case_sensitive)
    root, trail = path_trail(base_dir, ordering)
    nav = HierarchyNavigator(picker, directory_sentinels(os.sep, HIDDEN_MARKER),
                             Selection.EITHER if args.select_directory else Selection.LEAF,
                             show_hidden=args.show_hidden, hidden_marker=HIDDEN_MARKER)
    result = nav.run(root, root.prompt_segment(), trail)
    if result.action == PickedAction.NOTHING:
        return 0

    chosen: FileEntry = result.item # type: ignore[assignment]
    emit(render_output(args.format, str(chosen.path)))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging('fdmfc', args.debug)
    try:
        return run(args, picker_from_args(args))
    except (DmxError, ValueError) as e:
        logger.error(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
