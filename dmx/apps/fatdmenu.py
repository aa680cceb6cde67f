#!/usr/bin/env python3
"""fatdmenu: pick a value out of a nested menu document, or add and remove items in it.

Browsing prints the chosen entry's value through the output format. With -n
the user picks a category to put a new entry (or, with -c, a new category)
in; with -x the user picks an entry or category to remove. Either way the
document is rewritten afterwards.
"""

import argparse
import logging

from dmx.apps import add_picker_arguments, emit, picker_from_args, render_output, setup_logging
from dmx.picker.items import category_sentinels
from dmx.picker.items.hierarchy import Category, Entry
from dmx.picker.navigator import HierarchyNavigator, PickedAction, Selection
from dmx.picker.pickers import ItemPickerBase
from dmx.sink.errors import DmxError
from dmx.store import read_document, write_document

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='fatdmenu',
        description='Picks a value out of a nested menu document, or adds and removes items in it.')
    parser.add_argument('data_file', help='menu document (a stream of JSON records)')
    parser.add_argument('-s', dest='separator', default='/', help='category separator')
    parser.add_argument('-p', dest='prompt', default='', help='base prompt')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('-n', dest='add', default=False, action='store_true', help='add new entry or category')
    mode.add_argument('-x', dest='expunge', default=False, action='store_true', help='eXpunge item')
    parser.add_argument('-c', dest='category', default=False, action='store_true',
                        help='add a category instead of an entry')
    parser.add_argument('-f', dest='format', default='%s\n', help='output format string (include a %%s!)')
    parser.add_argument('-o', dest='output', default='', help='output file')
    parser.add_argument('-a', dest='append', default=False, action='store_true',
                        help='append to output file instead of overwriting')
    parser.add_argument('-k', dest='key', default='', help='new key for added item')
    parser.add_argument('-d', dest='desc', default='', help='new description for added item')
    parser.add_argument('-v', dest='val', default='', help='new output value for added item')
    parser.add_argument('-H', dest='show_hidden', default=False, action='store_true',
                        help='show hidden entries (keys starting with ".") from the start')
    add_picker_arguments(parser)
    return parser


def add_item(args: argparse.Namespace, picker: ItemPickerBase) -> int:
    if not args.key:
        logger.error('You must specify a key with the -k flag.')
        return 1
    if not args.desc:
        logger.error('You must specify a description with the -d flag.')
        return 1
    if not args.category and not args.val:
        logger.error('You must specify a value with the -v flag.')
        return 1

    base, mode = read_document(args.data_file, args.separator)
    nav = HierarchyNavigator(picker, category_sentinels(args.separator), Selection.CONTAINER,
                             show_hidden=args.show_hidden)
    result = nav.run(base, args.prompt)
    if result.action != PickedAction.CONTAINER:
        return 0

    container: Category = result.item # type: ignore[assignment]
    if args.category:
        container.add_item(Category(args.key, args.desc, separator=args.separator))
    else:
        container.add_item(Entry(args.key, args.desc, args.val))
    write_document(args.data_file, base, mode)
    return 0

def expunge_item(args: argparse.Namespace, picker: ItemPickerBase) -> int:
    base, mode = read_document(args.data_file, args.separator)
    nav = HierarchyNavigator(picker, category_sentinels(args.separator), Selection.EITHER,
                             show_hidden=args.show_hidden)
    result = nav.run(base, args.prompt)
    if result.action == PickedAction.NOTHING:
        return 0
    if result.item is base:
        logger.warning('The base category can\'t be removed; nothing changed.')
        return 0

    base.expunge(result.item) # type: ignore[arg-type]
    write_document(args.data_file, base, mode)
    return 0

def browse(args: argparse.Namespace, picker: ItemPickerBase) -> int:
    base, _ = read_document(args.data_file, args.separator)
    nav = HierarchyNavigator(picker, category_sentinels(args.separator), Selection.LEAF,
                             show_hidden=args.show_hidden)
    result = nav.run(base, args.prompt)
    if result.action != PickedAction.LEAF:
        return 0

    entry: Entry = result.item # type: ignore[assignment]
    text = render_output(args.format, entry.val)
    logger.debug(f'output: {text!r}')
    emit(text, args.output, args.append)
    return 0

def run(args: argparse.Namespace, picker: ItemPickerBase) -> int:
    if args.add:
        return add_item(args, picker)
    elif args.expunge:
        return expunge_item(args, picker)
    else:
        return browse(args, picker)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging('fatdmenu', args.debug)
    try:
        return run(args, picker_from_args(args))
    except (DmxError, ValueError) as e:
        logger.error(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
