"""Bits shared by the command line programs."""

import argparse
import logging
import os
import sys

from dmx.config import autoconfigure
from dmx.picker.pickers import ItemPickerBase
from dmx.picker.pickers.auto import BACKENDS, make_picker
from dmx.sink.errors import StorageError

OUTPUT_MODE = 0o664


def add_picker_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('--config', default='', help='specify an alternate configuration file')
    parser.add_argument('--backend', choices=BACKENDS, default='auto',
                        help='dmenu, a terminal menu, or dmenu only when there is a display (default)')
    parser.add_argument('--debug', default=False, action='store_true', help='log what is going on to stderr')

def setup_logging(prog: str, debug: bool):
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format=f'{prog}: %(message)s', stream=sys.stderr)

def picker_from_args(args: argparse.Namespace) -> ItemPickerBase:
    config = autoconfigure([args.config] if args.config else None)
    return make_picker(args.backend, config)

def render_output(fmt: str, value: str) -> str:
    try:
        return fmt % value
    except (TypeError, ValueError) as e:
        raise ValueError(f'bad output format {fmt!r} (include exactly one %s): {e}') from e

def emit(text: str, output: str = '', append: bool = False):
    """Writes `text` to stdout, or to `output`; an existing output file keeps its permissions"""
    if not output:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(output, flags, OUTPUT_MODE)
        with os.fdopen(fd, 'w') as of:
            of.write(text)
    except OSError as e:
        raise StorageError(f'Problem with output file {output!r}: {e}') from e
