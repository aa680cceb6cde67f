"""Menu documents.

A menu document is a stream of JSON records, one per top-level item:

    {"key": "www", "desc": "web stuff", "stuff": [
        {"key": "ddg", "desc": "DuckDuckGo", "val": "https://duckduckgo.com"}]}
    {"key": "mail", "desc": "mail client", "val": "thunderbird"}

A record with a "val" is an entry, anything else is a category. The whole
document is read into memory up front and written back whole after a change.
"""

import json
import logging
import os
import stat
from pathlib import Path

from dmx.picker.items import PickableBase
from dmx.picker.items.hierarchy import Category, Entry
from dmx.sink.errors import DmxError, EnumerationError, StorageError

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o664


def _text(raw: dict, field: str) -> str:
    value = raw[field]
    if not isinstance(value, str):
        raise EnumerationError(f'{field!r} should be a string, got {value!r} in {raw!r}')
    return value

def interpret_item(raw, separator: str = '/') -> PickableBase:
    """Turns a decoded JSON record into an Entry or (recursively) a Category"""
    if not isinstance(raw, dict):
        raise EnumerationError(f'expected a record, got {raw!r}')
    try:
        if 'val' in raw:
            return Entry(_text(raw, 'key'), _text(raw, 'desc'), _text(raw, 'val'))
        if not isinstance(raw['stuff'], list):
            raise EnumerationError(f'"stuff" should be a list, got {raw["stuff"]!r} in {raw!r}')
        stuff = [interpret_item(x, separator) for x in raw['stuff']]
        return Category(_text(raw, 'key'), _text(raw, 'desc'), stuff, separator=separator)
    except KeyError as e:
        raise EnumerationError(f'record is missing {e.args[0]!r}: {raw!r}') from e
    except EnumerationError:
        raise
    except DmxError as e:
        raise EnumerationError(f'bad record {raw.get("key")!r}: {e}') from e

def decode_records(text: str) -> list:
    dec = json.JSONDecoder()
    records = []
    idx = 0
    while True:
        while idx < len(text) and text[idx].isspace():
            idx += 1
        if idx >= len(text):
            return records
        raw, idx = dec.raw_decode(text, idx)
        records.append(raw)

def read_document(data_file: str | Path, separator: str = '/') -> tuple[Category, int]:
    """Parses the menu document at `data_file`.

    Returns the base category holding every top-level item, and the file's
    permission bits so a rewrite can keep them.
    """
    path = Path(data_file)
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
        text = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise EnumerationError(f'Error opening data file {str(path)!r} for read: {e}') from e
    try:
        records = decode_records(text)
    except json.JSONDecodeError as e:
        raise EnumerationError(f'Unable to decode item from {str(path)!r}: {e}') from e

    base = Category('', 'Base Category', separator=separator)
    for raw in records:
        itm = interpret_item(raw, separator)
        try:
            base.add_item(itm)
        except DmxError as e:
            raise EnumerationError(f'{path}: {e}') from e
    logger.debug(f'read {len(base.stuff)} top-level items from {path} (mode {mode:o})')
    return base, mode

def write_document(data_file: str | Path, base: Category, mode: int = DEFAULT_MODE):
    """Rewrites the whole menu document from `base`"""
    path = Path(data_file)
    chunks = [json.dumps(itm.to_record(), indent=2) + '\n' for itm in base.stuff] # type: ignore[attr-defined]
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, 'w') as of:
            of.writelines(chunks)
        os.chmod(path, mode)
    except OSError as e:
        raise StorageError(f'Error writing to data file {str(path)!r}: {e}') from e
    logger.debug(f'wrote {len(chunks)} top-level items to {path}')
