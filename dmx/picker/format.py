from typing import Sequence

from dmx.picker.items import PickableBase

TERMINATOR = b'\n'


def key_width(items: Sequence[PickableBase]) -> int:
    """Length of the longest key, so descriptions can be lined up after it"""
    return max((len(i.key()) for i in items), default=0)

def ensure_terminated(line: bytes, terminator: bytes = TERMINATOR) -> bytes:
    """Appends exactly one terminator, unless the line already ends with one"""
    if line.endswith(terminator):
        return line
    return line + terminator

def format_lines(items: Sequence[PickableBase]) -> list[bytes]:
    width = key_width(items)
    return [ensure_terminated(i.menu_line(width)) for i in items]
