import unittest

from dmx.picker.format import ensure_terminated, format_lines, key_width
from dmx.picker.items import PickableBase, Sentinel, SentinelTag
from dmx.picker.items.hierarchy import Category, Entry
from dmx.sink.unittest import LoggedTestCase


class RawLine(PickableBase):
    """Renders exactly what it's given"""
    def __init__(self, k: str, line: bytes):
        self.k = k
        self.line = line
    def key(self) -> str:
        return self.k
    def menu_line(self, key_width: int) -> bytes:
        return self.line


class TestLineFormatter(LoggedTestCase):
    def test_key_width(self):
        self.assertEqual(key_width([]), 0)
        self.assertEqual(key_width([Sentinel(SentinelTag.TOGGLE_HIDDEN, 'x')]), 0)
        self.assertEqual(key_width([Entry('abc', 'x', 'x'), Category('abcd', 'x'), Entry('a', 'x', 'x')]), 5)

    def test_terminator_is_added_exactly_once(self):
        self.assertEqual(ensure_terminated(b'line'), b'line\n')
        self.assertEqual(ensure_terminated(b'line\n'), b'line\n')
        self.assertEqual(ensure_terminated(ensure_terminated(b'line')), b'line\n')
        self.assertEqual(ensure_terminated(b''), b'\n')

    def test_every_line_ends_with_one_terminator(self):
        items = [RawLine('a', b'already\n'), RawLine('b', b'bare'), RawLine('', b'')]
        lines = format_lines(items)
        self.assertEqual(lines, [b'already\n', b'bare\n', b'\n'])
        for l in lines:
            self.assertFalse(l.endswith(b'\n\n'))

    def test_lines_are_padded_to_the_widest_key(self):
        items = [Entry('1', 'one', 'x'), Entry('22', 'two', 'x'), Category('long', 'cat'), Entry('', 'blank', 'x')]
        lines = format_lines(items)
        self.logger.info(f'lines: {lines}')
        for itm, line in zip(items, lines):
            self.assertGreaterEqual(len(line), len(itm.key()))
        # descriptions all start in the same column
        columns = {line.index(b'    ' + itm.desc.encode()) for itm, line in zip(items, lines)} # type: ignore[attr-defined]
        self.assertEqual(columns, {5})

    def test_entries_one_two_three(self):
        items = [Entry(k, f'entry {k}', f'value {k}') for k in ['1', '2', '3']]
        self.assertEqual(format_lines(items), [b'1    entry 1\n', b'2    entry 2\n', b'3    entry 3\n'])


if __name__ == '__main__':
    unittest.main()
