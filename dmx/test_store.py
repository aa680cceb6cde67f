import unittest, json, os, stat
import shutil, tempfile
from pathlib import Path

from dmx.picker.items import ItemKind
from dmx.picker.items.hierarchy import Category, Entry
from dmx.sink.errors import EnumerationError, StorageError
from dmx.sink.unittest import LoggedTestCase
from dmx.store import read_document, write_document

SAMPLE = '''{"key": "mail", "desc": "mail client", "val": "thunderbird"}
{
  "key": "www",
  "desc": "web stuff",
  "stuff": [
    {"key": "ddg", "desc": "search", "val": "https://duckduckgo.com"},
    {"key": "docs", "desc": "documentation", "stuff": []}
  ]
}
'''


class TestMenuDocuments(LoggedTestCase):
    def setUp(self):
        super().setUp()
        self.dir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, self.dir)
        self.path = self.dir / 'menu.json'
        self.path.write_text(SAMPLE)

    def test_reads_a_stream_of_records(self):
        base, mode = read_document(self.path)
        self.assertEqual(base.desc, 'Base Category')
        self.assertEqual([i.key() for i in base.stuff], ['mail', 'www/'])
        www = base.stuff[1]
        self.assertEqual(www.kind, ItemKind.CONTAINER)
        self.assertEqual([(i.key(), i.kind) for i in www.stuff], # type: ignore[attr-defined]
                         [('ddg', ItemKind.LEAF), ('docs/', ItemKind.CONTAINER)])
        self.assertEqual(mode, stat.S_IMODE(os.stat(self.path).st_mode))

    def test_separator_applies_to_every_category(self):
        base, _ = read_document(self.path, separator=':')
        self.assertEqual(base.stuff[1].stuff[1].key(), 'docs:') # type: ignore[attr-defined]

    def test_rewrite_keeps_items_and_permissions(self):
        os.chmod(self.path, 0o600)
        base, mode = read_document(self.path)
        base.stuff[1].stuff[1].add_item(Entry('py', 'python docs', 'https://docs.python.org')) # type: ignore[attr-defined]
        base.add_item(Category('new', 'empty category'))
        write_document(self.path, base, mode)

        self.assertEqual(stat.S_IMODE(os.stat(self.path).st_mode), 0o600)
        text = self.path.read_text()
        self.logger.info(f'rewritten:\n{text}')
        self.assertTrue(text.startswith('{\n  "key": "mail"'))
        self.assertTrue(text.endswith('}\n'))

        again, _ = read_document(self.path)
        self.assertEqual([i.to_record() for i in again.stuff], [i.to_record() for i in base.stuff]) # type: ignore[attr-defined]
        self.assertEqual(again.stuff[2].to_record(), {'key': 'new', 'desc': 'empty category', 'stuff': []}) # type: ignore[attr-defined]

    def test_empty_document_is_an_empty_base(self):
        self.path.write_text('\n  \n')
        base, _ = read_document(self.path)
        self.assertEqual(base.stuff, [])

    def test_missing_file(self):
        with self.assertRaises(EnumerationError):
            read_document(self.dir / 'missing.json')

    def test_corrupt_json(self):
        self.path.write_text(SAMPLE + '{"key": "broken", ')
        with self.assertRaises(EnumerationError):
            read_document(self.path)

    def test_records_need_keys(self):
        self.path.write_text(json.dumps({'key': 'cat', 'desc': 'no stuff'}))
        with self.assertRaises(EnumerationError):
            read_document(self.path)
        self.path.write_text(json.dumps(['not', 'a', 'record']))
        with self.assertRaises(EnumerationError):
            read_document(self.path)

    def test_records_need_the_right_types(self):
        for record in ({'key': 'a', 'desc': 'b', 'stuff': 5},
                       {'key': 'a', 'desc': 'b', 'stuff': None},
                       {'key': None, 'desc': 'b', 'val': 'c'},
                       {'key': 'a', 'desc': 3, 'val': 'c'},
                       {'key': 'a', 'desc': 'b', 'val': ['c']},
                       {'key': 'a', 'desc': 'b', 'stuff': [{'key': 1, 'desc': 'x', 'stuff': []}]}):
            self.path.write_text(json.dumps(record))
            with self.assertRaises(EnumerationError, msg=record):
                read_document(self.path)

    def test_duplicate_keys_are_rejected(self):
        self.path.write_text(SAMPLE + '{"key": "mail", "desc": "again", "val": "mutt"}\n')
        with self.assertRaises(EnumerationError):
            read_document(self.path)
        nested = {'key': 'c', 'desc': 'd', 'stuff': [{'key': 'a', 'desc': '', 'val': ''}, {'key': 'a', 'desc': '', 'val': ''}]}
        self.path.write_text(json.dumps(nested))
        with self.assertRaises(EnumerationError):
            read_document(self.path)

    def test_write_failure(self):
        base, _ = read_document(self.path)
        with self.assertRaises(StorageError):
            write_document(self.dir / 'no-such-dir' / 'menu.json', base)


if __name__ == '__main__':
    unittest.main()
