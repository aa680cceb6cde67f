import logging
import os
from pathlib import Path

from dmx.picker.items import ItemKind, Ordering, PickableBase
from dmx.sink.errors import EnumerationError

logger = logging.getLogger(__name__)

# directories first, names compared case-insensitively
FILE_ORDERING = Ordering(containers_first=True, case_sensitive=False)


class FileEntry(PickableBase):
    """An entry in a directory listing. Directories are containers whose children are read from disk every time they're asked for."""

    def __init__(self, path: Path, is_dir: bool, ordering: Ordering = FILE_ORDERING):
        self.path = Path(path)
        self.kind = ItemKind.CONTAINER if is_dir else ItemKind.LEAF
        self.ordering = ordering

    def key(self) -> str:
        return ''
    def name(self) -> str:
        # the root directory has no name of its own
        return self.path.name or str(self.path)
    def menu_line(self, key_width: int) -> bytes:
        return os.fsencode(self.prompt_segment() if self.kind == ItemKind.CONTAINER else self.name())
    def prompt_segment(self) -> str:
        n = self.name()
        return n if n.endswith(os.sep) else n + os.sep
    def children(self) -> list[PickableBase]:
        try:
            with os.scandir(self.path) as it:
                found = list(it)
                # a name with a line break can't round-trip through the picker
                entries = [FileEntry(Path(e.path), e.is_dir(), self.ordering) for e in found if '\n' not in e.name]
        except OSError as e:
            raise EnumerationError(f'Error reading directory {str(self.path)!r}: {e}') from e
        if len(entries) < len(found):
            logger.debug(f'{self.path}: skipped {len(found) - len(entries)} names containing a newline')
        logger.debug(f'{self.path}: {len(entries)} entries')
        return sorted(entries)
    def __repr__(self) -> str:
        return f'FileEntry({str(self.path)!r}, {self.kind.name})'


def path_trail(path: Path, ordering: Ordering = FILE_ORDERING) -> tuple[FileEntry, list[FileEntry]]:
    """Splits an absolute directory path into its filesystem root and the directories leading down to it.

    path_trail(Path('/home/dan/.config')) gives the entry for '/' and entries
    for '/home', '/home/dan' and '/home/dan/.config'.
    """
    path = Path(path).absolute()
    root = FileEntry(Path(path.anchor), True, ordering)
    trail = [FileEntry(p, True, ordering) for p in reversed(path.parents) if p != Path(path.anchor)]
    if path != Path(path.anchor):
        trail.append(FileEntry(path, True, ordering))
    return root, trail
