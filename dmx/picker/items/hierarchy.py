import logging

from dmx.picker.items import DEFAULT_ORDERING, ItemKind, Ordering, PickableBase
from dmx.sink.errors import DuplicateItemError

logger = logging.getLogger(__name__)

# fatdmenu's policy: categories first, then plain byte-wise comparison of tokens
MENU_ORDERING = DEFAULT_ORDERING


class Entry(PickableBase):
    """A leaf of a menu document: picking it yields `val`"""
    kind = ItemKind.LEAF

    def __init__(self, token: str, desc: str, val: str, ordering: Ordering = MENU_ORDERING):
        self.token = token
        self.desc = desc
        self.val = val
        self.ordering = ordering
    def key(self) -> str:
        return self.token
    def menu_line(self, key_width: int) -> bytes:
        return f'{self.token:<{key_width}}    {self.desc}\n'.encode()
    def to_record(self) -> dict:
        return {'key': self.token, 'desc': self.desc, 'val': self.val}
    def __repr__(self) -> str:
        return f'Entry({self.token!r})'


class Category(PickableBase):
    """A container of entries and other categories"""
    kind = ItemKind.CONTAINER

    def __init__(self, token: str, desc: str, stuff: list[PickableBase] | None = None,
                 separator: str = '/', ordering: Ordering = MENU_ORDERING):
        self.token = token
        self.desc = desc
        self.separator = separator
        self.ordering = ordering
        self.stuff: list[PickableBase] = []
        for itm in stuff or []:
            self.add_item(itm)
    def key(self) -> str:
        return f'{self.token}{self.separator}'
    def name(self) -> str:
        return self.token
    def menu_line(self, key_width: int) -> bytes:
        return f'{self.key():<{key_width}}    {self.desc}\n'.encode()
    def children(self) -> list[PickableBase]:
        return sorted(self.stuff)
    def to_record(self) -> dict:
        return {'key': self.token, 'desc': self.desc, 'stuff': [i.to_record() for i in self.stuff]} # type: ignore[attr-defined]
    def __repr__(self) -> str:
        return f'Category({self.token!r}, {len(self.stuff)} items)'

    def add_item(self, itm: PickableBase):
        k = itm.key()
        if any(x.key() == k for x in self.stuff):
            raise DuplicateItemError(f'{self.token or "base category"} already contains {k!r}')
        self.stuff.append(itm)

    def expunge(self, itm: PickableBase) -> bool:
        """Removes `itm` from somewhere below this category. Returns whether it was found."""
        for n, i in enumerate(self.stuff):
            if i is itm:
                del self.stuff[n]
                logger.debug(f'expunged {itm!r} from {self!r}')
                return True
        for i in self.stuff:
            if i.kind == ItemKind.CONTAINER and i.expunge(itm): # type: ignore[attr-defined]
                return True
        return False
