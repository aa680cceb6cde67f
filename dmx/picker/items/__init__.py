
from dataclasses import dataclass
from enum import Enum

from dmx.sink.errors import stub


class ItemKind(Enum):
    SENTINEL = 1
    CONTAINER = 2
    LEAF = 3

class SentinelTag(Enum):
    """Meta-actions a sentinel can stand for. The value is the sentinel's position among other sentinels."""
    SELECT_CURRENT = 1
    TOGGLE_HIDDEN = 2


@dataclass(frozen=True)
class Ordering:
    """How a client wants its items sorted. Sentinels always come first, regardless of policy."""
    containers_first: bool = True
    case_sensitive: bool = True

    def fold(self, name: str) -> str:
        return name if self.case_sensitive else name.lower()

    def sorts_before(self, a: 'PickableBase', b: 'PickableBase') -> bool:
        match (a.kind, b.kind):
            case (ItemKind.SENTINEL, ItemKind.SENTINEL):
                return a.tag.value < b.tag.value # type: ignore[attr-defined]
            case (ItemKind.SENTINEL, _):
                return True
            case (_, ItemKind.SENTINEL):
                return False
            case (ItemKind.CONTAINER, ItemKind.LEAF) if self.containers_first:
                return True
            case (ItemKind.LEAF, ItemKind.CONTAINER) if self.containers_first:
                return False
            case _:
                return self.fold(a.name()) < self.fold(b.name())

DEFAULT_ORDERING = Ordering()


class PickableBase:
    """Something that can be shown as one line of a picker menu.

    The intended way for an item to appear is

        key     more thorough description of item

    menu_line() gets the widest key among everything being shown at once, so
    descriptions can be lined up.
    """
    kind: ItemKind = ItemKind.LEAF
    ordering: Ordering = DEFAULT_ORDERING

    def key(self) -> str:
        stub()
        raise Exception() # will throw inside of stub, this is just here to satisfy static analysis
    def name(self) -> str:
        """Name used for sorting and hidden checks"""
        return self.key()
    def menu_line(self, key_width: int) -> bytes:
        stub()
        raise Exception()
    def sorts_before(self, other: 'PickableBase') -> bool:
        return self.ordering.sorts_before(self, other)
    def __lt__(self, other: 'PickableBase') -> bool:
        return self.sorts_before(other)
    def is_hidden(self, marker: str) -> bool:
        if self.kind == ItemKind.SENTINEL or not marker:
            return False
        return self.name().startswith(marker)
    # containers override these two
    def children(self) -> list['PickableBase']:
        stub()
        raise Exception()
    def prompt_segment(self) -> str:
        return self.key()


class Sentinel(PickableBase):
    """A fixed menu line standing in for a meta-action rather than a value"""
    kind = ItemKind.SENTINEL

    def __init__(self, tag: SentinelTag, line: str):
        self.tag = tag
        self.line = line.encode()
    def key(self) -> str:
        return ''
    def menu_line(self, key_width: int) -> bytes:
        return self.line
    def __repr__(self) -> str:
        return f'Sentinel({self.tag.name}, {self.line!r})'


@dataclass(frozen=True)
class Sentinels:
    """The meta-action lines a navigator injects into each menu"""
    select_current: Sentinel
    show_hidden: Sentinel
    hide_hidden: Sentinel

    def toggle_for(self, showing_hidden: bool) -> Sentinel:
        return self.hide_hidden if showing_hidden else self.show_hidden

def category_sentinels(separator: str = '/') -> Sentinels:
    return Sentinels(
        select_current=Sentinel(SentinelTag.SELECT_CURRENT, f'{separator} [ choose current category ]'),
        show_hidden=Sentinel(SentinelTag.TOGGLE_HIDDEN, '. [ show hidden entries ]'),
        hide_hidden=Sentinel(SentinelTag.TOGGLE_HIDDEN, '. [ hide hidden entries ]'),
    )

def directory_sentinels(separator: str = '/', hidden_marker: str = '.') -> Sentinels:
    return Sentinels(
        select_current=Sentinel(SentinelTag.SELECT_CURRENT, f'{separator} [ select current directory ]'),
        show_hidden=Sentinel(SentinelTag.TOGGLE_HIDDEN, f'{hidden_marker} [ show hidden files ]'),
        hide_hidden=Sentinel(SentinelTag.TOGGLE_HIDDEN, f'{hidden_marker} [ hide hidden files ]'),
    )
