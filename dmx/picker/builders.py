
from typing import Iterable, TypeAlias

from dmx.picker.items import PickableBase
from dmx.picker.items.hierarchy import Category


PickableTree: TypeAlias = 'PickableBase | tuple[str, str, Iterable[PickableTree]]'

def build_tree(pickables: Iterable[PickableTree], separator: str = '/', desc: str = 'Base Category') -> Category:
    """Builds a base category from items and (token, description, children) tuples"""
    def build_tree_rec(pt: PickableTree) -> PickableBase:
        if isinstance(pt, tuple):
            token, cat_desc, children = pt
            return Category(token, cat_desc, [build_tree_rec(x) for x in children], separator=separator)
        else:
            # It's already a pickable
            return pt

    root_items = [build_tree_rec(x) for x in pickables]
    return Category('', desc, root_items, separator=separator)
