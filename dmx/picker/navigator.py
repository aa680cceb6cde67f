"""Browsing a hierarchy one menu at a time.

A picker only ever answers one question: which of these lines? The navigator
turns a string of those answers into a walk through a tree. Picking a
container descends into it, backing out of a menu climbs back to the parent,
and backing out of the bottom-most menu ends the walk with nothing chosen.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from dmx.picker.items import ItemKind, PickableBase, SentinelTag, Sentinels
from dmx.picker.pickers import ItemPickerBase

logger = logging.getLogger(__name__)


class Selection(Enum):
    """What a walk is allowed to end on"""
    LEAF = 1
    CONTAINER = 2
    EITHER = 3

class PickedAction(Enum):
    LEAF = 1
    CONTAINER = 2
    NOTHING = 3

@dataclass
class PickedResult:
    action: PickedAction
    item: PickableBase | None = None

@dataclass
class _Frame:
    container: PickableBase
    prompt: str


class HierarchyNavigator:
    def __init__(self, picker: ItemPickerBase, sentinels: Sentinels, selection: Selection = Selection.LEAF,
                 show_hidden: bool = False, hidden_marker: str = '.'):
        self.picker = picker
        self.sentinels = sentinels
        self.selection = selection
        self.show_hidden = show_hidden
        self.hidden_marker = hidden_marker

    def menu_for(self, container: PickableBase, show_hidden: bool) -> list[PickableBase]:
        """The list shown while inside `container`: sentinels first, then whatever children are visible"""
        shown = []
        for c in container.children():
            if not show_hidden and c.is_hidden(self.hidden_marker):
                continue
            if self.selection == Selection.CONTAINER and c.kind != ItemKind.CONTAINER:
                continue
            shown.append(c)

        menu: list[PickableBase] = []
        if self.selection != Selection.LEAF:
            menu.append(self.sentinels.select_current)
        menu.append(self.sentinels.toggle_for(show_hidden))
        return menu + sorted(shown)

    def run(self, root: PickableBase, prompt: str = '', trail: Sequence[PickableBase] = ()) -> PickedResult:
        """Walks down from `root` until something is chosen or the user backs out of `root` itself.

        `trail` lists containers leading down from `root` to start in; backing
        out of them climbs through each one on the way up.
        """
        stack = [_Frame(root, prompt)]
        for c in trail:
            stack.append(_Frame(c, stack[-1].prompt + c.prompt_segment()))
        show_hidden = self.show_hidden

        while True:
            frame = stack[-1]
            choice = self.picker.select(frame.prompt, self.menu_for(frame.container, show_hidden))

            if choice is None:
                if len(stack) == 1:
                    return PickedResult(PickedAction.NOTHING)
                stack.pop()
                logger.debug(f'backed out to {stack[-1].container!r}')
                continue

            match choice.kind:
                case ItemKind.SENTINEL:
                    match choice.tag: # type: ignore[attr-defined]
                        case SentinelTag.SELECT_CURRENT:
                            return PickedResult(PickedAction.CONTAINER, frame.container)
                        case SentinelTag.TOGGLE_HIDDEN:
                            show_hidden = not show_hidden
                            logger.debug(f'show hidden: {show_hidden}')
                case ItemKind.CONTAINER:
                    stack.append(_Frame(choice, frame.prompt + choice.prompt_segment()))
                    logger.debug(f'descended into {choice!r}')
                case ItemKind.LEAF:
                    return PickedResult(PickedAction.LEAF, choice)
