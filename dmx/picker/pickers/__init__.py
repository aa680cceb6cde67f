import logging
from typing import Sequence

from dmx.picker.format import format_lines
from dmx.picker.items import PickableBase
from dmx.sink.errors import UnmatchedSelectionError, stub

logger = logging.getLogger(__name__)


class ItemPickerBase:
    """Base for item pickers.

    A picker is shown a list of lines and answers with one of them, verbatim,
    or with nothing at all when the user backs out. select() turns that answer
    back into the item that rendered the line. If two items render identical
    lines the first one wins, so callers should keep lines distinct.
    """
    def select(self, prompt: str, items: Sequence[PickableBase]) -> PickableBase | None:
        lines = format_lines(items)
        output = self._present(prompt, lines)
        if output == b'':
            logger.debug(f'{prompt!r}: nothing selected')
            return None
        for itm, line in zip(items, lines):
            if line == output:
                logger.debug(f'{prompt!r}: selected {itm!r}')
                return itm
        raise UnmatchedSelectionError(self.describe(), output)

    def describe(self) -> list[str]:
        """argv-like description of the picker, for error messages"""
        return [type(self).__name__]

    def _present(self, prompt: str, lines: list[bytes]) -> bytes:
        """Shows the terminated `lines` and returns the chosen one, or b'' if nothing was chosen"""
        stub()
        raise Exception() # will throw inside of stub, this is just here to satisfy static analysis
