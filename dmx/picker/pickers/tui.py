import logging

from dmx.picker.format import TERMINATOR
from dmx.picker.pickers import ItemPickerBase

logger = logging.getLogger(__name__)


class TuiItemPicker(ItemPickerBase):
    """A tui item picker, for when there's no display for dmenu to open on. q or escape backs out."""
    def __init__(self, quit_keys: list[int] | None = None):
        self.quit_keys = quit_keys if quit_keys is not None else [ord('q'), 27]

    def _present(self, prompt: str, lines: list[bytes]) -> bytes:
        if not lines:
            # pick refuses empty option lists; nothing to choose is the same as choosing nothing
            return b''
        return self.run_tui(prompt, lines)

    def run_tui(self, prompt: str, lines: list[bytes]) -> bytes:
        from pick import pick
        options = [l.removesuffix(TERMINATOR).decode(errors='replace') for l in lines]
        selected, idx = pick(options, prompt, multiselect=False, min_selection_count=1, quit_keys=self.quit_keys)

        if selected is None:
            return b''
        logger.debug(f'tui picked #{idx}: {selected!r}')
        return lines[idx] # type: ignore
