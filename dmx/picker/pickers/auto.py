import os
from typing import Mapping

from dmx.config import PickerConfig
from dmx.picker.pickers import ItemPickerBase
from dmx.picker.pickers.dmenu import DmenuItemPicker
from dmx.picker.pickers.tui import TuiItemPicker

BACKENDS = ('auto', 'dmenu', 'tui')


def has_display(environ: Mapping[str, str] = os.environ) -> bool:
    return bool(environ.get('DISPLAY') or environ.get('WAYLAND_DISPLAY'))


class AutoItemPicker(ItemPickerBase):
    """A mixed graphical & tui item picker: dmenu when there's a display to put it on, the terminal otherwise"""
    def __init__(self, config: PickerConfig = PickerConfig(), environ: Mapping[str, str] = os.environ):
        if has_display(environ):
            self.inner: ItemPickerBase = DmenuItemPicker(config)
        else:
            self.inner = TuiItemPicker()

    def describe(self) -> list[str]:
        return self.inner.describe()

    def _present(self, prompt: str, lines: list[bytes]) -> bytes:
        return self.inner._present(prompt, lines)


def make_picker(backend: str, config: PickerConfig) -> ItemPickerBase:
    match backend:
        case 'auto':
            return AutoItemPicker(config)
        case 'dmenu':
            return DmenuItemPicker(config)
        case 'tui':
            return TuiItemPicker()
        case _:
            raise ValueError(f'unknown picker backend {backend!r}, expected one of {BACKENDS}')
