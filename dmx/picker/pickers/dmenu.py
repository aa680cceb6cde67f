import logging

from plumbum import CommandNotFound, local

from dmx.config import PickerConfig
from dmx.picker.pickers import ItemPickerBase
from dmx.sink.errors import ProcessExecutionError, ProcessSpawnError

logger = logging.getLogger(__name__)


class DmenuItemPicker(ItemPickerBase):
    """Runs dmenu (or anything following its stdin/stdout contract) once per selection.

    Every menu line goes to the process' stdin; whatever it prints is the
    selection. No timeout is applied; the user can take as long as they
    like to pick something.
    """
    def __init__(self, config: PickerConfig = PickerConfig()):
        self.config = config
        self._argv = [config.dmenu_path]

    def arguments(self, prompt: str, rows: int) -> list[str]:
        c = self.config
        return ['-l', str(rows), '-p', prompt, '-fn', c.font,
                '-nb', c.normal_bg, '-nf', c.normal_fg,
                '-sb', c.selected_bg, '-sf', c.selected_fg]

    def describe(self) -> list[str]:
        return self._argv

    def _present(self, prompt: str, lines: list[bytes]) -> bytes:
        try:
            dmenu = local[self.config.dmenu_path]
        except CommandNotFound as e:
            raise ProcessSpawnError(f'picker executable {self.config.dmenu_path!r} not found') from e
        cmd = dmenu[self.arguments(prompt, len(lines))]
        self._argv = cmd.formulate()
        logger.debug(f'running {self._argv}')

        try:
            proc = cmd.popen()
        except OSError as e:
            raise ProcessSpawnError(f'unable to run picker {self.config.dmenu_path!r}: {e}') from e
        # leaving the with block closes every pipe and reaps the process
        with proc:
            stdout, stderr = proc.communicate(b''.join(lines))
        logger.debug(f'picker exited with {proc.returncode}, output {stdout!r}')
        if proc.returncode != 0:
            raise ProcessExecutionError(self._argv, proc.returncode, stderr)
        return stdout
