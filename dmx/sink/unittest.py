import unittest, logging, sys

from dmx.picker.pickers import ItemPickerBase

class _BufferingHandler(logging.Handler):
    def __init__(self, *args):
        super().__init__(*args)
        self.records = []

    def emit(self, record):
        self.records.append(record)


class LoggedTestCase(unittest.TestCase):
    """Test case which accumulates logs (its own and the dmx library's) as it runs and only prints them if there is a failure or error"""
    def __init__(self, *args):
        super().__init__(*args)

        self.logger = logging.getLogger("dmx.tests")
        self.logger.setLevel(logging.DEBUG)
        self.library_logger = logging.getLogger("dmx")

    def setUp(self):
        super().setUp()
        for hdlr in list(self.library_logger.handlers):
            if isinstance(hdlr, _BufferingHandler):
                self.library_logger.removeHandler(hdlr)
        self.logbuf = _BufferingHandler()
        self._previous_level = self.library_logger.level
        self.library_logger.setLevel(logging.DEBUG)
        # dmx.tests propagates into dmx, so one handler sees both
        self.library_logger.addHandler(self.logbuf)

    def tearDown(self):
        super().tearDown()
        self.library_logger.removeHandler(self.logbuf)
        self.library_logger.setLevel(self._previous_level)

    def run(self, result=None):
        # pytest passes its own result object, which keeps no failure lists
        counting = isinstance(result, unittest.TestResult)
        failures_before = len(result.failures) + len(result.errors) if counting else 0 # type: ignore[union-attr]
        result = super().run(result)
        if (isinstance(result, unittest.TestResult) and hasattr(self, 'logbuf')
                and (len(result.failures) + len(result.errors)) > failures_before):
            sh = logging.StreamHandler(sys.stdout)
            sh.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
            for r in self.logbuf.records:
                sh.emit(r)
        return result


class ScriptedItemPicker(ItemPickerBase):
    """Stands in for a person at the picker. Each step is the line to choose, None to back out, or raw bytes to print.

    A line is chosen when the step equals the whole line or its first word.
    Every menu shown is kept in `shown` as (prompt, lines) for inspection.
    """
    def __init__(self, steps: list[str | bytes | None]):
        self.steps = list(steps)
        self.shown: list[tuple[str, list[str]]] = []

    def _present(self, prompt: str, lines: list[bytes]) -> bytes:
        texts = [l.decode().rstrip('\n') for l in lines]
        self.shown.append((prompt, texts))
        if not self.steps:
            raise AssertionError(f'picker shown {prompt!r} {texts} with no steps left')
        step = self.steps.pop(0)
        if step is None:
            return b''
        if isinstance(step, bytes):
            return step
        for line, text in zip(lines, texts):
            words = text.split(maxsplit=1)
            if text == step or (words and words[0] == step):
                return line
        raise AssertionError(f'{step!r} is not in the menu {texts}')
