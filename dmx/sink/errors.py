class DmxError(Exception):
    """Base for every error raised by dmx."""

class StubError(DmxError, NotImplementedError):
    """Error for methods that haven't been implemented."""

class ConfigError(DmxError):
    """A configuration file exists but couldn't be read or parsed."""

class ProcessSpawnError(DmxError):
    """The picker executable is missing or can't be run."""

class ProcessExecutionError(DmxError):
    """The picker ran but broke its contract."""
    def __init__(self, argv: list[str], retcode: int | None, stderr: bytes = b'', message: str | None = None):
        self.argv = argv
        self.retcode = retcode
        self.stderr = stderr
        if message is None:
            message = f'{argv[0] if argv else "picker"} exited with status {retcode}'
            err = stderr.decode(errors='replace').strip()
            if err:
                message = f'{message}: {err}'
        super().__init__(message)

class UnmatchedSelectionError(ProcessExecutionError):
    """The picker printed something that isn't one of the lines it was given."""
    def __init__(self, argv: list[str], output: bytes):
        self.output = output
        super().__init__(argv, 0, message=f'picker output {output!r} matches none of the presented lines')

class EnumerationError(DmxError):
    """A directory or menu document couldn't be read."""

class StorageError(DmxError):
    """A menu document couldn't be written back."""

class DuplicateItemError(DmxError):
    """An item with the same key already exists at that level."""

def stub():
    import inspect
    frame = inspect.currentframe()
    if not frame:
        raise StubError("Method not implemented, current frame unknown")
    caller_frame = frame.f_back
    if not caller_frame:
        raise StubError("Method not implemented, caller frame unknown")
    caller = caller_frame.f_code
    raise StubError(f"Method not implemented: {caller.co_name} (in {caller.co_filename}:{caller.co_firstlineno})")
