"""Picker configuration.

The picker's executable and styling come from a small key/value file shared
by the dmx tools. Lines look like any of

    dmenu /usr/local/bin/dmenu
    font = monospace:size=10
    normal_bg: #444

Blank lines and lines starting with ``#`` are skipped. Only the first config
file found is read; nothing is merged across files.
"""

import dataclasses
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from dmx.sink.errors import ConfigError

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r'^\s*([A-Za-z_][\w-]*)\s*(?:[=:]\s*|\s+)(.*?)\s*$')

# config keys -> PickerConfig fields
KEYS = {
    'dmenu': 'dmenu_path',
    'font': 'font',
    'normal_fg': 'normal_fg',
    'normal_bg': 'normal_bg',
    'selected_fg': 'selected_fg',
    'selected_bg': 'selected_bg',
}


@dataclass(frozen=True)
class PickerConfig:
    dmenu_path: str = 'dmenu'
    font: str = '-*-fixed-medium-r-normal--13-*-*-*-*-*-ISO10646-*'
    normal_fg: str = '#000'
    normal_bg: str = '#444'
    selected_fg: str = '#ddd'
    selected_bg: str = '#222'


def default_config_paths() -> list[Path]:
    return [Path.home() / '.config' / 'dmx.conf', Path('/usr/share/dmx.conf')]

def parse_config(text: str) -> dict[str, str]:
    """Parses config text into raw key/value pairs. Later duplicates win."""
    values = {}
    for n, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        m = _LINE_RE.match(line)
        if not m:
            raise ConfigError(f'line {n}: expected "key value", got {stripped!r}')
        values[m.group(1)] = m.group(2)
    return values

def read_config_file(path: Path, base: PickerConfig = PickerConfig()) -> PickerConfig:
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f'unable to read config file {str(path)!r}: {e}') from e
    try:
        values = parse_config(text)
    except ConfigError as e:
        raise ConfigError(f'{path}: {e}') from e

    overrides = {}
    for k, v in values.items():
        field = KEYS.get(k)
        if field is None:
            # the same file configures other tools too
            logger.debug(f'{path}: ignoring unknown key {k!r}')
            continue
        overrides[field] = v
    return dataclasses.replace(base, **overrides)

def autoconfigure(other_cfgs: Iterable[str | Path] | None = None) -> PickerConfig:
    """Reads the first existing file out of `other_cfgs`, ~/.config/dmx.conf and /usr/share/dmx.conf.

    A broken config file is reported and the defaults are kept.
    """
    candidates = [Path(p) for p in other_cfgs or []] + default_config_paths()
    for path in candidates:
        if not path.exists():
            continue
        logger.debug(f'using config file {path}')
        try:
            return read_config_file(path)
        except ConfigError as e:
            logger.warning(f'{e}; using default picker settings')
            return PickerConfig()
    logger.debug(f'no config file found in {[str(p) for p in candidates]}')
    return PickerConfig()
