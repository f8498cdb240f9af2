"""Settings for palette-engine, read from the environment and .env files.

Lookup order (first wins):
  1. OS environment variables.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Unlike a plain dotenv loader, values from .env files are merged underneath
os.environ without writing to it.

Variables:
  PALETTE_COLOR_COUNT      colours to extract (3-12, default 6)
  PALETTE_SAMPLE_STEP      locator stride in pixels (>= 1, default 10)
  PALETTE_ANALOGOUS_ANGLE  analogous hue offset in degrees (default 30)
  PALETTE_QUANTIZER        kmeans | histogram (default kmeans)
  PALETTE_MAX_WORKERS      thread pool size for position lookups (default: one per colour)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from palette_engine.core.assembler import DEFAULT_COLOR_COUNT, MAX_COLOR_COUNT, MIN_COLOR_COUNT
from palette_engine.core.errors import ConfigError
from palette_engine.core.harmony import ANALOGOUS_ANGLE
from palette_engine.core.locator import SAMPLE_STEP
from palette_engine.core.quantizers import QUANTIZERS

PREFIX = 'PALETTE_'


def find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines; quotes around values are stripped, # lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def _int(env: Mapping[str, str], name: str, default: int | None) -> int | None:
    raw = env.get(PREFIX + name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f'{PREFIX}{name} must be an integer, got {raw!r}') from None


@dataclass(frozen=True)
class Settings:
    color_count: int = DEFAULT_COLOR_COUNT
    sample_step: int = SAMPLE_STEP
    analogous_angle: int = ANALOGOUS_ANGLE
    quantizer: str = 'kmeans'
    max_workers: int | None = None
    source: Path | None = None  # .env file the settings came from, if any

    def __post_init__(self) -> None:
        if not MIN_COLOR_COUNT <= self.color_count <= MAX_COLOR_COUNT:
            raise ConfigError(f'color_count must be {MIN_COLOR_COUNT}-{MAX_COLOR_COUNT}, got {self.color_count}')
        if self.sample_step < 1:
            raise ConfigError(f'sample_step must be >= 1, got {self.sample_step}')
        if self.quantizer not in QUANTIZERS:
            raise ConfigError(f'quantizer must be one of {", ".join(sorted(QUANTIZERS))}, got {self.quantizer!r}')
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigError(f'max_workers must be >= 1, got {self.max_workers}')

    @classmethod
    def from_mapping(cls, env: Mapping[str, str], source: Path | None = None) -> Settings:
        return cls(
            color_count=_int(env, 'COLOR_COUNT', DEFAULT_COLOR_COUNT),
            sample_step=_int(env, 'SAMPLE_STEP', SAMPLE_STEP),
            analogous_angle=_int(env, 'ANALOGOUS_ANGLE', ANALOGOUS_ANGLE),
            quantizer=env.get(PREFIX + 'QUANTIZER', 'kmeans').strip() or 'kmeans',
            max_workers=_int(env, 'MAX_WORKERS', None),
            source=source,
        )


def load_settings(env_file: str | None = None, cwd: Path | None = None) -> Settings:
    """Resolve Settings from os.environ over the chosen .env file.

    An explicit env_file that does not exist is an error; a missing
    walked-up .env just means defaults.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            raise ConfigError(f'env file not found: {env_file}')
    else:
        path = find_dotenv(cwd or Path.cwd())

    merged: dict[str, str] = read_dotenv(path) if path else {}
    merged.update(os.environ)
    return Settings.from_mapping(merged, source=path)
