"""Shared types for palette-engine: RgbColor, HslColor, Position, PaletteEntry, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from palette_engine.core.channels import check_channels, check_range


@dataclass(frozen=True)
class RgbColor:
    """An sRGB triple. Channels are validated on construction, never clamped."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        check_channels(r=self.r, g=self.g, b=self.b)
        # numpy integers pass validation; store plain ints so entries serialize
        for name in ('r', 'g', 'b'):
            object.__setattr__(self, name, int(getattr(self, name)))

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class HslColor:
    """Hue in whole degrees [0, 360), saturation and lightness in whole percent."""

    h: int
    s: int
    l: int  # noqa: E741

    def __post_init__(self) -> None:
        check_range('h', self.h, 0, 359)
        check_range('s', self.s, 0, 100)
        check_range('l', self.l, 0, 100)
        for name in ('h', 's', 'l'):
            object.__setattr__(self, name, int(getattr(self, name)))

    def __iter__(self) -> Iterator[int]:
        return iter((self.h, self.s, self.l))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.h, self.s, self.l)


@dataclass(frozen=True)
class Position:
    """Where a colour was found, as percentages of raster width and height."""

    x: float
    y: float


@dataclass(frozen=True)
class PaletteEntry:
    """One extracted colour in every representation the tool displays."""

    hex: str
    rgb: RgbColor
    hsl: HslColor
    position: Position | None = None

    def with_position(self, position: Position | None) -> PaletteEntry:
        return replace(self, position=position)

    def rgb_string(self) -> str:
        return f'rgb({self.rgb.r}, {self.rgb.g}, {self.rgb.b})'

    def hsl_string(self) -> str:
        return f'hsl({self.hsl.h}, {self.hsl.s}%, {self.hsl.l}%)'

    def to_dict(self) -> dict[str, Any]:
        obj: dict[str, Any] = {
            'hex': self.hex,
            'rgb': {'r': self.rgb.r, 'g': self.rgb.g, 'b': self.rgb.b},
            'hsl': {'h': self.hsl.h, 's': self.hsl.s, 'l': self.hsl.l},
        }
        if self.position is not None:
            obj['position'] = {'x': self.position.x, 'y': self.position.y}
        return obj


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='harmony', help='Complementary and analogous colours')

        @command.arguments
        def arguments(parser):
            parser.add_argument('colour')

        @command.run
        def run(args, settings, report):
            ...
    """

    def __init__(self, name: str, help: str = '', produces_palette: bool = True):
        self.name = name
        self.help = help
        # False for commands whose report has no palette to export
        self.produces_palette = produces_palette
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function that adds argparse arguments."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, settings: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, settings, report)


@dataclass
class Report:
    """Accumulates a palette and per-command results for text/JSON/CSS output."""

    source: str = ''
    width: int = 0
    height: int = 0
    palette: list[PaletteEntry] = field(default_factory=list)
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add results under a named section, merging with earlier data."""
        if section not in self.sections:
            self.sections[section] = {}
        self.sections[section].update(data)
