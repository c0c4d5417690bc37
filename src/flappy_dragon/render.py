"""
render.py: Render directives and the per-tick context the game writes them to.

The game never draws. Each tick it records directives on a `TickContext`;
the host replays them onto whatever surface it owns.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .constants import BLACK
from .data_models import InputEvent

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Clear:
    background: Color


@dataclass(frozen=True)
class SetGlyph:
    x: int
    y: int
    fg: Color
    bg: Color
    glyph: str


@dataclass(frozen=True)
class PrintText:
    x: int
    y: int
    text: str


@dataclass(frozen=True)
class PrintCentered:
    y: int
    text: str


Directive = Union[Clear, SetGlyph, PrintText, PrintCentered]


@dataclass
class TickContext:
    """
    Everything one tick consumes and produces.

    `frame_time_ms` and `key` are supplied by the host; `commands` and
    `quitting` are filled in by the game.
    """
    frame_time_ms: float = 0.0
    key: Optional[InputEvent] = None
    commands: List[Directive] = field(default_factory=list)
    quitting: bool = False

    def cls(self, background: Color = BLACK):
        self.commands.append(Clear(background))

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        self.commands.append(SetGlyph(x, y, fg, bg, glyph))

    def print(self, x: int, y: int, text: str):
        self.commands.append(PrintText(x, y, text))

    def print_centered(self, y: int, text: str):
        self.commands.append(PrintCentered(y, text))

    def texts(self) -> List[str]:
        """All text written this tick, in order."""
        return [c.text for c in self.commands if isinstance(c, (PrintText, PrintCentered))]
