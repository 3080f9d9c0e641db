from __future__ import annotations

from dataclasses import dataclass, field

from ..buffer import LineBuffer
from ..terminal import ScreenDimensions
from ..viewport import CursorPosition, Viewport


@dataclass
class ViewerState:
    dims: ScreenDimensions
    buffer: LineBuffer = field(default_factory=LineBuffer)
    cursor: CursorPosition = field(default_factory=CursorPosition)
    viewport: Viewport = field(default_factory=Viewport)
    quit_requested: bool = False
