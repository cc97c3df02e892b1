"""
Terminal Display
Clears the terminal and redraws the grid in place on every frame.
"""
from __future__ import annotations

import sys
from typing import Optional, TextIO

import numpy as np

from asciispin.model.quantizer import grid_to_lines

CLEAR_SCREEN = "\x1b[2J"
CURSOR_HOME = "\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TerminalDisplay:
    """Display sink writing ANSI-controlled frames to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear

    def __enter__(self) -> TerminalDisplay:
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()
        return self

    def __exit__(self, *exc) -> None:
        self.stream.write(SHOW_CURSOR + "\n")
        self.stream.flush()

    def __call__(self, grid: np.ndarray) -> None:
        prefix = CLEAR_SCREEN + CURSOR_HOME if self.clear else ""
        self.stream.write(prefix + "\n".join(grid_to_lines(grid)) + "\n")
        self.stream.flush()
