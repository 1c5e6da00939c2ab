"""ANSI SGR escape sequences for a commit colour.

LIGHT colours are written as a 24-bit foreground. DARK colours become a 24-bit
background followed by a white foreground; the background must come first.
No reset and no newline are written; the prompt resets attributes itself.
"""

from __future__ import annotations

import sys
from typing import TextIO

from commit_colour.core.types import Brightness, CommitColour

# Control Sequence Introducer
CSI = '\x1b['
# Select Graphic Rendition
SGR = 'm'

SET_24BIT_FOREGROUND = 38
SET_24BIT_BACKGROUND = 48
SET_WHITE_FOREGROUND = 37


def format_escape(colour: CommitColour, brightness: Brightness) -> str:
    """Build the escape sequence(s) for `colour`."""
    mode = SET_24BIT_FOREGROUND if brightness is Brightness.LIGHT else SET_24BIT_BACKGROUND
    seq = f'{CSI}{mode};2;{colour.red};{colour.green};{colour.blue}{SGR}'
    if mode == SET_24BIT_BACKGROUND:
        seq += f'{CSI}{SET_WHITE_FOREGROUND}{SGR}'
    return seq


def emit(colour: CommitColour, brightness: Brightness, stream: TextIO | None = None) -> None:
    """Write the escape sequence to `stream` (stdout by default) in one go."""
    out = stream if stream is not None else sys.stdout
    out.write(format_escape(colour, brightness))
    out.flush()
