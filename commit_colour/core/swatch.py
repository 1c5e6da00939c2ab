"""Render a preview PNG of how the commit colour looks in a prompt.

DARK colours are painted as the background with white text on top.
LIGHT colours are painted as text on a black terminal background.
"""

from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw

from commit_colour.core.errors import SwatchError
from commit_colour.core.types import Brightness, CommitColour

TERMINAL_BLACK = (0, 0, 0)
TERMINAL_WHITE = (255, 255, 255)

DEFAULT_SIZE = (320, 64)


def render_swatch(
    colour: CommitColour,
    brightness: Brightness,
    label: str,
    size: tuple[int, int] = DEFAULT_SIZE,
) -> Image.Image:
    """Return an RGB image of `label` drawn the way the escape sequence shows it."""
    width, height = size
    if brightness is Brightness.DARK:
        background, text = colour.rgb, TERMINAL_WHITE
    else:
        background, text = TERMINAL_BLACK, colour.rgb

    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:, :] = background
    image = Image.fromarray(canvas)

    draw = ImageDraw.Draw(image)
    # default bitmap font is ~11px tall
    draw.text((8, max(0, (height - 11) // 2)), label, fill=text)
    return image


def save_swatch(
    path: str,
    colour: CommitColour,
    brightness: Brightness,
    label: str,
    size: tuple[int, int] = DEFAULT_SIZE,
) -> None:
    """Render the swatch and write it to `path` as PNG."""
    image = render_swatch(colour, brightness, label, size)
    try:
        image.save(path, format='PNG')
    except OSError as e:
        raise SwatchError(f'could not write swatch to {path}: {e}') from e
