"""Perceived brightness of a commit colour.

Uses the W3C/ITU-R weighting (299, 587, 114) with integer arithmetic.
Anything above half of 255 (127) counts as LIGHT.
"""

from commit_colour.core.types import Brightness, CommitColour

LIGHT_THRESHOLD = 0xFF // 2


def luminance(colour: CommitColour) -> int:
    """Perceived luminance in [0, 255], truncated."""
    value = (299 * colour.red + 587 * colour.green + 114 * colour.blue) // 1000
    assert 0 <= value <= 255, f'luminance out of range: {value}'
    return value


def classify(colour: CommitColour) -> Brightness:
    if luminance(colour) > LIGHT_THRESHOLD:
        return Brightness.LIGHT
    return Brightness.DARK
