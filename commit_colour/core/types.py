"""Shared types for commit-colour: CommitColour, Brightness, ColourReport."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Brightness(enum.Enum):
    """Perceived brightness of a commit colour."""

    LIGHT = 'light'
    DARK = 'dark'


@dataclass(frozen=True)
class CommitColour:
    """24-bit colour derived from the first six hex characters of a commit."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f'{name} component out of range: {value}')

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def hex(self) -> str:
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'


@dataclass
class ColourReport:
    """Everything derived from one commit identifier, for --explain output."""

    commit: str
    colour: CommitColour
    luminance: int
    brightness: Brightness
    escape: str
