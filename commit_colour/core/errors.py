"""Failure kinds for a commit-colour run.

Every kind ends the run the same way (no stdout, exit status 1). They are kept
apart so --debug can say which step failed.
"""


class CommitColourError(Exception):
    """Base class for every failure that aborts a run."""


class SpawnError(CommitColourError):
    """The git command could not be started."""


class NoOutput(CommitColourError):
    """The git command closed stdout before producing a line."""


class TruncatedInput(CommitColourError):
    """The captured line is shorter than a full hex digest."""

    def __init__(self, length: int, expected: int):
        super().__init__(f'captured line has {length} characters, expected at least {expected}')
        self.length = length
        self.expected = expected


class InvalidHexDigit(CommitColourError):
    """A character outside 0-9a-f was found in the colour prefix."""

    def __init__(self, char: str, offset: int):
        super().__init__(f'invalid hex digit {char!r} at offset {offset}')
        self.char = char
        self.offset = offset


class SwatchError(CommitColourError):
    """The preview image could not be written."""
