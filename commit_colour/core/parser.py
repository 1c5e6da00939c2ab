"""Turn a captured commit line into a CommitColour.

Only lowercase hex is accepted, matching what `git rev-parse` prints. The
colour comes from the first six characters: offsets [0,2), [2,4), [4,6).
"""

from commit_colour.core.errors import InvalidHexDigit, TruncatedInput
from commit_colour.core.git import SHA1_HEX_LENGTH
from commit_colour.core.types import CommitColour

_DIGIT_0 = ord('0')
_DIGIT_9 = ord('9')
_LOWER_A = ord('a')
_LOWER_F = ord('f')


def decode_hex_digit(byte: int, offset: int = 0) -> int:
    """Decode one ASCII hex digit. Uppercase is rejected."""
    if _DIGIT_0 <= byte <= _DIGIT_9:
        return byte - _DIGIT_0
    if _LOWER_A <= byte <= _LOWER_F:
        return byte - _LOWER_A + 10
    raise InvalidHexDigit(chr(byte), offset)


def parse_hex_octet(line: bytes, offset: int) -> int:
    """Parse the two hex digits at `offset` into a byte value."""
    upper = decode_hex_digit(line[offset], offset)
    lower = decode_hex_digit(line[offset + 1], offset + 1)
    return (upper << 4) | lower


def parse_commit_colour(line: bytes) -> CommitColour:
    """Parse a `git rev-parse HEAD` line. The trailing newline is optional."""
    digest = line.rstrip(b'\r\n')
    if len(digest) < SHA1_HEX_LENGTH:
        raise TruncatedInput(len(digest), SHA1_HEX_LENGTH)

    return CommitColour(
        red=parse_hex_octet(digest, 0),
        green=parse_hex_octet(digest, 2),
        blue=parse_hex_octet(digest, 4),
    )
