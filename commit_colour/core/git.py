"""Run `git rev-parse HEAD` and capture the first line of its output.

stderr goes to /dev/null and only the first line is read, capped at a full
SHA-1 hex digest plus its newline. The child's exit status is ignored as long
as it printed a line. The process handle is released on every path.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from commit_colour.core.errors import NoOutput, SpawnError
from commit_colour.core.log import get_logger

SHA1_HEX_LENGTH = 40
# 40 hex digits + '\n'
MAX_LINE_BYTES = SHA1_HEX_LENGTH + 1

GIT_REV_PARSE_HEAD = ('git', 'rev-parse', 'HEAD')

logger = get_logger()


def read_head_line(command: Sequence[str] = GIT_REV_PARSE_HEAD) -> bytes:
    """Return the first output line of `command`, at most MAX_LINE_BYTES long."""
    try:
        proc = subprocess.Popen(
            list(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise SpawnError(f'could not start {command[0]!r}: {e}') from e

    # Popen.__exit__ closes the pipe and waits for the child
    with proc:
        line = proc.stdout.readline(MAX_LINE_BYTES)

    logger.debug('%s exited with status %s', ' '.join(command), proc.returncode)
    if not line:
        raise NoOutput(f'{" ".join(command)} produced no output')
    return line
