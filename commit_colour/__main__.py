"""commit-colour — Colour a shell prompt by the current git commit.

Usage: commit-colour [--explain [--json]] [--swatch PATH] [--debug]

With no options, runs `git rev-parse HEAD`, takes the first six hex characters
as an RGB colour and writes one ANSI 24-bit escape sequence to stdout:

  light colours   ESC[38;2;R;G;Bm           (foreground)
  dark colours    ESC[48;2;R;G;Bm ESC[37m   (background, white text)

No newline and no reset are written. On any failure (not a repository, git
missing, malformed output) nothing is written and the exit status is 1, so a
prompt substitution simply comes out empty.

Example (bash):
  PS1='\\[$(commit-colour)\\]\\w\\[\\e[0m\\] \\$ '
"""

import argparse
import sys

from commit_colour import __version__
from commit_colour.core.errors import CommitColourError
from commit_colour.core.escape import emit
from commit_colour.core.git import read_head_line
from commit_colour.core.log import configure_logging, get_logger
from commit_colour.core.palette import classify
from commit_colour.core.parser import parse_commit_colour
from commit_colour.core.report import build_report, format_json, format_text
from commit_colour.core.swatch import save_swatch

logger = get_logger()


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  commit-colour\n'
        '  commit-colour --explain\n'
        '  commit-colour --explain --json\n'
        '  commit-colour --swatch ./tmp/prompt.png\n'
        '  commit-colour --debug\n'
    )
    parser = argparse.ArgumentParser(
        prog='commit-colour',
        description='Print a 24-bit ANSI colour derived from the current git commit.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '-d',
        '--debug',
        action='store_true',
        help='Log why a run failed to stderr (normally silent)',
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        '-e',
        '--explain',
        action='store_true',
        help='Print colour, luminance and escape details instead of the escape itself',
    )
    parser.add_argument('-j', '--json', action='store_true', help='With --explain, output JSON instead of text')
    output.add_argument(
        '-s',
        '--swatch',
        metavar='PATH',
        default=None,
        help='Write a PNG preview of the prompt colour instead of emitting the escape',
    )
    return parser


def _run(args: argparse.Namespace) -> None:
    """Run invoke -> parse -> classify -> emit. Raises CommitColourError on failure."""
    line = read_head_line()
    colour = parse_commit_colour(line)
    brightness = classify(colour)
    commit = line.rstrip(b'\r\n').decode('ascii', errors='replace')
    logger.debug('commit %s -> %s (%s)', commit, colour.hex, brightness.value)

    if args.explain:
        report = build_report(commit, colour)
        print(format_json(report) if args.json else format_text(report))
        return

    if args.swatch:
        save_swatch(args.swatch, colour, brightness, label=commit[:12])
        return

    emit(colour, brightness)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.json and not args.explain:
        parser.error('--json requires --explain')

    if args.debug:
        configure_logging()

    try:
        _run(args)
    except CommitColourError as e:
        logger.debug('%s: %s', type(e).__name__, e)
        sys.exit(1)

    sys.exit(0)


if __name__ == '__main__':
    main()
