"""Report builder — text and JSON output for --explain."""

import json
from typing import Any

from commit_colour.core.escape import format_escape
from commit_colour.core.palette import LIGHT_THRESHOLD, classify, luminance
from commit_colour.core.types import Brightness, ColourReport, CommitColour


def build_report(commit: str, colour: CommitColour) -> ColourReport:
    """Collect everything derived from `colour` into one report."""
    brightness = classify(colour)
    return ColourReport(
        commit=commit,
        colour=colour,
        luminance=luminance(colour),
        brightness=brightness,
        escape=format_escape(colour, brightness),
    )


def format_text(report: ColourReport) -> str:
    """Format report as human-readable text."""
    c = report.colour
    mode = 'foreground' if report.brightness is Brightness.LIGHT else 'background + white text'
    lines = [
        f'commit-colour: {report.commit}',
        '',
        f'  colour:     {c.hex}  rgb({c.red}, {c.green}, {c.blue})',
        f'  luminance:  {report.luminance} (threshold {LIGHT_THRESHOLD})',
        f'  brightness: {report.brightness.value}',
        f'  mode:       {mode}',
        f'  escape:     {report.escape!r}',
    ]
    return '\n'.join(lines)


def format_json(report: ColourReport) -> str:
    """Format report as JSON."""
    c = report.colour
    obj: dict[str, Any] = {
        'commit': report.commit,
        'colour': {'hex': c.hex, 'r': c.red, 'g': c.green, 'b': c.blue},
        'luminance': report.luminance,
        'brightness': report.brightness.value,
        'escape': report.escape,
    }
    return json.dumps(obj, indent=2)
