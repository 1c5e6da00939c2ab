"""Tests for commit_colour.core.swatch — PNG preview rendering."""

from pathlib import Path

import pytest
from commit_colour.core.errors import SwatchError
from commit_colour.core.swatch import TERMINAL_BLACK, render_swatch, save_swatch
from commit_colour.core.types import Brightness, CommitColour
from PIL import Image


class TestRenderSwatch:
    def test_size_and_mode(self):
        img = render_swatch(CommitColour(10, 20, 30), Brightness.DARK, 'abc', size=(100, 40))
        assert img.size == (100, 40)
        assert img.mode == 'RGB'

    def test_dark_paints_background(self):
        img = render_swatch(CommitColour(10, 20, 30), Brightness.DARK, 'abc')
        assert img.getpixel((0, 0)) == (10, 20, 30)

    def test_light_paints_text_on_black(self):
        colour = CommitColour(171, 205, 239)
        img = render_swatch(colour, Brightness.LIGHT, 'abcdef012345')
        assert img.getpixel((0, 0)) == TERMINAL_BLACK
        colours = [c for _n, c in img.getcolors(maxcolors=100_000)]
        assert len(colours) > 1
        # antialiased text blends from black towards the commit colour
        for r, g, b in colours:
            assert r <= colour.red and g <= colour.green and b <= colour.blue

    def test_empty_label(self):
        img = render_swatch(CommitColour(1, 2, 3), Brightness.DARK, '')
        assert img.getcolors() == [(320 * 64, (1, 2, 3))]


class TestSaveSwatch:
    def test_writes_png(self, tmp_path: Path) -> None:
        path = tmp_path / 'prompt.png'
        save_swatch(str(path), CommitColour(0, 0, 0), Brightness.DARK, 'abc')
        assert Image.open(path).format == 'PNG'

    def test_unwritable_path(self, tmp_path: Path) -> None:
        with pytest.raises(SwatchError):
            save_swatch(str(tmp_path / 'missing' / 'prompt.png'), CommitColour(0, 0, 0), Brightness.DARK, 'abc')
