"""commit_colour.core — git lookup, hex parsing, brightness and escape output.

Nothing here imports commit_colour.__main__. Everything is plain stdlib except
swatch.py, which draws the PNG preview with numpy and PIL.
"""
