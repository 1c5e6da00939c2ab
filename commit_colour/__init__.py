"""commit-colour — derive a terminal colour from the current git commit."""

__version__ = '0.1.0'
