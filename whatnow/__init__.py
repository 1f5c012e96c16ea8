"""whatnow - task suggestion engine and "What Now?" context wizard."""

__version__ = "0.1.0"
