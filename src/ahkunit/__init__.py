"""ahkunit - discover and run AutoHotkey unit tests."""

__version__ = "0.1.0"
