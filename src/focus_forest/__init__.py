"""Focus Forest: focus-session timer whose completed sessions grow a forest."""

__version__ = "0.1.0"
