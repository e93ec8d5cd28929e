"""Terminal Snake: grid simulation core plus curses shells."""

__version__ = "0.3.0"
