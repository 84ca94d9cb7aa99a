"""A small modal terminal text editor with vi-style keys, drawn with curses."""

__version__ = "0.1.0"
__all__ = ["app", "display", "keys", "navigation", "state"]