"""Threaded status line generator for dwm-style window managers."""

__version__ = "0.1.0"