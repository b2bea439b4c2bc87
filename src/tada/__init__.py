"""tada - a tiny local todo list with an interactive terminal view."""

__version__ = "0.1.0"
