"""Search-and-replace building blocks: backreference replacement, zebra striping, file updates, button layout and settings."""

__version__ = "0.1.0"