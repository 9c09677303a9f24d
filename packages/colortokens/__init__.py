"""colortokens - extract solid colors from design node trees as named tokens."""

__version__ = "0.1.0"
