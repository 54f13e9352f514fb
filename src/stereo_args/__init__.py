"""Positional-argument and option-value parsing for the stereo command-line tools."""

__version__ = "0.1.0"
