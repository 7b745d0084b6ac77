"""Quickly add to the end of a daily file, or print its content."""

__version__ = "0.1.0"
