"""Detect the natural language and writing script of text."""

__version__ = "0.1.0"