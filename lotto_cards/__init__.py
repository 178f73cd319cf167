"""Printable Russian Lotto cards as A4 PDF."""

__version__ = "0.1.0"
