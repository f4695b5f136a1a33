"""Taarana: bilingual (English / Hindi) wellness backend."""

__version__ = "1.0.0"
