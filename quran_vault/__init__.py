"""Quran vault: fetch Quran text, render Mushaf pages, generate markdown notes."""

__version__ = "1.0.0"
