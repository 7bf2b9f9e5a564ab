"""Reader, Mushaf, surah list and search views rendered as HTML fragments."""

from quran_vault.views.mushaf import MushafNavigator
from quran_vault.views.reader import ChapterReader, format_verse_quote
from quran_vault.views.search import SearchPanel
from quran_vault.views.surah_list import SurahList

__all__ = ["ChapterReader", "MushafNavigator", "SearchPanel", "SurahList", "format_verse_quote"]
