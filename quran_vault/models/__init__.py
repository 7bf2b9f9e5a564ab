"""Data models for the Quran vault tooling."""

from quran_vault.models.chapter import Chapter, TranslatedName
from quran_vault.models.collection import CollectionPreset, VerseRange
from quran_vault.models.juz import Juz
from quran_vault.models.layout import (
    LineBlock,
    MushafPagePlan,
    PageFooter,
    SurahHeaderBlock,
)
from quran_vault.models.pagination import Pagination
from quran_vault.models.search import (
    SearchResponse,
    SearchResults,
    SearchResultVerse,
    SearchTranslation,
)
from quran_vault.models.verse import Translation, Verse, VerseWithWords, Word

__all__ = [
    "Chapter",
    "CollectionPreset",
    "Juz",
    "LineBlock",
    "MushafPagePlan",
    "PageFooter",
    "Pagination",
    "SearchResponse",
    "SearchResultVerse",
    "SearchResults",
    "SearchTranslation",
    "SurahHeaderBlock",
    "TranslatedName",
    "Translation",
    "Verse",
    "VerseRange",
    "VerseWithWords",
    "Word",
]
