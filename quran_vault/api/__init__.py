"""Remote content API access."""

from quran_vault.api.cache import ChapterCache
from quran_vault.api.client import QuranApiError, QuranClient

__all__ = ["ChapterCache", "QuranApiError", "QuranClient"]
