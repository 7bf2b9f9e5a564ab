"""Session-scoped memo for the chapter list."""

import asyncio
import logging
from collections.abc import Iterable

from quran_vault.api.client import QuranClient
from quran_vault.models import Chapter

logger = logging.getLogger(__name__)


class ChapterCache:
    """Fetches the chapter list at most once until invalidated.

    Owned by whatever drives a generation run or a view lifecycle, so
    each owner (and each test) gets its own instance. Concurrent callers
    share a single request: the first one fetches while the others wait
    on the fill lock and then read the stored list.

    Args:
        client: Client used for the single ``get_chapters`` call.
        language: Language passed to the chapters endpoint.
    """

    def __init__(self, client: QuranClient, language: str = "en") -> None:
        self._client = client
        self._language = language
        self._chapters: list[Chapter] | None = None
        self._fill_lock = asyncio.Lock()
        self.fetch_count = 0

    @property
    def is_filled(self) -> bool:
        return self._chapters is not None

    async def get_or_fetch(self) -> list[Chapter]:
        if self._chapters is not None:
            return self._chapters

        async with self._fill_lock:
            # Another caller may have filled it while we waited
            if self._chapters is None:
                self.fetch_count += 1
                self._chapters = await self._client.get_chapters(self._language)
                logger.debug("Cached %d chapters", len(self._chapters))
        return self._chapters

    def invalidate(self) -> None:
        self._chapters = None

    async def for_ids(self, chapter_ids: Iterable[int]) -> dict[int, Chapter]:
        """Map the given ids to chapters, in the order the ids are given.

        Unknown and repeated ids are skipped.
        """
        by_id = {chapter.id: chapter for chapter in await self.get_or_fetch()}
        resolved: dict[int, Chapter] = {}
        for chapter_id in chapter_ids:
            if chapter_id in by_id and chapter_id not in resolved:
                resolved[chapter_id] = by_id[chapter_id]
        return resolved
