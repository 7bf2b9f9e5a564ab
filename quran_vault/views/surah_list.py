"""Index of all surahs, one row per chapter."""

import logging

from quran_vault.api import ChapterCache
from quran_vault.models import Chapter
from quran_vault.rendering.dom import create_el
from quran_vault.rendering.target import RenderTarget

logger = logging.getLogger(__name__)


class SurahList:
    """Lists every chapter with its number, names, verse count and place.

    Each row carries ``data-chapter`` so a host can open the chapter in a
    ChapterReader when the row is chosen.

    Args:
        cache: Chapter list memo shared with the other views.
        target: Where the list is rendered; a fresh one if omitted.
    """

    def __init__(self, cache: ChapterCache, target: RenderTarget | None = None) -> None:
        self._cache = cache
        self.target = target or RenderTarget()
        self.chapters: list[Chapter] = []

    @property
    def title(self) -> str:
        return "Surah list"

    async def load(self) -> bool:
        """Fetch the chapter list (once per cache) and render it.

        Returns:
            True if this call rendered the list.
        """
        token = self.target.begin()
        self.target.show_loading("Loading surahs...")

        try:
            chapters = await self._cache.get_or_fetch()
        except Exception as e:
            logger.exception("Failed to load the surah list")
            if self.target.is_current(token):
                self.target.show_error(str(e), prefix="Error loading surahs")
            return False

        if not self.target.is_current(token):
            return False

        self.chapters = chapters
        self._render()
        return True

    def _render(self) -> None:
        container = self.target.container
        container.clear()
        create_el(container, "h2", text="Surahs of the Quran", cls="surah-list-header")
        list_el = create_el(container, "div", cls="surah-list")

        for chapter in self.chapters:
            item = create_el(list_el, "div", cls="surah-item", data_chapter=str(chapter.id))
            create_el(item, "span", text=str(chapter.id), cls="surah-number")
            info = create_el(item, "div", cls="surah-info")
            create_el(info, "span", text=chapter.name_simple, cls="surah-name-transliterated")
            create_el(
                info,
                "span",
                text=f"{chapter.verses_count} verses · {chapter.revelation_place}",
                cls="surah-meta",
            )
            create_el(item, "span", text=chapter.name_arabic, cls="surah-name-arabic")
