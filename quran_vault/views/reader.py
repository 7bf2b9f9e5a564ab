"""Chapter reader: one surah rendered verse by verse."""

import asyncio
import logging

from bs4 import Tag

from quran_vault.api import QuranClient
from quran_vault.config import DisplayConfig
from quran_vault.constants import TOTAL_SURAHS
from quran_vault.markdown import strip_html
from quran_vault.models import Chapter, Verse
from quran_vault.rendering.dom import create_el
from quran_vault.rendering.mushaf import BISMILLAH, shows_bismillah
from quran_vault.rendering.target import RenderTarget

logger = logging.getLogger(__name__)


def format_verse_quote(verse: Verse) -> str:
    """A verse as a markdown quote callout, ready to insert into a note."""
    translation = verse.first_translation
    translation_line = strip_html(translation.text) if translation else ""
    return "\n".join(
        [
            f"> [!quote] Quran {verse.verse_key}",
            f"> {verse.text_uthmani}",
            ">",
            f"> {translation_line}",
            "",
        ]
    )


class ChapterReader:
    """Loads and renders a chapter into a render target.

    Args:
        client: API client.
        display: Display preferences (translation, Arabic, font size).
        target: Where the chapter is rendered; a fresh one if omitted.
    """

    def __init__(
        self,
        client: QuranClient,
        display: DisplayConfig,
        target: RenderTarget | None = None,
    ) -> None:
        self._client = client
        self._display = display
        self.target = target or RenderTarget()
        self.current_chapter = 1
        self.chapter: Chapter | None = None
        self.verses: list[Verse] = []

    @property
    def title(self) -> str:
        return self.chapter.name_simple if self.chapter else "Quran reader"

    async def load_chapter(self, chapter_id: int) -> bool:
        """Fetch chapter metadata and verses together, then render.

        Returns:
            True if this call rendered the chapter; False on error or when
            a later load superseded it.
        """
        token = self.target.begin()
        self.target.show_loading()
        self.current_chapter = chapter_id

        try:
            chapter, verses = await asyncio.gather(
                self._client.get_chapter(chapter_id, self._display.language),
                self._client.get_verses_by_chapter(
                    chapter_id,
                    translations=[self._display.default_translation],
                    per_page=300,
                ),
            )
        except Exception as e:
            logger.exception("Failed to load chapter %d", chapter_id)
            if self.target.is_current(token):
                self.target.show_error(str(e))
            return False

        if not self.target.is_current(token):
            logger.debug("Discarding stale chapter %d", chapter_id)
            return False

        self.chapter = chapter
        self.verses = verses
        self._render()
        return True

    async def navigate(self, delta: int) -> bool:
        """Move to a neighbouring chapter; out-of-range moves do nothing."""
        target = self.current_chapter + delta
        if not 1 <= target <= TOTAL_SURAHS:
            return False
        return await self.load_chapter(target)

    def _render(self) -> None:
        container = self.target.container
        container.clear()
        if self.chapter is None:
            return

        header = create_el(container, "div", cls="chapter-header")
        create_el(header, "h1", text=self.chapter.name_simple, cls="chapter-title")
        create_el(header, "h2", text=self.chapter.name_arabic, cls="chapter-title-arabic")
        create_el(
            header,
            "p",
            text=f"{self.chapter.verses_count} verses · {self.chapter.revelation_place}",
            cls="chapter-subtitle",
        )

        if shows_bismillah(self.chapter.id):
            create_el(container, "div", text=BISMILLAH, cls="bismillah")

        verses_el = create_el(container, "div", cls="verses-container")
        for verse in self.verses:
            self._render_verse(verses_el, verse)

    def _render_verse(self, parent: Tag, verse: Verse) -> None:
        verse_el = create_el(parent, "div", cls="verse", data_verse_key=verse.verse_key)
        create_el(verse_el, "span", text=str(verse.verse_number), cls="verse-number")

        if self._display.show_arabic and verse.text_uthmani:
            create_el(
                verse_el,
                "div",
                text=verse.text_uthmani,
                cls="verse-arabic",
                style=f"font-size: {self._display.font_size}px",
            )

        translation = verse.first_translation
        if self._display.show_translation and translation is not None:
            create_el(
                verse_el,
                "div",
                text=strip_html(translation.text),
                cls="verse-translation",
            )
