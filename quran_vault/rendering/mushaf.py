"""Mushaf page layout: groups word records into lines and renders a page."""

import logging
from collections.abc import Mapping, Sequence

from bs4 import Tag

from quran_vault.api import ChapterCache, QuranClient
from quran_vault.models import (
    Chapter,
    LineBlock,
    MushafPagePlan,
    PageFooter,
    SurahHeaderBlock,
    VerseWithWords,
    Word,
)
from quran_vault.rendering.dom import create_el
from quran_vault.rendering.target import RenderTarget

logger = logging.getLogger(__name__)

BISMILLAH = "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ"

# Al-Fatihah carries the bismillah as its first verse; At-Tawbah has none
NO_BISMILLAH_CHAPTERS: frozenset[int] = frozenset({1, 9})

FOOTER_SEPARATOR = " · "


def shows_bismillah(chapter_id: int) -> bool:
    return chapter_id not in NO_BISMILLAH_CHAPTERS


def unique_chapter_ids(verses: Sequence[VerseWithWords]) -> list[int]:
    """Chapter ids of the verses, first-seen order, duplicates removed."""
    return list(dict.fromkeys(v.chapter_id for v in verses if v.chapter_id > 0))


def group_words_by_line(verses: Sequence[VerseWithWords]) -> dict[int, list[Word]]:
    """Group all words of all verses by their ``line_number``.

    Words keep the order in which they appear in the input, which the API
    delivers in reading order.
    """
    lines: dict[int, list[Word]] = {}
    for verse in verses:
        for word in verse.words:
            lines.setdefault(word.line_number, []).append(word)
    return lines


def build_surah_start_lines(verses: Sequence[VerseWithWords]) -> dict[int, int]:
    """Map the line on which each surah begins to that surah's id.

    A surah begins where the first word of its verse 1 sits. Verses
    without words are ignored.
    """
    starts: dict[int, int] = {}
    for verse in verses:
        if verse.verse_number == 1 and verse.words:
            starts[verse.words[0].line_number] = verse.chapter_id
    return starts


def assemble_page(
    page: int,
    verses: Sequence[VerseWithWords],
    chapters: Mapping[int, Chapter],
) -> MushafPagePlan:
    """Build the ordered render plan for one page.

    Lines are walked in ascending numeric order. A surah header is placed
    before the line its first verse starts on (when the chapter metadata
    is known), and the line's words follow.

    Args:
        page: Page number, 1-604.
        verses: Every verse on the page, each with its words.
        chapters: Metadata for the chapters touched by the page.

    Returns:
        The page plan, footer included.
    """
    lines = group_words_by_line(verses)
    starts = build_surah_start_lines(verses)
    blocks: list[SurahHeaderBlock | LineBlock] = []

    for line_number in sorted(lines):
        chapter_id = starts.get(line_number)
        if chapter_id is not None and chapter_id in chapters:
            chapter = chapters[chapter_id]
            blocks.append(
                SurahHeaderBlock(
                    chapter_id=chapter_id,
                    name_arabic=chapter.name_arabic,
                    name_simple=chapter.name_simple,
                    show_bismillah=shows_bismillah(chapter_id),
                )
            )
        blocks.append(LineBlock(line_number=line_number, words=lines[line_number]))

    footer_names = [
        chapters[cid].name_simple for cid in unique_chapter_ids(verses) if cid in chapters
    ]
    return MushafPagePlan(
        page=page,
        blocks=blocks,
        footer=PageFooter(chapter_names=footer_names, page=page),
    )


def render_mushaf_page(container: Tag, plan: MushafPagePlan) -> Tag:
    """Replace the container's content with the rendered page."""
    container.clear()
    page_el = create_el(container, "div", cls="mushaf-page")

    for block in plan.blocks:
        if isinstance(block, SurahHeaderBlock):
            header = create_el(page_el, "div", cls="mushaf-surah-header")
            create_el(header, "span", text=block.name_arabic, cls="mushaf-surah-name")
            if block.show_bismillah:
                create_el(page_el, "div", text=BISMILLAH, cls="mushaf-bismillah")
            continue

        line_el = create_el(page_el, "div", cls="mushaf-line", data_line=str(block.line_number))
        for word in block.words:
            create_el(
                line_el,
                "span",
                text=word.text_uthmani,
                cls=f"mushaf-word mushaf-word-{word.char_type_name}",
            )

    footer = create_el(page_el, "div", cls="mushaf-page-footer")
    create_el(
        footer,
        "span",
        text=FOOTER_SEPARATOR.join(plan.footer.chapter_names),
        cls="mushaf-footer-surahs",
    )
    create_el(footer, "span", text=str(plan.footer.page), cls="mushaf-footer-page")
    return page_el


async def fetch_and_render_page(
    target: RenderTarget,
    page: int,
    client: QuranClient,
    cache: ChapterCache,
) -> bool:
    """Fetch one page's words and paint it into ``target``.

    The target shows a loading block first, then either the page or a
    single error block. A result that arrives after a newer request on
    the same target is discarded.

    Returns:
        True if this call painted the page.
    """
    token = target.begin()
    target.show_loading()

    try:
        verses = await client.get_verses_by_page_with_words(page)
        chapters = await cache.for_ids(unique_chapter_ids(verses))
        plan = assemble_page(page, verses, chapters)
    except Exception as e:
        logger.exception("Failed to load Mushaf page %d", page)
        if target.is_current(token):
            target.show_error(str(e))
        return False

    if not target.is_current(token):
        logger.debug("Discarding stale render of page %d", page)
        return False

    render_mushaf_page(target.container, plan)
    return True
