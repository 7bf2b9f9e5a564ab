"""Embedded Mushaf pages inside generated notes.

Page notes carry an empty ``quran-mushaf`` block; collections list their
pages in front-matter. These helpers work out which pages to show.
"""

import asyncio
import logging
import re
from collections.abc import Mapping
from typing import Any

from bs4 import Tag

from quran_vault.api import ChapterCache, QuranClient
from quran_vault.constants import TOTAL_PAGES
from quran_vault.rendering.dom import create_el
from quran_vault.rendering.mushaf import fetch_and_render_page
from quran_vault.rendering.target import RenderTarget

logger = logging.getLogger(__name__)

MUSHAF_BLOCK = "quran-mushaf"
VIEW_TOGGLE_BLOCK = "quran-view-toggle"
VIEW_MODES = ("verse", "mushaf")

AUTO_INJECT_CLASS = "mushaf-auto-inject"
VERSE_SECTION_CLASS = "quran-verse-section"
VERSE_SECTION_TAGS = ["h2", "h3", "blockquote", "hr", "p"]

_PAGE_DIRECTIVE = re.compile(r"^\s*page\s*:\s*(\d+)\s*$", re.IGNORECASE)

INVALID_PAGE_MESSAGE = (
    f"Invalid or missing page number. Use page: 1-{TOTAL_PAGES} or add page to frontmatter."
)


def is_valid_page(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= TOTAL_PAGES


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else None


def parse_page_directive(source: str) -> int | None:
    """Return N from the first ``page: N`` line of a block, if any."""
    for line in source.splitlines():
        match = _PAGE_DIRECTIVE.match(line)
        if match:
            return int(match.group(1))
    return None


def extract_pages(frontmatter: Mapping[str, Any]) -> list[int]:
    """Valid page numbers named by a note's front-matter.

    ``page: N`` (page notes) wins over ``pages: [..]`` (collections);
    out-of-range or non-integer entries are dropped.
    """
    single = _as_int(frontmatter.get("page", 0))
    if single is not None and is_valid_page(single):
        return [single]

    multi = frontmatter.get("pages")
    if isinstance(multi, list):
        pages = (_as_int(v) for v in multi)
        return [p for p in pages if p is not None and is_valid_page(p)]
    return []


def resolve_embedded_page(source: str, frontmatter: Mapping[str, Any] | None) -> int | None:
    """Page to show for a ``quran-mushaf`` block, or None if invalid."""
    page = parse_page_directive(source)
    if page is None and frontmatter:
        page = _as_int(frontmatter.get("page"))
    return page if is_valid_page(page) else None


async def render_embedded_page(
    target: RenderTarget,
    source: str,
    frontmatter: Mapping[str, Any] | None,
    client: QuranClient,
    cache: ChapterCache,
) -> bool:
    """Render the page a ``quran-mushaf`` block refers to.

    An invalid or missing page becomes one inline error block and no
    request is made.
    """
    page = resolve_embedded_page(source, frontmatter)
    if page is None:
        target.begin()
        target.show_error(INVALID_PAGE_MESSAGE)
        return False
    return await fetch_and_render_page(target, page, client, cache)


def view_mode_from_block(source: str, default: str) -> str:
    """Initial view mode for a ``quran-view-toggle`` block."""
    mode = source.strip()
    return mode if mode in VIEW_MODES else default


def _add_class(tag: Tag, cls: str) -> None:
    classes = list(tag.get("class") or [])
    if cls not in classes:
        tag["class"] = [*classes, cls]


async def render_note_pages(
    container: Tag,
    frontmatter: Mapping[str, Any] | None,
    client: QuranClient,
    cache: ChapterCache,
    default_view_mode: str = "verse",
) -> list[bool]:
    """Prepend a Mushaf view of every page a note's front-matter names.

    Verse markup already in ``container`` is tagged ``quran-verse-section``
    so a host can switch between it and the pages. A toggle bar with the
    initial mode comes first, then one ``mushaf-embed-wrapper`` per page.
    The pages are fetched concurrently and share ``cache``. A container
    that already holds the injected block is left alone.

    Args:
        container: Rendered note body.
        frontmatter: The note's front-matter (``page: N`` or ``pages: [..]``).
        client: API client.
        cache: Chapter list memo shared by all pages.
        default_view_mode: ``"verse"`` or ``"mushaf"``.

    Returns:
        One flag per page, in front-matter order; empty when nothing was
        injected.
    """
    pages = extract_pages(frontmatter or {})
    if not pages or container.select_one(f".{AUTO_INJECT_CLASS}") is not None:
        return []

    for node in container.find_all(VERSE_SECTION_TAGS):
        _add_class(node, VERSE_SECTION_CLASS)

    mode = default_view_mode if default_view_mode in VIEW_MODES else "verse"
    _add_class(container, f"quran-show-{mode}")

    inject = create_el(container, "div", cls=AUTO_INJECT_CLASS, data_mode=mode)
    container.insert(0, inject.extract())

    bar = create_el(inject, "div", cls=VIEW_TOGGLE_BLOCK)
    for value, label in zip(VIEW_MODES, ("Verse view", "Mushaf view")):
        cls = "quran-toggle-btn is-active" if value == mode else "quran-toggle-btn"
        create_el(bar, "button", text=label, cls=cls, data_mode=value)

    targets = [
        RenderTarget(create_el(inject, "div", cls="mushaf-embed-wrapper", data_page=str(page)))
        for page in pages
    ]
    logger.debug("Injecting %d Mushaf page(s)", len(pages))
    results = await asyncio.gather(
        *(fetch_and_render_page(target, page, client, cache) for target, page in zip(targets, pages))
    )
    return list(results)
