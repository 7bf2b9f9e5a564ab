"""Approximate page to juz mapping.

The 604 pages are split evenly across the 30 juz. This does not follow
the true juz boundaries, which fall mid-page in places, but it is what
generated page notes have always recorded.
"""

from collections.abc import Iterable

from quran_vault.constants import TOTAL_JUZ, TOTAL_PAGES


def juz_page_range(juz_number: int) -> tuple[int, int]:
    """First and last page (inclusive) attributed to a juz."""
    if not 1 <= juz_number <= TOTAL_JUZ:
        raise ValueError(f"Juz number out of range: {juz_number}")
    start = round((juz_number - 1) / TOTAL_JUZ * TOTAL_PAGES) + 1
    end = round(juz_number / TOTAL_JUZ * TOTAL_PAGES)
    return start, end


def build_juz_page_map(juz_numbers: Iterable[int] = range(1, TOTAL_JUZ + 1)) -> dict[int, int]:
    """Map every page covered by ``juz_numbers`` to its juz."""
    page_to_juz: dict[int, int] = {}
    for juz_number in juz_numbers:
        start, end = juz_page_range(juz_number)
        for page in range(start, end + 1):
            page_to_juz.setdefault(page, juz_number)
    return page_to_juz


_PAGE_TO_JUZ = build_juz_page_map()


def page_to_juz(page: int) -> int:
    """Juz number (1-30) for a page (1-604)."""
    if not 1 <= page <= TOTAL_PAGES:
        raise ValueError(f"Page number out of range: {page}")
    return _PAGE_TO_JUZ[page]
