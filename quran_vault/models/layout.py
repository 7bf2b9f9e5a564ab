"""Render plan models for a single Mushaf page.

These are rebuilt for every page view and never persisted.
"""

from pydantic import BaseModel, Field

from quran_vault.models.verse import Word


class SurahHeaderBlock(BaseModel):
    """Header emitted before the line on which a surah begins."""

    chapter_id: int
    name_arabic: str
    name_simple: str = ""
    show_bismillah: bool = True


class LineBlock(BaseModel):
    """One visual line of the page, words in reading order."""

    line_number: int
    words: list[Word] = Field(default_factory=list)


class PageFooter(BaseModel):
    chapter_names: list[str] = Field(default_factory=list)
    page: int


class MushafPagePlan(BaseModel):
    """Ordered blocks for one page followed by its footer."""

    page: int
    blocks: list[SurahHeaderBlock | LineBlock] = Field(default_factory=list)
    footer: PageFooter
