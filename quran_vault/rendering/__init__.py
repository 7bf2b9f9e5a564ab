"""HTML rendering of Mushaf pages and embedded page blocks."""

from quran_vault.rendering.mushaf import (
    assemble_page,
    build_surah_start_lines,
    fetch_and_render_page,
    group_words_by_line,
    render_mushaf_page,
)
from quran_vault.rendering.target import RenderTarget

__all__ = [
    "RenderTarget",
    "assemble_page",
    "build_surah_start_lines",
    "fetch_and_render_page",
    "group_words_by_line",
    "render_mushaf_page",
]
