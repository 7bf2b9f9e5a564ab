"""Free-text verse search results."""

import logging

from quran_vault.api import QuranClient
from quran_vault.markdown import strip_html
from quran_vault.models import SearchResultVerse
from quran_vault.rendering.dom import create_el
from quran_vault.rendering.target import RenderTarget

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3


class SearchPanel:
    """Runs searches and renders the hits into a render target.

    Args:
        client: API client.
        language: Language for search results.
        size: Maximum number of hits per search.
        target: Where results are rendered; a fresh one if omitted.
    """

    def __init__(
        self,
        client: QuranClient,
        language: str = "en",
        size: int = 20,
        target: RenderTarget | None = None,
    ) -> None:
        self._client = client
        self._language = language
        self._size = size
        self.target = target or RenderTarget()
        self.results: list[SearchResultVerse] = []
        self.error: str | None = None

    async def search(self, query: str) -> list[SearchResultVerse]:
        """Search and render. Queries under three characters just clear.

        A failed request also returns an empty list; ``error`` then holds
        its message until the next search.
        """
        token = self.target.begin()
        self.results = []
        self.error = None
        if len(query) < MIN_QUERY_LENGTH:
            self.target.clear()
            return []

        self.target.show_loading("Searching...")
        try:
            response = await self._client.search(
                query, size=self._size, language=self._language
            )
        except Exception as e:
            logger.exception("Search failed for %r", query)
            if self.target.is_current(token):
                self.error = str(e)
                self.target.show_error(self.error, prefix="Search error")
            return []

        if not self.target.is_current(token):
            return []

        self.results = response.search.results
        self._render()
        return self.results

    def _render(self) -> None:
        container = self.target.container
        container.clear()
        if not self.results:
            create_el(container, "div", text="No results found", cls="quran-no-results")
            return

        for result in self.results:
            item = create_el(
                container,
                "div",
                cls="search-result-item",
                data_chapter=str(result.chapter_id),
            )
            create_el(item, "span", text=result.verse_key, cls="result-key")
            if result.translations and result.translations[0].text:
                create_el(
                    item,
                    "div",
                    text=strip_html(result.translations[0].text),
                    cls="result-text",
                )
