"""Page-by-page Mushaf navigation."""

from quran_vault.api import ChapterCache, QuranClient
from quran_vault.constants import TOTAL_PAGES
from quran_vault.rendering.mushaf import fetch_and_render_page
from quran_vault.rendering.target import RenderTarget


class MushafNavigator:
    """Keeps track of the current page and renders it on demand.

    The chapter cache lives as long as the navigator, so moving between
    pages fetches the chapter list only once.
    """

    def __init__(
        self,
        client: QuranClient,
        cache: ChapterCache,
        target: RenderTarget | None = None,
    ) -> None:
        self._client = client
        self._cache = cache
        self.target = target or RenderTarget()
        self.current_page = 1

    @property
    def title(self) -> str:
        return f"Mushaf - Page {self.current_page}"

    async def load_page(self, page: int) -> bool:
        if not 1 <= page <= TOTAL_PAGES:
            return False
        self.current_page = page
        return await fetch_and_render_page(self.target, page, self._client, self._cache)

    async def navigate(self, delta: int) -> bool:
        return await self.load_page(self.current_page + delta)
