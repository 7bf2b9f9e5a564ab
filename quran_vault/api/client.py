"""Asynchronous client for the quran.com v4 content API."""

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import TypeAdapter, ValidationError

from quran_vault.config import ApiConfig
from quran_vault.models import (
    Chapter,
    Juz,
    Pagination,
    SearchResponse,
    Verse,
    VerseWithWords,
)

logger = logging.getLogger(__name__)

DEFAULT_VERSE_FIELDS = "text_uthmani,chapter_id"
WORD_FIELDS = "text_uthmani,line_number,page_number,position,char_type_name"

Params = dict[str, str | int | None]


class QuranApiError(Exception):
    """Raised for any failed request: network, HTTP status or payload."""


class QuranClient:
    """Read-only client for chapters, verses, words, juzs and search.

    Verse listings follow the API's pagination until every page has been
    read; everything else is a single GET. Failures of any kind surface
    as QuranApiError; nothing is retried or cached.

    Args:
        config: ApiConfig with the base URL and timeout.
        session: Optional externally owned aiohttp session. When omitted
            the client creates one lazily and closes it in ``close()``.
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or ApiConfig()
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "QuranClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._config.timeout_seconds),
                headers={"User-Agent": self._config.user_agent},
            )
        return self._session

    async def _fetch_json(self, path: str, params: Params | None = None) -> dict[str, Any]:
        """GET ``base_url + path`` and decode the JSON body.

        ``None`` parameters are dropped; the rest are sent as strings.

        Raises:
            QuranApiError: On connection errors, timeouts, non-2xx
                responses or a body that is not a JSON object.
        """
        url = f"{self._config.base_url.rstrip('/')}{path}"
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        logger.debug("GET %s %s", url, query)

        try:
            async with self._get_session().get(url, params=query) as response:
                response.raise_for_status()
                data = await response.json()
        except asyncio.TimeoutError as e:
            raise QuranApiError(f"Request to {path} timed out") from e
        except aiohttp.ContentTypeError as e:
            raise QuranApiError(f"Invalid JSON from {path}: {e.message}") from e
        except aiohttp.ClientResponseError as e:
            raise QuranApiError(f"Request to {path} failed with status {e.status}") from e
        except aiohttp.ClientError as e:
            raise QuranApiError(f"Request to {path} failed: {e}") from e
        except ValueError as e:
            raise QuranApiError(f"Invalid JSON from {path}: {e}") from e

        if not isinstance(data, dict):
            raise QuranApiError(f"Unexpected response from {path}: not a JSON object")
        return data

    async def _fetch(self, path: str, key: str, type_: Any, params: Params | None = None) -> Any:
        """Fetch ``path`` and validate the value under its wrapper ``key``."""
        data = await self._fetch_json(path, params)
        return _unwrap(path, data, key, type_)

    async def _fetch_verses(self, path: str, type_: Any, params: Params) -> list[Any]:
        """Fetch every page of a verse listing.

        The API caps how many verses one response carries and reports the
        rest through its ``pagination`` envelope, so ``next_page`` is
        followed until it is null. A response without the envelope is
        taken as complete.

        Raises:
            QuranApiError: If any page fails, or the envelope is malformed
                or does not move forward.
        """
        verses: list[Any] = []
        page_number = 1
        while True:
            data = await self._fetch_json(path, {**params, "page": page_number})
            verses.extend(_unwrap(path, data, "verses", type_))

            pagination = _pagination(path, data)
            if pagination is None or pagination.next_page is None:
                return verses
            if pagination.next_page <= page_number:
                raise QuranApiError(
                    f"Pagination of {path} does not advance past page {page_number}"
                )
            page_number = pagination.next_page
            logger.debug("Following %s to page %d", path, page_number)

    async def get_chapters(self, language: str = "en") -> list[Chapter]:
        return await self._fetch("/chapters", "chapters", list[Chapter], {"language": language})

    async def get_chapter(self, chapter_id: int, language: str = "en") -> Chapter:
        return await self._fetch(
            f"/chapters/{chapter_id}", "chapter", Chapter, {"language": language}
        )

    async def get_verses_by_chapter(
        self,
        chapter_id: int,
        translations: list[int] | None = None,
        per_page: int = 300,
        fields: str = DEFAULT_VERSE_FIELDS,
    ) -> list[Verse]:
        """Fetch every verse of a chapter, across as many pages as it takes."""
        params: Params = {
            "per_page": per_page,
            "fields": fields,
            "translations": _join_ids(translations),
        }
        return await self._fetch_verses(f"/verses/by_chapter/{chapter_id}", list[Verse], params)

    async def get_verses_by_page(
        self,
        page: int,
        translations: list[int] | None = None,
        per_page: int = 50,
        fields: str = DEFAULT_VERSE_FIELDS,
    ) -> list[Verse]:
        params: Params = {
            "per_page": per_page,
            "fields": fields,
            "translations": _join_ids(translations),
        }
        return await self._fetch_verses(f"/verses/by_page/{page}", list[Verse], params)

    async def get_verses_by_page_with_words(self, page: int) -> list[VerseWithWords]:
        """Fetch a page's verses with nested word layout fields."""
        params: Params = {
            "per_page": 50,
            "words": 1,
            "fields": DEFAULT_VERSE_FIELDS,
            "word_fields": WORD_FIELDS,
        }
        return await self._fetch_verses(
            f"/verses/by_page/{page}", list[VerseWithWords], params
        )

    async def get_juzs(self) -> list[Juz]:
        return await self._fetch("/juzs", "juzs", list[Juz])

    async def search(self, query: str, size: int = 20, language: str = "en") -> SearchResponse:
        data = await self._fetch_json(
            "/search", {"q": query, "size": size, "language": language}
        )
        try:
            return SearchResponse.model_validate(data)
        except ValidationError as e:
            raise QuranApiError(f"Malformed search response: {e.error_count()} validation error(s)") from e


def _unwrap(path: str, data: dict[str, Any], key: str, type_: Any) -> Any:
    if key not in data:
        raise QuranApiError(f"Unexpected response from {path}: missing '{key}'")
    try:
        return TypeAdapter(type_).validate_python(data[key])
    except ValidationError as e:
        raise QuranApiError(
            f"Malformed '{key}' in response from {path}: {e.error_count()} validation error(s)"
        ) from e


def _pagination(path: str, data: dict[str, Any]) -> Pagination | None:
    raw = data.get("pagination")
    if raw is None:
        return None
    try:
        return Pagination.model_validate(raw)
    except ValidationError as e:
        raise QuranApiError(f"Malformed 'pagination' in response from {path}") from e


def _join_ids(ids: list[int] | None) -> str | None:
    if not ids:
        return None
    return ",".join(str(i) for i in ids)
