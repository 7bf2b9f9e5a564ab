"""In-memory stand-ins for the quran.com client and its records."""

import asyncio

from quran_vault.api import QuranApiError
from quran_vault.models import (
    Chapter,
    SearchResponse,
    Translation,
    Verse,
    VerseWithWords,
    Word,
)

CHAPTER_NAMES: dict[int, tuple[str, str]] = {
    1: ("Al-Fatihah", "الفاتحة"),
    2: ("Al-Baqarah", "البقرة"),
    3: ("Ali 'Imran", "آل عمران"),
    9: ("At-Tawbah", "التوبة"),
    18: ("Al-Kahf", "الكهف"),
    36: ("Ya-Sin", "يس"),
    67: ("Al-Mulk", "الملك"),
}

VERSE_COUNTS: dict[int, int] = {1: 7, 2: 286, 3: 200, 9: 129, 18: 110, 36: 83, 67: 30}


def make_chapter(chapter_id: int, pages: list[int] | None = None) -> Chapter:
    name, arabic = CHAPTER_NAMES.get(chapter_id, (f"Surah {chapter_id}", f"سورة {chapter_id}"))
    return Chapter(
        id=chapter_id,
        name_simple=name,
        name_arabic=arabic,
        verses_count=VERSE_COUNTS.get(chapter_id, 20),
        revelation_place="madinah" if chapter_id in (2, 3, 9) else "makkah",
        pages=pages if pages is not None else [chapter_id * 5, chapter_id * 5 + 1],
    )


def chapter_for_page(page: int) -> int:
    return min(114, (page - 1) // 6 + 1)


def make_word_verse(
    chapter_id: int,
    verse_number: int,
    lines: list[int],
    page: int = 1,
    end_marker: bool = True,
) -> VerseWithWords:
    """A verse with one word per entry of ``lines`` plus an end marker."""
    words = [
        Word(
            id=i + 1,
            position=i + 1,
            text_uthmani=f"w{chapter_id}.{verse_number}.{i + 1}",
            char_type_name="word",
            line_number=line,
            page_number=page,
        )
        for i, line in enumerate(lines)
    ]
    if end_marker and lines:
        words.append(
            Word(
                id=len(lines) + 1,
                position=len(lines) + 1,
                text_uthmani=str(verse_number),
                char_type_name="end",
                line_number=lines[-1],
                page_number=page,
            )
        )
    return VerseWithWords(
        id=chapter_id * 1000 + verse_number,
        verse_number=verse_number,
        verse_key=f"{chapter_id}:{verse_number}",
        chapter_id=chapter_id,
        text_uthmani=f"arabic {chapter_id}:{verse_number}",
        page_number=page,
        words=words,
    )


class FakeQuranClient:
    """Serves synthetic chapters, verses and pages and records every call.

    Pages listed in ``failing_pages`` raise QuranApiError; pages with an
    entry in ``page_gates`` wait for that event before answering. The
    chapter list likewise waits on ``chapters_gate`` when set, and fails
    while ``chapters_error`` is set.
    """

    def __init__(self) -> None:
        self.chapters = [make_chapter(i) for i in range(1, 115)]
        self.word_pages: dict[int, list[VerseWithWords]] = {}
        self.search_payload: dict = {"search": {"query": "", "results": []}}
        self.failing_pages: set[int] = set()
        self.failing_chapters: set[int] = set()
        self.page_gates: dict[int, asyncio.Event] = {}
        self.chapters_gate: asyncio.Event | None = None
        self.chapters_error: str | None = None
        self.calls: list[tuple] = []

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    async def get_chapters(self, language: str = "en") -> list[Chapter]:
        self.calls.append(("get_chapters", language))
        if self.chapters_gate is not None:
            await self.chapters_gate.wait()
        if self.chapters_error is not None:
            raise QuranApiError(self.chapters_error)
        return self.chapters

    async def get_chapter(self, chapter_id: int, language: str = "en") -> Chapter:
        self.calls.append(("get_chapter", chapter_id))
        if chapter_id in self.failing_chapters:
            raise QuranApiError(f"Request to /chapters/{chapter_id} failed with status 500")
        return self.chapters[chapter_id - 1]

    async def get_verses_by_chapter(
        self,
        chapter_id: int,
        translations: list[int] | None = None,
        per_page: int = 300,
        fields: str = "",
    ) -> list[Verse]:
        self.calls.append(("get_verses_by_chapter", chapter_id, translations))
        count = self.chapters[chapter_id - 1].verses_count
        return [
            self._verse(chapter_id, n, chapter_id * 5 + (n - 1) // 10, translations)
            for n in range(1, count + 1)
        ]

    async def get_verses_by_page(
        self,
        page: int,
        translations: list[int] | None = None,
        per_page: int = 50,
        fields: str = "",
    ) -> list[Verse]:
        self.calls.append(("get_verses_by_page", page, translations))
        if page in self.failing_pages:
            raise QuranApiError(f"Request to /verses/by_page/{page} failed with status 503")
        chapter_id = chapter_for_page(page)
        first = (page - 1) % 6 * 2 + 1
        return [self._verse(chapter_id, n, page, translations) for n in (first, first + 1)]

    async def get_verses_by_page_with_words(self, page: int) -> list[VerseWithWords]:
        self.calls.append(("get_verses_by_page_with_words", page))
        if page in self.page_gates:
            await self.page_gates[page].wait()
        if page in self.failing_pages:
            raise QuranApiError(f"Request to /verses/by_page/{page} failed with status 503")
        return self.word_pages.get(page, [])

    async def search(self, query: str, size: int = 20, language: str = "en") -> SearchResponse:
        self.calls.append(("search", query))
        return SearchResponse.model_validate(self.search_payload)

    @staticmethod
    def _verse(
        chapter_id: int, verse_number: int, page: int, translations: list[int] | None
    ) -> Verse:
        key = f"{chapter_id}:{verse_number}"
        return Verse(
            id=chapter_id * 1000 + verse_number,
            verse_number=verse_number,
            verse_key=key,
            chapter_id=chapter_id,
            text_uthmani=f"arabic {key}",
            page_number=page,
            translations=(
                [Translation(id=1, resource_id=translations[0], text=f"Meaning of <b>{key}</b>")]
                if translations
                else None
            ),
        )
