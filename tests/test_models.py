"""Tests for data models."""

import pytest
from pydantic import ValidationError

from quran_vault.models import (
    Chapter,
    SearchResponse,
    Verse,
    VerseRange,
    VerseWithWords,
)


class TestChapter:
    def test_create_from_api_payload(self) -> None:
        chapter = Chapter.model_validate(
            {
                "id": 2,
                "revelation_place": "madinah",
                "revelation_order": 87,
                "bismillah_pre": True,
                "name_simple": "Al-Baqarah",
                "name_complex": "Al-Baqarah",
                "name_arabic": "البقرة",
                "verses_count": 286,
                "pages": [2, 49],
                "translated_name": {"language_name": "english", "name": "The Cow"},
            }
        )
        assert chapter.name_simple == "Al-Baqarah"
        assert chapter.translated_name.name == "The Cow"
        assert chapter.first_page == 2
        assert chapter.last_page == 49

    def test_page_span_expands_first_and_last(self) -> None:
        chapter = Chapter(id=1, name_simple="Al-Fatihah", pages=[1, 1])
        assert chapter.page_span == [1]
        chapter = Chapter(id=67, name_simple="Al-Mulk", pages=[562, 564])
        assert chapter.page_span == [562, 563, 564]

    def test_empty_pages(self) -> None:
        chapter = Chapter(id=5, name_simple="Al-Ma'idah")
        assert chapter.first_page is None
        assert chapter.page_span == []

    def test_id_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            Chapter(id=115, name_simple="Nope")


class TestVerse:
    def test_chapter_id_derived_from_key(self) -> None:
        verse = Verse(id=262, verse_number=255, verse_key="2:255")
        assert verse.chapter_id == 2

    def test_explicit_chapter_id_kept(self) -> None:
        verse = Verse(id=1, verse_number=1, verse_key="1:1", chapter_id=1)
        assert verse.chapter_id == 1

    def test_first_translation(self) -> None:
        verse = Verse.model_validate(
            {
                "id": 1,
                "verse_number": 1,
                "verse_key": "1:1",
                "translations": [{"id": 9, "resource_id": 20, "text": "In the name of Allah"}],
            }
        )
        assert verse.first_translation is not None
        assert verse.first_translation.resource_id == 20

    def test_no_translation(self) -> None:
        verse = Verse(id=1, verse_number=1, verse_key="1:1")
        assert verse.first_translation is None

    def test_verse_with_words(self) -> None:
        verse = VerseWithWords.model_validate(
            {
                "id": 1,
                "verse_number": 1,
                "verse_key": "1:1",
                "words": [
                    {"id": 1, "position": 1, "text_uthmani": "بِسْمِ", "char_type_name": "word",
                     "line_number": 2, "page_number": 1},
                    {"id": 5, "position": 5, "text_uthmani": "١", "char_type_name": "end",
                     "line_number": 2, "page_number": 1},
                ],
            }
        )
        assert [w.char_type_name for w in verse.words] == ["word", "end"]
        assert verse.words[0].line_number == 2


class TestVerseRange:
    def test_open_ended_by_default(self) -> None:
        verse_range = VerseRange(surah=105)
        assert verse_range.start_verse == 1
        assert verse_range.end_verse is None

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(ValidationError):
            VerseRange(surah=18, start_verse=10, end_verse=5)

    def test_surah_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            VerseRange(surah=0, start_verse=1, end_verse=1)


class TestSearchResponse:
    def test_parse(self) -> None:
        response = SearchResponse.model_validate(
            {
                "search": {
                    "query": "mercy",
                    "total_results": 1,
                    "current_page": 1,
                    "total_pages": 1,
                    "results": [
                        {
                            "verse_key": "7:156",
                            "verse_id": 1110,
                            "text": "...",
                            "translations": [{"text": "My <em>mercy</em>", "resource_id": 20}],
                        }
                    ],
                }
            }
        )
        result = response.search.results[0]
        assert result.chapter_id == 7
        assert result.translations is not None
