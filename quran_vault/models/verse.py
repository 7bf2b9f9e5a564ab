"""Verse and word data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class Translation(BaseModel):
    """One translated rendering of a verse."""

    id: int = 0
    resource_id: int = 0
    text: str = ""


class Verse(BaseModel):
    """A single verse (ayah).

    ``chapter_id`` is only returned when requested through ``fields``;
    when it is missing it is taken from the ``verse_key``.
    """

    id: int
    verse_number: int
    verse_key: str  # "<chapter>:<verse>"
    chapter_id: int = 0
    text_uthmani: str = ""
    page_number: int = 0
    juz_number: int = 0
    hizb_number: int = 0
    translations: list[Translation] | None = None

    @model_validator(mode="before")
    @classmethod
    def _chapter_from_key(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("chapter_id"):
            key = str(data.get("verse_key", ""))
            chapter, _, _ = key.partition(":")
            if chapter.isdigit():
                data = {**data, "chapter_id": int(chapter)}
        return data

    @property
    def first_translation(self) -> Translation | None:
        if self.translations:
            return self.translations[0]
        return None


class Word(BaseModel):
    """A word-level token positioned on a Mushaf page."""

    id: int = 0
    position: int
    text_uthmani: str = ""
    char_type_name: str = "word"  # "word", "end", "pause"
    line_number: int
    page_number: int = 0


class VerseWithWords(Verse):
    """A verse carrying its nested word records."""

    words: list[Word] = Field(default_factory=list)
