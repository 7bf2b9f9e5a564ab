"""Juz (division) data model."""

from pydantic import BaseModel, Field


class Juz(BaseModel):
    """One of the thirty juz divisions."""

    id: int
    juz_number: int = Field(ge=1, le=30)
    verse_mapping: dict[str, str] = Field(default_factory=dict)
    first_verse_id: int = 0
    last_verse_id: int = 0
    verses_count: int = 0
