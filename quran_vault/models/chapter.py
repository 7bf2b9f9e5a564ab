"""Chapter (surah) data model."""

from pydantic import BaseModel, Field


class TranslatedName(BaseModel):
    """Chapter name in the requested language."""

    language_name: str = ""
    name: str = ""


class Chapter(BaseModel):
    """A surah as returned by the chapters endpoint."""

    id: int = Field(ge=1, le=114)
    revelation_place: str = ""  # "makkah", "madinah"
    revelation_order: int = 0
    bismillah_pre: bool = True
    name_simple: str
    name_complex: str = ""
    name_arabic: str = ""
    verses_count: int = 0
    pages: list[int] = Field(default_factory=list)  # [first, last] from the API
    translated_name: TranslatedName = Field(default_factory=TranslatedName)

    @property
    def first_page(self) -> int | None:
        return min(self.pages) if self.pages else None

    @property
    def last_page(self) -> int | None:
        return max(self.pages) if self.pages else None

    @property
    def page_span(self) -> list[int]:
        """Every page from the first to the last, inclusive."""
        if not self.pages:
            return []
        return list(range(min(self.pages), max(self.pages) + 1))
