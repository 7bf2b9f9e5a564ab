"""Search response data models."""

from pydantic import BaseModel, Field


class SearchTranslation(BaseModel):
    text: str = ""
    resource_id: int = 0
    name: str = ""
    language_name: str = ""


class SearchResultVerse(BaseModel):
    """A single verse hit from the search endpoint."""

    verse_key: str
    verse_id: int = 0
    text: str = ""
    translations: list[SearchTranslation] | None = None

    @property
    def chapter_id(self) -> int:
        chapter, _, _ = self.verse_key.partition(":")
        return int(chapter) if chapter.isdigit() else 0


class SearchResults(BaseModel):
    query: str = ""
    total_results: int = 0
    current_page: int = 1
    total_pages: int = 0
    results: list[SearchResultVerse] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Envelope returned by the search endpoint."""

    search: SearchResults
