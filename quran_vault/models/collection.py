"""Reading collection data models."""

from pydantic import BaseModel, Field, model_validator


class VerseRange(BaseModel):
    """An inclusive verse interval within one surah.

    ``end_verse`` of ``None`` means "through the last verse of the surah";
    it is resolved against the surah's verse count when a collection is built.
    """

    surah: int = Field(ge=1, le=114)
    start_verse: int = Field(default=1, ge=1)
    end_verse: int | None = None
    label: str | None = None

    @model_validator(mode="after")
    def _check_order(self) -> "VerseRange":
        if self.end_verse is not None and self.end_verse < self.start_verse:
            raise ValueError(
                f"end_verse ({self.end_verse}) is before start_verse ({self.start_verse})"
            )
        return self


class CollectionPreset(BaseModel):
    name: str
    ranges: list[VerseRange]
