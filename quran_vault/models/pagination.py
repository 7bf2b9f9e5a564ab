"""Pagination envelope returned alongside verse lists."""

from pydantic import BaseModel


class Pagination(BaseModel):
    """Where a verse listing response sits in the full result set."""

    per_page: int = 0
    current_page: int = 1
    next_page: int | None = None
    total_pages: int = 1
    total_records: int = 0
