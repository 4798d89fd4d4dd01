from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ... import data

if TYPE_CHECKING:
    from ..types.book import Book


async def resolve_books(info: strawberry.Info) -> list[Book]:
    from ..types.book import Book

    _ = info
    return [Book.from_record(record) for record in data.books.all()]
