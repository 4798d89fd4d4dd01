"""
Book GraphQL type definitions
"""

import strawberry

from ...data import BookRecord


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    title: str | None
    author: str | None

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(title=record.title, author=record.author)
