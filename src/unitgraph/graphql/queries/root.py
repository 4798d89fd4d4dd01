"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book
from ..types.units import HeightUnit
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="self")
    async def current_user(self, info: strawberry.Info) -> User | None:
        """Get the user the server treats as the caller."""
        from ..resolvers.user import resolve_self

        return await resolve_self(info)

    @strawberry.field
    async def books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get all books."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User | None] | None:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def user(self, info: strawberry.Info, name: str) -> User | None:
        """Get a user by name."""
        from ..resolvers.user import resolve_user_by_name

        return await resolve_user_by_name(info, name)

    @strawberry.field
    async def users_height(
        self, info: strawberry.Info, unit: HeightUnit | None = HeightUnit.CENTIMETER
    ) -> list[float | None] | None:
        """Get every user's height in the requested unit."""
        from ..resolvers.user import resolve_users_height

        return await resolve_users_height(info, unit)
