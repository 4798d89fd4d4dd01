"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import User


@strawberry.input
class AddUserInput:
    """Input for adding a user. Height is in centimeters, weight in kilograms."""

    name: str
    height: float
    weight: float
    age: int | None = None
    friends: list[str] | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def add_user(self, info: strawberry.Info, input: AddUserInput) -> User | None:
        """Add a user to the in-memory store."""
        from ..resolvers.user import resolve_add_user

        return await resolve_add_user(info, input)
