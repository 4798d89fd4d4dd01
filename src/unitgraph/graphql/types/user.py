"""
User GraphQL type definitions
"""

import strawberry

from ...data import Person
from .units import HeightUnit, WeightUnit


@strawberry.type
class User:
    """User type for GraphQL API."""

    name: str
    age: int | None
    record: strawberry.Private[Person]

    @classmethod
    def from_record(cls, record: Person) -> "User":
        return cls(name=record.name, age=record.age, record=record)

    @strawberry.field
    async def friends(self, info: strawberry.Info) -> list["User | None"] | None:
        """Get the users this user is friends with."""
        from ..resolvers.user import resolve_user_friends

        return await resolve_user_friends(self, info)

    @strawberry.field
    def height(self, unit: HeightUnit | None = HeightUnit.CENTIMETER) -> float | None:
        """Height in the requested unit."""
        from ..resolvers.user import resolve_user_height

        return resolve_user_height(self, unit)

    @strawberry.field
    def weight(self, unit: WeightUnit | None = WeightUnit.KILOGRAM) -> float | None:
        """Weight in the requested unit."""
        from ..resolvers.user import resolve_user_weight

        return resolve_user_weight(self, unit)
