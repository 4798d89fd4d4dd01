"""
User resolvers over the in-memory user store
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ... import data
from ...logging import get_logger
from ...units import InvalidUnitError, QuantityKind, convert

if TYPE_CHECKING:
    from ..mutations.root import AddUserInput
    from ..types.units import HeightUnit, WeightUnit
    from ..types.user import User

logger = get_logger(__name__)


def _to_user(record: data.Person | None) -> User | None:
    from ..types.user import User

    if record is None:
        return None
    return User.from_record(record)


def convert_measurement(kind: QuantityKind, base_value: float, unit: object) -> float:
    """Convert a stored measurement, logging rejected units before re-raising."""
    try:
        return convert(kind, base_value, unit)
    except InvalidUnitError as e:
        logger.error("Invalid unit requested", kind=kind.value, unit=str(e.unit))
        raise


async def resolve_self(info: strawberry.Info) -> User | None:
    _ = info
    return _to_user(data.users.get(data.SELF_USER_NAME))


async def resolve_users(info: strawberry.Info) -> list[User]:
    _ = info
    return [_to_user(record) for record in data.users.all()]


async def resolve_user_by_name(info: strawberry.Info, name: str) -> User | None:
    _ = info
    return _to_user(data.users.get(name))


async def resolve_user_friends(user: User, info: strawberry.Info) -> list[User]:
    _ = info
    return [_to_user(record) for record in data.users.friends_of(user.record)]


def resolve_user_height(user: User, unit: HeightUnit | str | None) -> float:
    return convert_measurement(QuantityKind.HEIGHT, user.record.height, unit)


def resolve_user_weight(user: User, unit: WeightUnit | str | None) -> float:
    return convert_measurement(QuantityKind.WEIGHT, user.record.weight, unit)


async def resolve_users_height(info: strawberry.Info, unit: HeightUnit | str | None) -> list[float]:
    """Convert every user's height to the same unit, in store order."""
    _ = info
    return [
        convert_measurement(QuantityKind.HEIGHT, record.height, unit)
        for record in data.users.all()
    ]


async def resolve_add_user(info: strawberry.Info, input: AddUserInput) -> User:
    _ = info
    person = data.Person(
        name=input.name,
        age=input.age,
        height=input.height,
        weight=input.weight,
        friends=tuple(input.friends or ()),
    )
    try:
        record = data.users.add(person)
    except (data.UserAlreadyExistsError, data.InvalidMeasurementError) as e:
        logger.error("Failed to add user", name=input.name, error=str(e))
        raise
    return _to_user(record)
