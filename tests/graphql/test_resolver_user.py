"""
Unit tests for user resolver functions
"""

import pytest

from unitgraph import data
from unitgraph.graphql.mutations.root import AddUserInput
from unitgraph.graphql.resolvers.book import resolve_books
from unitgraph.graphql.resolvers.user import (
    resolve_add_user,
    resolve_self,
    resolve_user_by_name,
    resolve_user_friends,
    resolve_user_height,
    resolve_user_weight,
    resolve_users,
    resolve_users_height,
)
from unitgraph.graphql.types.units import HeightUnit, WeightUnit
from unitgraph.graphql.types.user import User
from unitgraph.units import InvalidUnitError


@pytest.fixture
def leo() -> User:
    return User.from_record(data.users.get("leo"))


class TestUserLookups:
    @pytest.mark.asyncio
    async def test_self_is_leo(self, mock_info):
        user = await resolve_self(mock_info)
        assert user is not None
        assert user.name == "leo"
        assert user.age == 20

    @pytest.mark.asyncio
    async def test_users_in_store_order(self, mock_info):
        users = await resolve_users(mock_info)
        assert [u.name for u in users] == ["leo", "woody"]

    @pytest.mark.asyncio
    async def test_user_by_name(self, mock_info):
        user = await resolve_user_by_name(mock_info, "woody")
        assert user is not None
        assert user.record.height == 168

    @pytest.mark.asyncio
    async def test_unknown_user_is_none(self, mock_info):
        assert await resolve_user_by_name(mock_info, "nobody") is None

    @pytest.mark.asyncio
    async def test_friends(self, mock_info, leo):
        friends = await resolve_user_friends(leo, mock_info)
        assert [f.name for f in friends] == ["woody"]

    @pytest.mark.asyncio
    async def test_books(self, mock_info):
        books = await resolve_books(mock_info)
        assert [(b.title, b.author) for b in books] == [
            ("The Awakening", "Kate Chopin"),
            ("City of Glass", "Paul Auster"),
        ]


class TestMeasurementResolvers:
    def test_height_default_unit(self, leo):
        assert resolve_user_height(leo, HeightUnit.CENTIMETER) == 175

    def test_height_in_feet(self, leo):
        assert resolve_user_height(leo, HeightUnit.FOOT) == 175 * 30.48

    def test_weight_in_pounds(self, leo):
        assert resolve_user_weight(leo, WeightUnit.POUND) == 33.75

    def test_null_unit_falls_back_to_base(self, leo):
        assert resolve_user_height(leo, None) == 175
        assert resolve_user_weight(leo, None) == 75

    def test_invalid_unit_propagates(self, leo):
        with pytest.raises(InvalidUnitError):
            resolve_user_height(leo, "BOGUS")
        with pytest.raises(InvalidUnitError):
            resolve_user_weight(leo, "BOGUS")

    @pytest.mark.asyncio
    async def test_users_height(self, mock_info):
        heights = await resolve_users_height(mock_info, HeightUnit.METRE)
        assert heights == [175 * 100, 168 * 100]

    @pytest.mark.asyncio
    async def test_users_height_invalid_unit(self, mock_info):
        with pytest.raises(InvalidUnitError):
            await resolve_users_height(mock_info, "BOGUS")


class TestAddUser:
    @pytest.mark.asyncio
    async def test_add_user(self, mock_info):
        user = await resolve_add_user(
            mock_info,
            AddUserInput(name="mia", height=160, weight=50, age=31, friends=["leo"]),
        )

        assert user.name == "mia"
        assert data.users.get("mia") is not None
        friends = await resolve_user_friends(user, mock_info)
        assert [f.name for f in friends] == ["leo"]

    @pytest.mark.asyncio
    async def test_duplicate_name_is_rejected(self, mock_info):
        with pytest.raises(data.UserAlreadyExistsError):
            await resolve_add_user(mock_info, AddUserInput(name="leo", height=1, weight=1))

    @pytest.mark.asyncio
    async def test_negative_height_is_rejected(self, mock_info):
        with pytest.raises(data.InvalidMeasurementError):
            await resolve_add_user(mock_info, AddUserInput(name="neg", height=-1, weight=1))
        assert data.users.get("neg") is None
