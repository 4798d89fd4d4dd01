"""
Tests for the in-memory user and book stores
"""

import math
import threading

import pytest

from unitgraph.data import (
    SEED_USERS,
    InvalidMeasurementError,
    Person,
    UserAlreadyExistsError,
    UserStore,
    books,
    reset_data,
    users,
)


@pytest.fixture
def store() -> UserStore:
    return UserStore(SEED_USERS)


def test_seed_users(store):
    assert [(u.name, u.height, u.weight) for u in store.all()] == [
        ("leo", 175, 75),
        ("woody", 168, 60),
    ]


def test_get(store):
    assert store.get("woody").age == 20
    assert store.get("missing") is None


def test_friends_ignore_unknown_names(store):
    person = Person(name="x", age=None, height=1, weight=1, friends=("ghost", "woody", "leo"))

    # Store order, not friend-list order
    assert [f.name for f in store.friends_of(person)] == ["leo", "woody"]


def test_add_rejects_duplicates(store):
    with pytest.raises(UserAlreadyExistsError):
        store.add(Person(name="leo", age=1, height=1, weight=1))


@pytest.mark.parametrize("height,weight", [(-1, 1), (1, -0.5), (math.inf, 1), (1, math.nan)])
def test_add_rejects_bad_measurements(store, height, weight):
    with pytest.raises(InvalidMeasurementError):
        store.add(Person(name="bad", age=None, height=height, weight=weight))
    assert store.get("bad") is None


def test_concurrent_adds_keep_names_unique(store):
    errors = []

    def add():
        try:
            store.add(Person(name="racer", age=None, height=1, weight=1))
        except UserAlreadyExistsError as e:
            errors.append(e)

    threads = [threading.Thread(target=add) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(errors) == 7
    assert [u.name for u in store.all()].count("racer") == 1


def test_reset_data():
    users.add(Person(name="temp", age=None, height=1, weight=1))
    reset_data()

    assert users.get("temp") is None
    assert len(users.all()) == 2


def test_books():
    assert [b.author for b in books.all()] == ["Kate Chopin", "Paul Auster"]
