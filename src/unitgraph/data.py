"""
In-memory mock data for the tutorial schema
"""

import math
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from .logging import get_logger

logger = get_logger(__name__)


class UserAlreadyExistsError(Exception):
    """Raised when adding a user whose name is already taken."""

    pass


class InvalidMeasurementError(ValueError):
    """Raised when a stored measurement is negative or not finite."""

    pass


@dataclass(frozen=True)
class Person:
    """A user record. Height is stored in centimeters, weight in kilograms."""

    name: str
    age: int | None
    height: float
    weight: float
    friends: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BookRecord:
    title: str
    author: str


SEED_USERS: tuple[Person, ...] = (
    Person(name="leo", age=20, friends=("woody",), height=175, weight=75),
    Person(name="woody", age=20, friends=(), height=168, weight=60),
)

SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(title="The Awakening", author="Kate Chopin"),
    BookRecord(title="City of Glass", author="Paul Auster"),
)

SELF_USER_NAME = "leo"


def _check_measurement(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidMeasurementError(f"{name} must be a finite non-negative number, got {value}")


class UserStore:
    """Ordered collection of users, safe to share between resolver threads."""

    def __init__(self, seed: Iterable[Person] = ()):
        self._lock = threading.Lock()
        self._users: list[Person] = list(seed)

    def all(self) -> list[Person]:
        with self._lock:
            return list(self._users)

    def get(self, name: str) -> Person | None:
        with self._lock:
            return next((user for user in self._users if user.name == name), None)

    def friends_of(self, person: Person) -> list[Person]:
        """Return the users named in person's friend list, in store order."""
        names = set(person.friends)
        with self._lock:
            return [user for user in self._users if user.name in names]

    def add(self, person: Person) -> Person:
        """Append a new user.

        Raises:
            UserAlreadyExistsError: If a user with the same name exists
            InvalidMeasurementError: If height or weight is invalid
        """
        _check_measurement("height", person.height)
        _check_measurement("weight", person.weight)

        with self._lock:
            if any(user.name == person.name for user in self._users):
                raise UserAlreadyExistsError(f"User already exists: {person.name}")
            self._users.append(person)

        logger.info("User added", name=person.name)
        return person

    def reset(self, seed: Iterable[Person] = SEED_USERS) -> None:
        with self._lock:
            self._users = list(seed)


class BookStore:
    def __init__(self, seed: Iterable[BookRecord] = ()):
        self._books: tuple[BookRecord, ...] = tuple(seed)

    def all(self) -> list[BookRecord]:
        return list(self._books)


users = UserStore(SEED_USERS)
books = BookStore(SEED_BOOKS)


def reset_data() -> None:
    """Restore the user store to its seed data."""
    users.reset(SEED_USERS)
