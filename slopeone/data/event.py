"""
Module description:
Interaction events. A ``Rating`` carries an explicit score, a ``Plus`` an
implicit-feedback count. Events are immutable once built.
"""

__version__ = '0.1.0'

from dataclasses import dataclass
from typing import Optional

UNSET_TIMESTAMP = -1


@dataclass(frozen=True)
class Event:
    user_id: int
    item_id: int
    timestamp: int = UNSET_TIMESTAMP

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp != UNSET_TIMESTAMP


@dataclass(frozen=True)
class Rating(Event):
    # None marks an unrate event: the user withdrew the rating
    value: Optional[float] = None


@dataclass(frozen=True)
class Plus(Event):
    count: int = 1


def plus(user: int, item: int, timestamp: int = UNSET_TIMESTAMP) -> Plus:
    """Create a ``Plus`` event with a count of 1."""
    return Plus(user, item, timestamp, count=1)


def multi_plus(user: int, item: int, count: int, timestamp: int = UNSET_TIMESTAMP) -> Plus:
    """
    Create a ``Plus`` event with an explicit count.

    The count is not validated: zero or negative counts are kept as given and
    interpreted by whoever consumes the event.
    """
    return Plus(user, item, timestamp, count=count)


def rating(user: int, item: int, value: float, timestamp: int = UNSET_TIMESTAMP) -> Rating:
    return Rating(user, item, timestamp, value=float(value))


def unrate(user: int, item: int, timestamp: int = UNSET_TIMESTAMP) -> Rating:
    return Rating(user, item, timestamp, value=None)


# Sort keys

def timestamp_key(event: Event):
    return event.timestamp


def user_time_key(event: Event):
    return event.user_id, event.timestamp


def item_time_key(event: Event):
    return event.item_id, event.timestamp


# Comparators

def _compare(a, b) -> int:
    return (a > b) - (a < b)


def compare_timestamp(e1: Event, e2: Event) -> int:
    """Compare two events by timestamp."""
    return _compare(timestamp_key(e1), timestamp_key(e2))


def compare_user_time(e1: Event, e2: Event) -> int:
    """Compare two events by user, then timestamp."""
    return _compare(user_time_key(e1), user_time_key(e2))


def compare_item_time(e1: Event, e2: Event) -> int:
    """Compare two events by item, then timestamp."""
    return _compare(item_time_key(e1), item_time_key(e2))


TIMESTAMP_COMPARATOR = compare_timestamp
USER_TIME_COMPARATOR = compare_user_time
ITEM_TIME_COMPARATOR = compare_item_time
