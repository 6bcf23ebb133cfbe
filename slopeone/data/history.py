"""
Module description:
Per-user event histories and their summarization into rating vectors.
"""

__version__ = '0.1.0'

from collections.abc import Sequence
from typing import Iterable, Iterator, List, Type

from slopeone.data.event import Event, Rating, timestamp_key
from slopeone.vectors import SparseVector, MutableSparseVector


class UserHistory(Sequence):
    """
    Events of a single user, kept in the order they were supplied.
    """

    def __init__(self, user_id: int, events: Iterable[Event] = ()):
        self._user_id = int(user_id)
        self._events = tuple(events)
        for e in self._events:
            if e.user_id != self._user_id:
                raise ValueError(f"Event for user {e.user_id} in history of user {self._user_id}")

    @property
    def user_id(self) -> int:
        return self._user_id

    def get_user_id(self) -> int:
        return self._user_id

    def filter(self, event_type: Type[Event]) -> "UserHistory":
        return UserHistory(self._user_id, (e for e in self._events if isinstance(e, event_type)))

    def item_set(self) -> frozenset:
        return frozenset(e.item_id for e in self._events)

    def __getitem__(self, index):
        return self._events[index]

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __repr__(self):
        return f"UserHistory(user_id={self._user_id}, events=<{len(self._events)} events>)"


def make_rating_vector(events: Iterable[Event]) -> SparseVector:
    """
    Summarize rating events into a rating vector.

    Ratings are replayed in timestamp order (stable for equal timestamps), so the
    latest rating of an item wins and an unrate event removes the item. Events
    other than ratings are ignored.
    """
    ratings: List[Rating] = sorted((e for e in events if isinstance(e, Rating)), key=timestamp_key)
    vector = MutableSparseVector()
    for r in ratings:
        if r.value is None:
            vector.unset(r.item_id)
        else:
            vector.set(r.item_id, r.value)
    return vector.freeze()


class RatingVectorUserHistorySummarizer:
    """Summarizes a user history into the vector of the user's current ratings."""

    @staticmethod
    def summarize(history: Iterable[Event]) -> SparseVector:
        return make_rating_vector(history)
