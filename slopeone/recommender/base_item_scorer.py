"""
Module description:

"""

__version__ = '0.1.0'

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from slopeone.data.dao import EventDAO
from slopeone.data.history import UserHistory
from slopeone.vectors import SparseVector


class ItemScorer(ABC):
    """
    Scores items for a user. Subclasses implement ``score`` over an explicit history;
    ``score_user`` looks the history up through the DAO first.
    """

    def __init__(self, dao: Optional[EventDAO] = None):
        self._dao = dao

    @abstractmethod
    def score(self, history: UserHistory, items: Iterable[int]) -> SparseVector:
        raise NotImplementedError

    def score_user(self, user_id: int, items: Iterable[int]) -> SparseVector:
        if self._dao is None:
            raise ValueError(f"{self.name} has no data source to look up user {user_id}")
        return self.score(self._dao.get_user_history(user_id), items)

    @property
    def name(self):
        return self.__class__.__name__
