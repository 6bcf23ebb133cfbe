"""
Module description:
Data access over rating corpora held in pandas DataFrames.
"""

__version__ = '0.1.0'

import logging as pylog
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional

import pandas as pd
from tqdm import tqdm

from slopeone.data.event import Event, Plus, Rating, UNSET_TIMESTAMP
from slopeone.data.history import UserHistory
from slopeone.utils import logging
from slopeone.utils.read import read_tabular


class EventDAO(ABC):
    """
    Source of interaction events.
    """

    @abstractmethod
    def get_events(self) -> List[Event]:
        raise NotImplementedError

    @abstractmethod
    def get_user_history(self, user_id: int) -> UserHistory:
        raise NotImplementedError

    @abstractmethod
    def get_user_ids(self) -> List[int]:
        raise NotImplementedError

    @abstractmethod
    def get_item_ids(self) -> List[int]:
        raise NotImplementedError

    def get_user_histories(self) -> Iterator[UserHistory]:
        for user_id in self.get_user_ids():
            yield self.get_user_history(user_id)


class DataFrameDAO(EventDAO):
    """
    Events read from a DataFrame with columns ``userId``, ``itemId`` and, optionally,
    ``rating`` and ``timestamp``. Rows without a ``rating`` column become ``Plus`` events.
    """

    def __init__(self, data: pd.DataFrame, verbose: bool = False):
        self.logger = logging.get_logger(self.__class__.__name__, pylog.DEBUG if verbose else pylog.INFO)
        missing = {"userId", "itemId"} - set(data.columns)
        if missing:
            raise ValueError(f"Missing columns {sorted(missing)} in the rating data")
        self.data = data
        self._histories: Dict[int, UserHistory] = self._build_histories()

        n_users = len(self._histories)
        n_items = self.data["itemId"].nunique()
        transactions = len(self.data)
        sparsity = 1 - (transactions / (n_users * n_items)) if n_users and n_items else 1.0
        self.logger.info(
            f"Statistics\t"
            f"Users:\t{n_users}\t"
            f"Items:\t{n_items}\t"
            f"Transactions:\t{transactions}\t"
            f"Sparsity:\t{sparsity}"
        )

    @classmethod
    def from_file(cls, path: str, sep: str = "\t", header: bool = False, cols: Optional[List[str]] = None):
        return cls(read_tabular(path, cols=cols, sep=sep, header=header))

    def _build_histories(self) -> Dict[int, UserHistory]:
        users = self.data["userId"]
        items = self.data["itemId"]
        ratings = self.data["rating"] if "rating" in self.data.columns else [None] * len(users)
        timestamps = self.data["timestamp"] if "timestamp" in self.data.columns else [UNSET_TIMESTAMP] * len(users)

        iter_df = tqdm(
            zip(users, items, ratings, timestamps),
            total=len(users),
            desc="Building user histories",
            leave=False
        )

        events: Dict[int, List[Event]] = {}
        has_ratings = "rating" in self.data.columns
        for user, item, value, ts in iter_df:
            user, item, ts = int(user), int(item), int(ts)
            if has_ratings:
                event = Rating(user, item, ts, value=None if pd.isna(value) else float(value))
            else:
                event = Plus(user, item, ts)
            events.setdefault(user, []).append(event)

        return {u: UserHistory(u, evs) for u, evs in sorted(events.items())}

    def get_events(self) -> List[Event]:
        return [e for h in self._histories.values() for e in h]

    def get_user_history(self, user_id: int) -> UserHistory:
        """History of ``user_id``; empty for users with no events."""
        return self._histories.get(int(user_id), UserHistory(user_id))

    def get_user_ids(self) -> List[int]:
        return list(self._histories)

    def get_item_ids(self) -> List[int]:
        return sorted(int(i) for i in self.data["itemId"].unique())
