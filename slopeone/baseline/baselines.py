"""
Module description:
Baseline predictors used as a fallback for items a collaborative-filtering
predictor cannot score.

Ekstrand, M. D., Riedl, J. T., & Konstan, J. A. (2011). "Collaborative Filtering
Recommender Systems." Foundations and Trends in Human-Computer Interaction, 4(2), 81-173.
"""

__version__ = '0.1.0'

import logging as pylog
from abc import ABC, abstractmethod
from typing import Iterable, Union

import numpy as np
import pandas as pd

from slopeone.data.dao import EventDAO
from slopeone.data.history import make_rating_vector
from slopeone.utils import logging
from slopeone.vectors import SparseVector, MutableSparseVector


def ratings_frame(source: Union[EventDAO, pd.DataFrame]) -> pd.DataFrame:
    """
    Current ratings as a ``userId, itemId, rating`` frame.

    A DAO is summarized user by user, so only the latest rating of every item counts.
    """
    if isinstance(source, pd.DataFrame):
        return source[["userId", "itemId", "rating"]]
    rows = [(h.user_id, i, r) for h in source.get_user_histories() for i, r in make_rating_vector(h).items()]
    return pd.DataFrame(rows, columns=["userId", "itemId", "rating"])


class BaselinePredictor(ABC):
    """
    Scores every requested item from non-personalized (or lightly personalized) statistics.
    """

    def __init__(self):
        self.logger = logging.get_logger(self.__class__.__name__, pylog.INFO)

    def fit(self, source: Union[EventDAO, pd.DataFrame]) -> "BaselinePredictor":
        return self

    @abstractmethod
    def predict(self, user_id: int, ratings: SparseVector, items: Iterable[int]) -> SparseVector:
        raise NotImplementedError

    @property
    def name(self):
        return self.__class__.__name__


class ConstantPredictor(BaselinePredictor):
    def __init__(self, value: float):
        super().__init__()
        self.value = float(value)

    def predict(self, user_id, ratings, items):
        return SparseVector({i: self.value for i in items})


class GlobalMeanPredictor(BaselinePredictor):
    def __init__(self):
        super().__init__()
        self.global_mean = None

    def fit(self, source):
        df = ratings_frame(source)
        self.global_mean = float(df["rating"].mean()) if len(df) else 0.0
        self.logger.info(f"Global mean rating:\t{self.global_mean}")
        return self

    def predict(self, user_id, ratings, items):
        return SparseVector({i: self.global_mean for i in items})


class ItemMeanPredictor(GlobalMeanPredictor):
    """
    Damped item mean. The damping term pulls the means of rarely rated items
    towards the global mean; items never rated get the global mean.
    """

    def __init__(self, damping: float = 0.0):
        super().__init__()
        self.damping = float(damping)
        self.item_means = {}

    def fit(self, source):
        df = ratings_frame(source)
        super().fit(df)
        grouped = (df["rating"] - self.global_mean).groupby(df["itemId"]).agg(["sum", "count"])
        offsets = grouped["sum"] / (grouped["count"] + self.damping)
        self.item_means = {int(i): float(self.global_mean + o) for i, o in offsets.items()}
        self.logger.info(f"Item means computed for {len(self.item_means)} items")
        return self

    def item_mean(self, item: int) -> float:
        return self.item_means.get(int(item), self.global_mean)

    def predict(self, user_id, ratings, items):
        return SparseVector({i: self.item_mean(i) for i in items})


class UserMeanPredictor(GlobalMeanPredictor):
    """
    Damped mean of the ratings supplied at prediction time; the global mean when there are none.
    """

    def __init__(self, damping: float = 0.0):
        super().__init__()
        self.damping = float(damping)

    def user_mean(self, ratings: SparseVector) -> float:
        if ratings.is_empty():
            return self.global_mean
        offsets = ratings.as_array() - self.global_mean
        return self.global_mean + float(offsets.sum()) / (len(offsets) + self.damping)

    def predict(self, user_id, ratings, items):
        mean = self.user_mean(ratings)
        return SparseVector({i: mean for i in items})


class ItemUserMeanPredictor(ItemMeanPredictor):
    """
    Item mean plus the damped mean offset of the user's ratings from the item means.
    """

    def predict(self, user_id, ratings, items):
        offset = 0.0
        if not ratings.is_empty():
            residuals = np.array([r - self.item_mean(i) for i, r in ratings.items()])
            offset = float(residuals.sum()) / (len(residuals) + self.damping)
        preds = MutableSparseVector()
        for i in items:
            preds.set(i, self.item_mean(i) + offset)
        return preds.freeze()
