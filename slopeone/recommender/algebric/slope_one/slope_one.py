"""
Module description:
Lemire, Daniel, and Anna Maclachlan. "Slope one predictors for online rating-based collaborative filtering."
Proceedings of the 2005 SIAM International Conference on Data Mining. Society for Industrial and Applied Mathematics
"""

__version__ = '0.1.0'

from typing import Iterable, List, Optional

from slopeone.data.dao import EventDAO
from slopeone.data.history import UserHistory, make_rating_vector
from slopeone.recommender.algebric.slope_one.slope_one_model import SlopeOneModel
from slopeone.recommender.base_item_scorer import ItemScorer
from slopeone.vectors import SparseVector, MutableSparseVector


class SlopeOneRatingPredictor(ItemScorer):
    r"""
    Slope One Predictors for Online Rating-Based Collaborative Filtering

    For further details, please refer to the `paper <https://arxiv.org/abs/cs/0702144>`_

    An unrated item ``p`` is predicted as the mean, over the rated items ``r`` sharing at
    least one rater with ``p``, of ``deviation(r, p) + rating(r)``, clamped to the model's
    domain. Items with no such ``r`` are handed to the model's baseline predictor, if any,
    and are left out of the result otherwise. Items the user already rated are never scored.
    """

    def __init__(self, model: SlopeOneModel, dao: Optional[EventDAO] = None):
        super().__init__(dao)
        self._model = model

    def get_model(self) -> SlopeOneModel:
        return self._model

    @property
    def model(self) -> SlopeOneModel:
        return self._model

    def _accumulate(self, user: SparseVector, item: int):
        total = 0.0
        n_items = 0
        corated = self._model.get_corated_items(item)
        for current, value in user.items():
            if current in corated:
                _, deviation = corated[current]
                total += deviation + value
                n_items += 1
        return total, n_items

    def score(self, history: UserHistory, items: Iterable[int]) -> MutableSparseVector:
        user = make_rating_vector(history)
        domain = self._model.get_domain()

        preds = MutableSparseVector()
        unpreds: List[int] = []
        for item in sorted(set(int(i) for i in items)):
            if user.contains_key(item):
                continue
            total, weight = self._accumulate(user, item)
            if weight == 0:
                unpreds.append(item)
            else:
                preds.set(item, domain.clamp(total / weight))

        # Use the baseline predictor if necessary
        baseline = self._model.get_baseline_predictor()
        if baseline is not None and unpreds:
            base_preds = baseline.predict(history.get_user_id(), user, unpreds)
            for item in unpreds:
                if base_preds.contains_key(item):
                    preds.set(item, base_preds.get(item))

        return preds

    @property
    def name(self):
        return "SlopeOne"


class WeightedSlopeOneRatingPredictor(SlopeOneRatingPredictor):
    """
    Weighted Slope One: every rated item contributes in proportion to the number of
    users who co-rated it with the predicted item.
    """

    def _accumulate(self, user: SparseVector, item: int):
        total = 0.0
        n_users = 0
        corated = self._model.get_corated_items(item)
        for current, value in user.items():
            if current in corated:
                n, deviation = corated[current]
                total += n * (deviation + value)
                n_users += n
        return total, n_users

    @property
    def name(self):
        return "WeightedSlopeOne"
