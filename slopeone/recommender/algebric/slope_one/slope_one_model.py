"""

Lemire, Daniel, and Anna Maclachlan. "Slope one predictors for online rating-based collaborative filtering."
Proceedings of the 2005 SIAM International Conference on Data Mining. Society for Industrial and Applied Mathematics
"""
import logging as pylog
import pickle
from typing import Dict, Iterable, Tuple, Union

import numpy as np
from scipy.sparse import csr_matrix
from tqdm import tqdm

from slopeone.data.dao import EventDAO
from slopeone.data.domain import RatingDomain
from slopeone.data.history import make_rating_vector
from slopeone.utils import logging
from slopeone.vectors import SparseVector


class SlopeOneModel:
    """
    Trained Slope One deviation table.

    For every pair of distinct items rated by at least one common user it holds the
    number of co-raters and the mean deviation ``rating(b) - rating(a)``. The table
    is read-only once built.
    """

    def __init__(self, item_ids, coratings: csr_matrix, deviations: csr_matrix, domain: RatingDomain,
                 baseline=None, damping: float = 0.0):
        self._item_ids = np.asarray(item_ids, dtype=np.int64)
        self._i_map = {int(item): k for k, item in enumerate(self._item_ids)}
        self._coratings = coratings
        self._deviations = deviations
        self._domain = domain
        self._baseline = baseline
        self._damping = float(damping)

    def get_coratings(self, item_a: int, item_b: int) -> int:
        """Number of users who rated both items; 0 when there is no evidence."""
        ia = self._i_map.get(int(item_a))
        ib = self._i_map.get(int(item_b))
        if ia is None or ib is None:
            return 0
        return int(self._coratings[ia, ib])

    def get_deviation(self, item_a: int, item_b: int) -> float:
        """
        Mean of ``rating(item_b) - rating(item_a)`` over the users who rated both.

        Raises:
            ValueError: if no user rated both items.
        """
        if self.get_coratings(item_a, item_b) == 0:
            raise ValueError(f"No co-ratings for items {item_a} and {item_b}: deviation undefined")
        return float(self._deviations[self._i_map[int(item_a)], self._i_map[int(item_b)]])

    def get_corated_items(self, item: int) -> Dict[int, Tuple[int, float]]:
        """
        Items sharing at least one rater with ``item``, each mapped to
        ``(get_coratings(item, other), get_deviation(other, item))``.

        Reads a single row of each table. Empty for items the model has never seen.
        """
        ii = self._i_map.get(int(item))
        if ii is None:
            return {}
        counts = self._coratings.getrow(ii)
        devs = self._deviations.getrow(ii)
        # deviation(item, other) == -deviation(other, item)
        dev_of = dict(zip(devs.indices.tolist(), devs.data.tolist()))
        return {int(self._item_ids[j]): (int(n), -dev_of.get(j, 0.0))
                for j, n in zip(counts.indices.tolist(), counts.data.tolist()) if n > 0}

    def get_domain(self) -> RatingDomain:
        return self._domain

    def get_baseline_predictor(self):
        return self._baseline

    @property
    def domain(self) -> RatingDomain:
        return self._domain

    @property
    def baseline(self):
        return self._baseline

    @property
    def damping(self) -> float:
        return self._damping

    @property
    def item_ids(self):
        return [int(i) for i in self._item_ids]

    @property
    def num_items(self) -> int:
        return len(self._item_ids)

    @property
    def num_pairs(self) -> int:
        """Number of unordered item pairs with at least one co-rater."""
        return self._coratings.nnz // 2

    def get_model_state(self):
        saving_dict = {}
        saving_dict['item_ids'] = self._item_ids
        saving_dict['coratings'] = self._coratings
        saving_dict['deviations'] = self._deviations
        saving_dict['domain'] = (self._domain.minimum, self._domain.maximum, self._domain.precision)
        saving_dict['damping'] = self._damping
        return saving_dict

    @classmethod
    def from_model_state(cls, saving_dict, baseline=None) -> "SlopeOneModel":
        return cls(saving_dict['item_ids'], saving_dict['coratings'], saving_dict['deviations'],
                   RatingDomain(*saving_dict['domain']), baseline=baseline,
                   damping=saving_dict.get('damping', 0.0))

    def save_weights(self, path):
        with open(path, "wb") as f:
            pickle.dump(self.get_model_state(), f)

    @classmethod
    def load_weights(cls, path, baseline=None) -> "SlopeOneModel":
        with open(path, "rb") as f:
            return cls.from_model_state(pickle.load(f), baseline=baseline)

    def __str__(self):
        return "%s(items=<%d items>, pairs=<%d pairs>)" % (
            SlopeOneModel.__name__, self.num_items, self.num_pairs)


class SlopeOneModelBuilder:
    """
    Batch trainer for ``SlopeOneModel``.

    With ``B`` the users x items indicator of rated entries and ``R`` the ratings,
    ``B^T B`` counts the co-raters of every pair and ``B^T R - R^T B`` sums the
    signed differences ``r_b - r_a`` over them.

    Args:
        data: a DAO, or an iterable of user histories / rating vectors
        domain: rating domain predictions are clamped to
        baseline: fallback predictor referenced by the model
        damping: added to the co-rating count when averaging deviations
    """

    def __init__(self, data: Union[EventDAO, Iterable], domain: RatingDomain, baseline=None,
                 damping: float = 0.0, verbose: bool = False):
        self.logger = logging.get_logger(self.__class__.__name__, pylog.DEBUG if verbose else pylog.INFO)
        if damping < 0:
            raise ValueError(f"Damping must be non-negative, got {damping}")
        self._data = data
        self._domain = domain
        self._baseline = baseline
        self._damping = float(damping)

    def _rating_vectors(self):
        source = self._data.get_user_histories() if isinstance(self._data, EventDAO) else self._data
        for entry in source:
            yield entry if isinstance(entry, SparseVector) else make_rating_vector(entry)

    def build(self) -> SlopeOneModel:
        rows, cols, ratings = [], [], []
        items = {}
        n_users = 0

        for u, vector in enumerate(tqdm(self._rating_vectors(), desc="Collecting rating vectors", leave=False)):
            n_users += 1
            for item, r in vector.items():
                rows.append(u)
                cols.append(items.setdefault(item, len(items)))
                ratings.append(r)

        # Re-index items in ascending id order
        item_ids = np.array(sorted(items), dtype=np.int64)
        remap = np.empty(len(items), dtype=np.int64)
        for k, item in enumerate(item_ids):
            remap[items[int(item)]] = k
        cols = remap[np.asarray(cols, dtype=np.int64)] if cols else np.empty(0, dtype=np.int64)

        shape = (n_users, len(item_ids))
        r_matrix = csr_matrix((np.asarray(ratings, dtype=float), (rows, cols)), shape=shape)
        b_matrix = csr_matrix((np.ones(len(ratings)), (rows, cols)), shape=shape)

        coratings = (b_matrix.T @ b_matrix).tocsr()
        coratings.setdiag(0)
        coratings.eliminate_zeros()
        coratings = coratings.astype(np.int64)

        sums = (b_matrix.T @ r_matrix - r_matrix.T @ b_matrix).tocsr()
        pairs = coratings.tocoo()
        if pairs.nnz:
            diffs = np.asarray(sums[pairs.row, pairs.col]).ravel()
        else:
            diffs = np.empty(0)
        deviations = csr_matrix((diffs / (pairs.data + self._damping), (pairs.row, pairs.col)),
                                shape=(len(item_ids), len(item_ids)))

        model = SlopeOneModel(item_ids, coratings, deviations, self._domain,
                              baseline=self._baseline, damping=self._damping)
        self.logger.info(
            f"Statistics\t"
            f"Users:\t{n_users}\t"
            f"Items:\t{model.num_items}\t"
            f"Transactions:\t{len(ratings)}\t"
            f"Pairs:\t{model.num_pairs}"
        )
        return model
