"""
Module description:
Sparse vectors keyed by item id. Keys iterate in ascending order and an
absent key is distinct from a key set to zero.
"""

__version__ = '0.1.0'

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np


class SparseVector:
    """
    Read-only mapping from item id to score.
    """

    def __init__(self, values: Optional[Mapping[int, float]] = None):
        self._data: Dict[int, float] = {}
        self._sorted_keys: Optional[List[int]] = None
        if values:
            for k, v in values.items():
                self._data[int(k)] = float(v)

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[int, float]):
        return cls(values)

    def contains_key(self, key: int) -> bool:
        return int(key) in self._data

    containsKey = contains_key

    def get(self, key: int) -> float:
        """
        Score stored for ``key``.

        Raises:
            KeyError: if ``key`` is not set in this vector.
        """
        try:
            return self._data[int(key)]
        except KeyError:
            raise KeyError(f"Key {key} is not set in the vector") from None

    def keys(self) -> List[int]:
        if self._sorted_keys is None:
            self._sorted_keys = sorted(self._data)
        return list(self._sorted_keys)

    def values(self) -> List[float]:
        return [self._data[k] for k in self.keys()]

    def items(self) -> List[Tuple[int, float]]:
        return [(k, self._data[k]) for k in self.keys()]

    def as_array(self) -> np.ndarray:
        return np.fromiter(self.values(), dtype=float, count=len(self._data))

    def sum(self) -> float:
        return float(self.as_array().sum()) if self._data else 0.0

    def mean(self) -> float:
        """Mean of the stored values; ``nan`` for an empty vector."""
        return float(self.as_array().mean()) if self._data else float('nan')

    def is_empty(self) -> bool:
        return not self._data

    def mutable_copy(self) -> "MutableSparseVector":
        return MutableSparseVector(self._data)

    def freeze(self) -> "SparseVector":
        return SparseVector(self._data)

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key) -> float:
        return self.get(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}({dict(self.items())})"


class MutableSparseVector(SparseVector):
    """
    Sparse vector supporting point updates and bulk merges.
    """

    def set(self, key: int, value: float):
        key = int(key)
        if key not in self._data:
            self._sorted_keys = None
        self._data[key] = float(value)

    def set_all(self, other: SparseVector):
        """Copy every entry of ``other`` into this vector, overwriting on collision."""
        for k, v in other.items():
            self.set(k, v)

    setAll = set_all

    def unset(self, key: int):
        key = int(key)
        if key in self._data:
            del self._data[key]
            self._sorted_keys = None

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.contains_key(key):
            raise KeyError(f"Key {key} is not set in the vector")
        self.unset(key)
