"""
Module description:
Closed interval of valid rating values.
"""

__version__ = '0.1.0'

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RatingDomain:
    """
    Valid rating range. Predictions are clamped into ``[minimum, maximum]``.

    Args:
        minimum: lowest valid rating
        maximum: highest valid rating
        precision: rating step (e.g. 0.5 for half stars), informational only
    """
    minimum: float
    maximum: float
    precision: Optional[float] = None

    def __post_init__(self):
        if self.minimum > self.maximum:
            raise ValueError(f"Rating domain minimum ({self.minimum}) exceeds maximum ({self.maximum})")

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    @classmethod
    def from_config(cls, config) -> "RatingDomain":
        return cls(config.minimum, config.maximum, config.precision)
