"""
Module description:

"""

__version__ = '0.1.0'

from typing import Optional

from slopeone.baseline.baselines import BaselinePredictor, ConstantPredictor, GlobalMeanPredictor, \
    ItemMeanPredictor, UserMeanPredictor, ItemUserMeanPredictor
from slopeone.utils.enums import BaselineStrategy


def build_baseline(config, source=None) -> Optional[BaselinePredictor]:
    """
    Build and fit the baseline predictor described by ``config``.

    :param config: a ``BaselineConfig``
    :param source: DAO or rating frame to fit on
    :return: the fitted predictor, None with the `none` strategy
    """
    match config.strategy:
        case BaselineStrategy.NONE:
            return None
        case BaselineStrategy.CONSTANT:
            return ConstantPredictor(config.value)
        case BaselineStrategy.GLOBAL_MEAN:
            baseline = GlobalMeanPredictor()
        case BaselineStrategy.ITEM_MEAN:
            baseline = ItemMeanPredictor(config.damping)
        case BaselineStrategy.USER_MEAN:
            baseline = UserMeanPredictor(config.damping)
        case BaselineStrategy.ITEM_USER_MEAN:
            baseline = ItemUserMeanPredictor(config.damping)
        case _:
            raise ValueError(f"Unknown baseline strategy `{config.strategy}`")

    if source is None:
        raise ValueError(f"Baseline `{config.strategy.value}` needs rating data to be fitted")
    return baseline.fit(source)
