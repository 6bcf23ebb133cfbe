"""
Module description:

"""

__version__ = '0.1.0'

from .base_item_scorer import ItemScorer
from .algebric import SlopeOneModel, SlopeOneModelBuilder, SlopeOneRatingPredictor, WeightedSlopeOneRatingPredictor
from .factory import build_predictor
