from slopeone.recommender.algebric.slope_one.slope_one_model import SlopeOneModel, SlopeOneModelBuilder
from slopeone.recommender.algebric.slope_one.slope_one import SlopeOneRatingPredictor, WeightedSlopeOneRatingPredictor
