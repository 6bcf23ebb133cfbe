from .slope_one import SlopeOneModel, SlopeOneModelBuilder, SlopeOneRatingPredictor, WeightedSlopeOneRatingPredictor
