from slopeone.data.domain import RatingDomain
from slopeone.recommender.algebric.slope_one import SlopeOneModelBuilder, SlopeOneRatingPredictor, \
    WeightedSlopeOneRatingPredictor


def build_predictor(dao, model_config, domain: RatingDomain, baseline=None):
    """
    Train a Slope One model on ``dao`` and wrap it in the configured predictor.

    :param dao: data source for both training and user lookups
    :param model_config: a ``SlopeOneConfig``
    :param domain: rating domain predictions are clamped to
    :param baseline: fallback predictor, optional
    """
    model = SlopeOneModelBuilder(dao, domain, baseline=baseline, damping=model_config.damping).build()

    predictor_class = WeightedSlopeOneRatingPredictor if model_config.weighted else SlopeOneRatingPredictor

    return predictor_class(model, dao)
