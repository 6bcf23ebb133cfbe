from slopeone.baseline.baselines import BaselinePredictor, ConstantPredictor, GlobalMeanPredictor, \
    ItemMeanPredictor, UserMeanPredictor, ItemUserMeanPredictor, ratings_frame
from slopeone.baseline.factory import build_baseline
