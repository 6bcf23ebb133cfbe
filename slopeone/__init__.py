"""
Slope One collaborative filtering: events, sparse vectors, deviation model,
predictors and baselines.
"""

__version__ = '0.1.0'
