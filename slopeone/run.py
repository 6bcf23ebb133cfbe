"""
Module description:
Config-driven prediction pipeline: load ratings, fit the baseline, train Slope One
and score the requested (user, item) pairs.
"""

__version__ = '0.1.0'

import logging as pylog
from collections import defaultdict
from typing import Dict, List, Optional

from slopeone.baseline import build_baseline
from slopeone.data.dao import DataFrameDAO
from slopeone.data.domain import RatingDomain
from slopeone.recommender import build_predictor
from slopeone.utils import logging as logging_project
from slopeone.utils.hydra_config import load_experiment_config
from slopeone.utils.read import read_tabular
from slopeone.utils.write import store_predictions


def requested_items(dao: DataFrameDAO, test_path: Optional[str] = None, sep: str = "\t",
                    header: bool = False) -> Dict[int, List[int]]:
    """
    Items to score per user: the pairs listed in ``test_path``, or every known item for every user.
    """
    if test_path is None:
        items = dao.get_item_ids()
        return {u: items for u in dao.get_user_ids()}

    test = read_tabular(test_path, sep=sep, header=header)
    targets = defaultdict(list)
    for user, item in zip(test["userId"], test["itemId"]):
        targets[int(user)].append(int(item))
    return dict(targets)


def run_prediction(config_path: str = '', overrides: Optional[List[str]] = None):
    config = load_experiment_config(config_path, overrides)
    log_level = getattr(pylog, config.log_level.upper(), pylog.INFO)
    logging_project.init(config.path_logger_config, config.path_log_folder, log_level)
    logger = logging_project.get_logger("__main__", log_level)

    logger.info("Start prediction")
    data_config = config.data_config
    dao = DataFrameDAO.from_file(data_config.dataset_path, sep=data_config.sep, header=data_config.header)

    baseline = build_baseline(config.baseline, dao)
    logger.info(f"Baseline:\t{baseline.name if baseline is not None else None}")
    predictor = build_predictor(dao, config.model, RatingDomain.from_config(config.domain), baseline)
    logger.info(f"Trained {predictor.name}:\t{predictor.get_model()}")

    targets = requested_items(dao, data_config.test_path, sep=data_config.sep, header=data_config.header)
    predictions = {u: predictor.score_user(u, items) for u, items in targets.items()}
    logger.info(f"Predicted {sum(len(p) for p in predictions.values())} ratings for {len(predictions)} users")

    if config.output_path:
        store_predictions(predictions, config.output_path)
        logger.info(f"Predictions stored in {config.output_path}")

    logger.info("End prediction")
    return predictions
