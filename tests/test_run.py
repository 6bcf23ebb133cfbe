import pytest
import yaml

from slopeone.run import run_prediction, requested_items
from slopeone.data.dao import DataFrameDAO

from tests.utils import ratings_path, read_dataset


def _config(tmp_path, **extra):
    config = {
        'data_config': {
            'dataset_path': str(ratings_path / 'train.tsv'),
            'test_path': str(ratings_path / 'test.tsv'),
        },
        'domain': {'minimum': 1.0, 'maximum': 5.0},
        'output_path': str(tmp_path / 'results' / 'predictions.tsv'),
        'path_log_folder': str(tmp_path / 'log'),
        **extra
    }
    path = tmp_path / 'experiment.yaml'
    with open(path, 'w') as f:
        yaml.safe_dump(config, f)
    return str(path)


class TestRunPrediction:

    def test_with_constant_baseline(self, tmp_path):
        config_path = _config(tmp_path, baseline={'strategy': 'constant', 'value': 2.5})

        predictions = run_prediction(config_path)

        # user 1 already rated item 1, user 5 shares no rater with items 1 and 2
        assert predictions[1].items() == [(3, 1.0)]
        assert predictions[5].items() == [(1, 2.5), (2, 2.5)]

        stored = read_dataset(tmp_path / 'results' / 'predictions.tsv', custom_cols=['userId', 'itemId', 'rating'])
        assert len(stored) == 3
        assert (tmp_path / 'log' / 'slopeone.log').exists()

    def test_without_baseline(self, tmp_path):
        predictions = run_prediction(_config(tmp_path))

        assert predictions[5].is_empty()

    def test_requested_items_default_to_catalog(self):
        dao = DataFrameDAO.from_file(str(ratings_path / 'train.tsv'))

        targets = requested_items(dao)

        assert sorted(targets) == [1, 2, 3, 4, 5]
        assert targets[1] == [1, 2, 3, 4]
