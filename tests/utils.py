from pathlib import Path
from types import SimpleNamespace

from slopeone.data.history import UserHistory
from slopeone.data.event import rating
from slopeone.utils.read import read_tabular

test_path = Path(__file__).parent / 'data'
ratings_path = test_path / 'ratings'


def read_dataset(dataset_path, custom_cols=None, custom_dtypes=None, header=False):
    df = read_tabular(
        dataset_path,
        cols=custom_cols,
        datatypes=custom_dtypes,
        sep='\t',
        header=header
    )
    return df


def make_history(user, ratings, start_ts=0):
    """Build a history from an ``{item: value}`` dict, one timestamp per rating."""
    events = [rating(user, i, r, start_ts + k) for k, (i, r) in enumerate(ratings.items())]
    return UserHistory(user, events)


def make_histories(corpus):
    return [make_history(u, r) for u, r in corpus.items()]


def create_namespace(config, attr=None):
    if attr:
        config = {attr: config}
    ns = _dict_to_namespace(config)
    return ns


def _dict_to_namespace(d):
    if isinstance(d, dict):
        return SimpleNamespace(**{k: _dict_to_namespace(v) for k, v in d.items()})
    elif isinstance(d, list):
        return [_dict_to_namespace(i) for i in d]
    else:
        return d
