import pytest

from slopeone.baseline import ConstantPredictor, BaselinePredictor
from slopeone.data.dao import DataFrameDAO
from slopeone.data.domain import RatingDomain
from slopeone.recommender import build_predictor
from slopeone.recommender.algebric.slope_one import SlopeOneModelBuilder, SlopeOneRatingPredictor, \
    WeightedSlopeOneRatingPredictor
from slopeone.vectors import SparseVector

from tests.params import params_predictor as p, three_users, mixed_corpus
from tests.utils import make_histories, make_history, ratings_path, create_namespace

domain = RatingDomain(1.0, 5.0)


def train(corpus, baseline=None, model_domain=domain):
    return SlopeOneModelBuilder(make_histories(corpus), model_domain, baseline=baseline).build()


class RecordingBaseline(BaselinePredictor):

    def __init__(self, scores):
        super().__init__()
        self.scores = scores
        self.calls = []

    def predict(self, user_id, ratings, items):
        self.calls.append((user_id, ratings, list(items)))
        return SparseVector({i: self.scores[i] for i in items if i in self.scores})


class FailingBaseline(BaselinePredictor):

    def predict(self, user_id, ratings, items):
        raise RuntimeError("baseline unavailable")


class TestSlopeOneRatingPredictor:

    def test_end_to_end(self):
        predictor = SlopeOneRatingPredictor(train(three_users))

        preds = predictor.score(make_history(10, {1: 3.0}), {2})

        assert preds.keys() == [2]
        assert preds.get(2) == pytest.approx(4.333333, abs=1e-6)

    @pytest.mark.parametrize('params', p['slope_one'])
    def test_score(self, params):
        predictor = SlopeOneRatingPredictor(train(params['corpus']))

        preds = predictor.score(make_history(10, params['ratings']), params['items'])

        assert preds.keys() == sorted(params['expected'])
        for item, value in params['expected'].items():
            assert preds.get(item) == pytest.approx(value)

    def test_rated_items_never_returned(self):
        baseline = ConstantPredictor(3.0)
        predictor = SlopeOneRatingPredictor(train(mixed_corpus, baseline=baseline))
        ratings = {1: 4.0, 2: 2.0}

        preds = predictor.score(make_history(10, ratings), [1, 2, 3, 4, 5, 6, 7])

        assert not set(ratings) & set(preds.keys())
        assert preds.keys() == [3, 4, 5, 6, 7]

    def test_predictions_clamped(self):
        corpus = {1: {1: 1.0, 2: 5.0}, 2: {1: 1.0, 2: 5.0}}
        predictor = SlopeOneRatingPredictor(train(corpus))

        high = predictor.score(make_history(10, {1: 4.0}), [2])
        low = predictor.score(make_history(11, {2: 2.0}), [1])

        assert high.get(2) == 5.0
        assert low.get(1) == 1.0

    def test_baseline_fills_only_unpredictable_items(self):
        baseline = RecordingBaseline({2: 9.5, 3: 9.5, 6: 0.25})
        predictor = SlopeOneRatingPredictor(train(mixed_corpus, baseline=baseline))

        preds = predictor.score(make_history(10, {5: 3.0}), [2, 3, 6])

        user_id, ratings, items = baseline.calls[0]
        assert len(baseline.calls) == 1
        assert user_id == 10
        assert ratings == SparseVector({5: 3.0})
        assert items == [6]
        # Baseline values are taken as they are, without clamping
        assert preds.get(6) == 0.25
        assert preds.get(2) != 9.5

    def test_baseline_not_called_when_everything_predicted(self):
        baseline = RecordingBaseline({})
        predictor = SlopeOneRatingPredictor(train(three_users, baseline=baseline))

        predictor.score(make_history(10, {1: 3.0}), [2])

        assert baseline.calls == []

    def test_absent_without_baseline(self):
        predictor = SlopeOneRatingPredictor(train(mixed_corpus))

        preds = predictor.score(make_history(10, {5: 3.0}), [6, 42])

        assert preds.is_empty()

    def test_absent_when_baseline_partial(self):
        baseline = RecordingBaseline({6: 2.0})
        predictor = SlopeOneRatingPredictor(train(mixed_corpus, baseline=baseline))

        preds = predictor.score(make_history(10, {5: 3.0}), [6, 42])

        assert preds.keys() == [6]

    def test_baseline_failure_propagates(self):
        predictor = SlopeOneRatingPredictor(train(mixed_corpus, baseline=FailingBaseline()))

        with pytest.raises(RuntimeError):
            predictor.score(make_history(10, {5: 3.0}), [6])

    def test_deterministic(self):
        predictor = SlopeOneRatingPredictor(train(mixed_corpus, baseline=ConstantPredictor(2.5)))
        history = make_history(10, {1: 3.0, 5: 2.0})

        first = predictor.score(history, [6, 4, 3, 2])
        second = predictor.score(history, [2, 3, 4, 6])

        assert first == second

    def test_score_user_through_dao(self):
        dao = DataFrameDAO.from_file(str(ratings_path / 'train.tsv'))
        model = SlopeOneModelBuilder(dao, domain).build()
        predictor = SlopeOneRatingPredictor(model, dao)

        preds = predictor.score_user(1, [1, 3])

        # 3 + deviation(1 -> 3) = 0, clamped to the domain minimum
        assert preds == SparseVector({3: 1.0})
        assert predictor.get_model() is model

    def test_score_user_without_dao(self):
        predictor = SlopeOneRatingPredictor(train(three_users))

        with pytest.raises(ValueError):
            predictor.score_user(1, [2])


class TestWeightedSlopeOneRatingPredictor:

    @pytest.mark.parametrize('params', p['weighted'])
    def test_score(self, params):
        predictor = WeightedSlopeOneRatingPredictor(train(params['corpus']))

        preds = predictor.score(make_history(10, params['ratings']), params['items'])

        for item, value in params['expected'].items():
            assert preds.get(item) == pytest.approx(value)

    def test_matches_unweighted_on_equal_counts(self):
        model = train({1: {1: 2.0, 2: 3.0, 3: 5.0}, 2: {1: 4.0, 2: 4.0, 3: 3.0}})
        history = make_history(10, {1: 3.0, 2: 3.5})

        weighted = WeightedSlopeOneRatingPredictor(model).score(history, [3])
        plain = SlopeOneRatingPredictor(model).score(history, [3])

        assert weighted.get(3) == pytest.approx(plain.get(3))


class TestBuildPredictor:

    @pytest.mark.parametrize('weighted, cls', [(False, SlopeOneRatingPredictor),
                                               (True, WeightedSlopeOneRatingPredictor)])
    def test_build_predictor(self, weighted, cls):
        dao = DataFrameDAO.from_file(str(ratings_path / 'train.tsv'))
        config = create_namespace({'weighted': weighted, 'damping': 0.0})

        predictor = build_predictor(dao, config, domain)

        assert type(predictor) is cls
        assert predictor.get_model().get_coratings(1, 2) == 3
