import pytest

from slopeone.data.event import rating, unrate, plus, Plus, Rating
from slopeone.data.history import UserHistory, make_rating_vector, RatingVectorUserHistorySummarizer
from slopeone.vectors import SparseVector


class TestUserHistory:

    def test_rejects_foreign_events(self):
        with pytest.raises(ValueError):
            UserHistory(1, [rating(1, 1, 3.0), rating(2, 1, 3.0)])

    def test_filter_and_item_set(self):
        history = UserHistory(1, [rating(1, 1, 3.0), plus(1, 2), rating(1, 3, 1.0)])

        assert len(history.filter(Plus)) == 1
        assert len(history.filter(Rating)) == 2
        assert history.item_set() == {1, 2, 3}
        assert history.get_user_id() == 1


class TestRatingVector:

    def test_latest_rating_wins(self):
        history = UserHistory(1, [rating(1, 1, 5.0, 20), rating(1, 1, 2.0, 10), rating(1, 2, 3.0, 5)])

        assert make_rating_vector(history) == SparseVector({1: 5.0, 2: 3.0})

    def test_unrate_removes_item(self):
        history = UserHistory(1, [rating(1, 1, 4.0, 1), unrate(1, 1, 2), rating(1, 2, 3.0, 3)])

        assert make_rating_vector(history).keys() == [2]

    def test_plus_events_ignored(self):
        history = UserHistory(1, [plus(1, 1), rating(1, 2, 3.0)])

        assert RatingVectorUserHistorySummarizer.summarize(history) == SparseVector({2: 3.0})
