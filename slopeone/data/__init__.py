from slopeone.data.domain import RatingDomain
from slopeone.data.event import Event, Rating, Plus, UNSET_TIMESTAMP, plus, multi_plus, rating, unrate, \
    TIMESTAMP_COMPARATOR, USER_TIME_COMPARATOR, ITEM_TIME_COMPARATOR, timestamp_key, user_time_key, item_time_key
from slopeone.data.history import UserHistory, RatingVectorUserHistorySummarizer, make_rating_vector
from slopeone.data.dao import EventDAO, DataFrameDAO
