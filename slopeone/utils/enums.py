from enum import Enum


class BaselineStrategy(Enum):
    NONE = 'none'
    CONSTANT = 'constant'
    GLOBAL_MEAN = 'global_mean'
    ITEM_MEAN = 'item_mean'
    USER_MEAN = 'user_mean'
    ITEM_USER_MEAN = 'item_user_mean'
