"""Enumerated query values. Wire strings are exact."""

from enum import Enum


class SortBy(str, Enum):
    CURRENT = "CURRENT"
    INITIAL = "INITIAL"
    TOKENS = "TOKENS"
    CASHPNL = "CASHPNL"
    PERCENTPNL = "PERCENTPNL"
    TITLE = "TITLE"
    RESOLVING = "RESOLVING"
    PRICE = "PRICE"
    AVGPRICE = "AVGPRICE"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class FilterType(str, Enum):
    CASH = "CASH"
    TOKENS = "TOKENS"


class ActivityType(str, Enum):
    TRADE = "TRADE"
    SPLIT = "SPLIT"
    MERGE = "MERGE"
    REDEEM = "REDEEM"
    REWARD = "REWARD"
    CONVERSION = "CONVERSION"


class ActivitySortBy(str, Enum):
    TIMESTAMP = "TIMESTAMP"
    TOKENS = "TOKENS"
    CASH = "CASH"


class ClosedPositionSortBy(str, Enum):
    REALIZEDPNL = "REALIZEDPNL"
    TITLE = "TITLE"
    PRICE = "PRICE"
    AVGPRICE = "AVGPRICE"
