from predictbase.models.activity import ActivityFeed, BetActivity, ClaimActivity, MarketLaunch
from predictbase.models.failure import CatalogError, FailureDetail, FailureKind, KnownError
from predictbase.models.filters import (
    DEFAULT_LEAGUE_FILTER,
    DEFAULT_MARKET_FILTER,
    DEFAULT_TRADER_FILTER,
    WILDCARDS,
    FilterState,
    LeagueFilter,
    MarketFilter,
    TraderFilter,
)
from predictbase.models.league import LEAGUE_CATEGORIES, League, LeagueStatus
from predictbase.models.market import Market, MarketStatus
from predictbase.models.trader import TRADER_CATEGORIES, RiskScore, Timeframe, Trader

__all__ = [
    "ActivityFeed",
    "BetActivity",
    "CatalogError",
    "ClaimActivity",
    "DEFAULT_LEAGUE_FILTER",
    "DEFAULT_MARKET_FILTER",
    "DEFAULT_TRADER_FILTER",
    "FailureDetail",
    "FailureKind",
    "FilterState",
    "KnownError",
    "LEAGUE_CATEGORIES",
    "League",
    "LeagueFilter",
    "LeagueStatus",
    "Market",
    "MarketFilter",
    "MarketLaunch",
    "MarketStatus",
    "RiskScore",
    "TRADER_CATEGORIES",
    "Timeframe",
    "Trader",
    "TraderFilter",
    "WILDCARDS",
]
