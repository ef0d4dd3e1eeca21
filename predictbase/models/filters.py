"""
Filter state for each dashboard view.

A filter state is an immutable record of the user's current choices.
Views replace it wholesale on every input (dataclasses.replace), which
keeps the filter engine a pure function of (catalog, state).

Wildcards: "" (and "all" for categories) match everything, as does a
numeric threshold of 0.
"""

from dataclasses import dataclass

from predictbase.models.market import MarketStatus
from predictbase.models.trader import Timeframe

# Selector values that impose no restriction
WILDCARDS = frozenset({"", "all"})


@dataclass(frozen=True, slots=True)
class MarketFilter:
    """Filters offered on the markets view."""

    search: str = ""
    status: str = ""
    category: str = ""
    min_volume: float = 0


@dataclass(frozen=True, slots=True)
class TraderFilter:
    """Filters offered on the leaderboard view."""

    search: str = ""
    category: str = ""
    timeframe: str = Timeframe.ALL_TIME.value
    risk: str = ""


@dataclass(frozen=True, slots=True)
class LeagueFilter:
    """Filters offered on the leagues view."""

    search: str = ""
    category: str = "all"


# Initial state of each view, and the target of its "Clear Filters" action.
# The markets view opens on the Trending tab.
DEFAULT_MARKET_FILTER = MarketFilter(status=MarketStatus.TRENDING.value)
DEFAULT_TRADER_FILTER = TraderFilter()
DEFAULT_LEAGUE_FILTER = LeagueFilter()

FilterState = MarketFilter | TraderFilter | LeagueFilter
