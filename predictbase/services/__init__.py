"""
PredictBase services.

Catalog loading and the per-page view sessions built on the filter engine.
"""

from predictbase.services.catalog import (
    Catalog,
    get_catalog,
    load_catalog,
    parse_activity,
    parse_leagues,
    parse_markets,
    parse_traders,
)
from predictbase.services.views import FilteredView, LeaderboardView, LeaguesView, MarketsView

__all__ = [
    "Catalog",
    "FilteredView",
    "LeaderboardView",
    "LeaguesView",
    "MarketsView",
    "get_catalog",
    "load_catalog",
    "parse_activity",
    "parse_leagues",
    "parse_markets",
    "parse_traders",
]
