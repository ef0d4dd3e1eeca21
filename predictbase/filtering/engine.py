"""
Filter Engine: conjunctive filtering over a static catalog.

INVARIANTS:
- An entity survives iff EVERY active predicate returns True (logical AND)
- Wildcard filters produce no predicate and restrict nothing
- Catalog order is preserved (stable; no sorting, no deduplication)
- Same catalog + state → same result (safe to memoize)
- Filtering is monotonic: tightening a filter never grows the result
"""

import logging
from collections.abc import Callable, Sequence
from operator import attrgetter
from typing import Any, TypeVar

from predictbase.filtering.predicates import (
    Predicate,
    categorical_predicate,
    enum_predicate,
    numeric_floor_predicate,
    search_predicate,
)
from predictbase.models.filters import FilterState, LeagueFilter, MarketFilter, TraderFilter

logger = logging.getLogger(__name__)

T = TypeVar("T")


def market_predicates(state: MarketFilter) -> list[Predicate | None]:
    """Search by title; status tab; category; minimum volume."""
    return [
        search_predicate(state.search, attrgetter("title")),
        categorical_predicate(attrgetter("status"), state.status),
        categorical_predicate(attrgetter("category"), state.category),
        numeric_floor_predicate(attrgetter("volume"), state.min_volume),
    ]


def trader_predicates(state: TraderFilter) -> list[Predicate | None]:
    """
    Search by username; category; risk tier.

    state.timeframe is accepted but never restricts: the leaderboard
    carries all-time figures only.
    """
    return [
        search_predicate(state.search, attrgetter("username")),
        categorical_predicate(attrgetter("category"), state.category),
        enum_predicate(attrgetter("risk_score"), state.risk),
    ]


def league_predicates(state: LeagueFilter) -> list[Predicate | None]:
    """Search by name or description; category (case-insensitive)."""
    return [
        search_predicate(state.search, attrgetter("name"), attrgetter("description")),
        categorical_predicate(attrgetter("category"), state.category, case_sensitive=False),
    ]


_PREDICATE_BUILDERS: dict[type, Callable[[Any], list[Predicate | None]]] = {
    MarketFilter: market_predicates,
    TraderFilter: trader_predicates,
    LeagueFilter: league_predicates,
}


def active_predicates(state: FilterState) -> list[Predicate]:
    """
    Predicates that actually restrict results for this state.

    Raises:
        TypeError: If state is not a known filter state type
    """
    builder = _PREDICATE_BUILDERS.get(type(state))
    if builder is None:
        raise TypeError(f"No predicates registered for {type(state).__name__}")
    return [p for p in builder(state) if p is not None]


def filter_catalog(catalog: Sequence[T], state: FilterState) -> tuple[T, ...]:
    """
    Filter a catalog by every active predicate in state.

    Args:
        catalog: Entities in display order
        state: The view's current filter state

    Returns:
        Matching entities, in catalog order. Empty if nothing matches.
    """
    predicates = active_predicates(state)

    if predicates:
        results = tuple(entity for entity in catalog if all(p(entity) for p in predicates))
    else:
        # All wildcards: identity
        results = tuple(catalog)

    logger.debug(
        "catalog_filtered",
        extra={
            "state": type(state).__name__,
            "active_filters": len(predicates),
            "total": len(catalog),
            "matched": len(results),
        },
    )

    return results
