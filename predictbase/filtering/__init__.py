"""
Filtering and pagination for the dashboard views.

Predicate set: one pure, total test per filterable attribute.
Engine: conjunctive, order-preserving filter of a catalog by a filter state.
Pagination: "View More" window over the filtered results.
"""

from predictbase.filtering.engine import (
    active_predicates,
    filter_catalog,
    league_predicates,
    market_predicates,
    trader_predicates,
)
from predictbase.filtering.pagination import (
    PaginationState,
    grow_window,
    has_more,
    initial_window,
    reset_window,
    visible,
)
from predictbase.filtering.predicates import (
    categorical_predicate,
    enum_predicate,
    is_wildcard,
    matches_categorical,
    matches_enum,
    matches_numeric_floor,
    matches_search,
    numeric_floor_predicate,
    search_predicate,
)

__all__ = [
    # Engine
    "active_predicates",
    "filter_catalog",
    "league_predicates",
    "market_predicates",
    "trader_predicates",
    # Pagination
    "PaginationState",
    "grow_window",
    "has_more",
    "initial_window",
    "reset_window",
    "visible",
    # Predicates
    "categorical_predicate",
    "enum_predicate",
    "is_wildcard",
    "matches_categorical",
    "matches_enum",
    "matches_numeric_floor",
    "matches_search",
    "numeric_floor_predicate",
    "search_predicate",
]
