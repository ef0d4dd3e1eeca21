"""
View sessions for the markets, leaderboard, and leagues pages.

A view session owns one page's filter state and pagination window and
recomputes results on every change. Rendering is left to the caller:
it reads `page`, `has_more`, `is_empty`, and `empty_message`.

RULES:
- Any filter edit recomputes results AND resets the window to the first page
- "View More" grows the window and never touches filter state
- "Clear Filters" restores the view's default state and first page
- Sessions are independent; nothing is shared between them
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any, ClassVar, Generic, TypeVar

from predictbase.config import Settings
from predictbase.filtering.engine import filter_catalog
from predictbase.filtering.pagination import (
    PaginationState,
    grow_window,
    has_more,
    initial_window,
    reset_window,
    visible,
)
from predictbase.models.failure import FailureKind, KnownError
from predictbase.models.filters import (
    DEFAULT_LEAGUE_FILTER,
    DEFAULT_MARKET_FILTER,
    DEFAULT_TRADER_FILTER,
    LeagueFilter,
    MarketFilter,
    TraderFilter,
)
from predictbase.models.league import League
from predictbase.models.market import Market
from predictbase.models.trader import Trader
from predictbase.services.catalog import Catalog

logger = logging.getLogger(__name__)

E = TypeVar("E")
S = TypeVar("S", MarketFilter, TraderFilter, LeagueFilter)


class FilteredView(Generic[E, S]):
    """
    Filter state + pagination window over one catalog collection.

    Subclasses set the default state, the catalog attribute they browse,
    and the empty-state message.
    """

    default_state: ClassVar[Any]
    catalog_field: ClassVar[str]
    empty_message: ClassVar[str]

    def __init__(
        self,
        catalog: Sequence[E],
        state: S | None = None,
        config: Settings | None = None,
    ):
        self._catalog: tuple[E, ...] = tuple(catalog)
        self._default_state: S = state if state is not None else self.default_state
        self._state: S = self._default_state
        self._window = initial_window(config)
        self._results = filter_catalog(self._catalog, self._state)

    @classmethod
    def from_catalog(cls, catalog: Catalog, config: Settings | None = None) -> "FilteredView[E, S]":
        """Open a session over the matching collection of a loaded catalog."""
        return cls(getattr(catalog, cls.catalog_field), config=config)

    @property
    def state(self) -> S:
        return self._state

    @property
    def window(self) -> PaginationState:
        return self._window

    @property
    def results(self) -> tuple[E, ...]:
        """Every entity matching the current filters, in catalog order."""
        return self._results

    @property
    def page(self) -> tuple[E, ...]:
        """The entities currently visible."""
        return visible(self._results, self._window)

    @property
    def has_more(self) -> bool:
        """True if "View More" should be offered."""
        return has_more(self._results, self._window)

    @property
    def is_empty(self) -> bool:
        """True if nothing matches; the caller shows empty_message and a reset action."""
        return not self._results

    def update(self, **changes: Any) -> None:
        """
        Change one or more filter fields.

        Raises:
            TypeError: If a field name is not part of this view's filter state
        """
        self._apply(replace(self._state, **changes))

    def load_more(self) -> None:
        """Show the next page of results."""
        self._window = grow_window(self._window)

    def reset_filters(self) -> None:
        """Restore default filters and the first page."""
        self._apply(self._default_state)

    def get(self, entity_id: Any) -> E:
        """
        Look up an entity by id for its detail page.

        Searches the full catalog, not just the filtered results.

        Raises:
            KnownError: If no entity has this id
        """
        for entity in self._catalog:
            if getattr(entity, "id", None) == entity_id:
                return entity
        raise KnownError(
            kind=FailureKind.NOT_FOUND,
            message=f"No {self.catalog_field[:-1]} with id {entity_id}",
            suggestion="Go back to the list and pick another entry.",
        )

    def _apply(self, state: S) -> None:
        self._state = state
        self._results = filter_catalog(self._catalog, state)
        self._window = reset_window(self._window)
        logger.debug(
            "view_filters_changed",
            extra={
                "view": type(self).__name__,
                "matched": len(self._results),
                "visible_count": self._window.visible_count,
            },
        )


class MarketsView(FilteredView[Market, MarketFilter]):
    """Markets grid. Opens on the Trending tab."""

    default_state = DEFAULT_MARKET_FILTER
    catalog_field = "markets"
    empty_message = "No markets found matching your criteria"

    def set_search(self, term: str) -> None:
        self.update(search=term)

    def set_status(self, status: str) -> None:
        self.update(status=status)

    def set_category(self, category: str) -> None:
        self.update(category=category)

    def set_min_volume(self, min_volume: float) -> None:
        self.update(min_volume=min_volume)


class LeaderboardView(FilteredView[Trader, TraderFilter]):
    """Trader leaderboard."""

    default_state = DEFAULT_TRADER_FILTER
    catalog_field = "traders"
    empty_message = "No traders found matching your criteria."

    def set_search(self, term: str) -> None:
        self.update(search=term)

    def set_category(self, category: str) -> None:
        self.update(category=category)

    def set_timeframe(self, timeframe: str) -> None:
        self.update(timeframe=timeframe)

    def set_risk(self, risk: str) -> None:
        self.update(risk=risk)


class LeaguesView(FilteredView[League, LeagueFilter]):
    """Prediction leagues."""

    default_state = DEFAULT_LEAGUE_FILTER
    catalog_field = "leagues"
    empty_message = "No leagues found matching your criteria"

    def set_search(self, term: str) -> None:
        self.update(search=term)

    def set_category(self, category: str) -> None:
        self.update(category=category)
