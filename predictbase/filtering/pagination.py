"""
Pagination Window: "View More" over a filtered result set.

The window only counts how many results are visible; it never holds the
results themselves. Growing past the end is legal and has no visible
effect until more results exist.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import TypeVar

from predictbase.config import Settings, settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PaginationState:
    """
    How much of a result set is visible.

    Attributes:
        visible_count: Results currently shown
        page_increment: Results added per "View More"
        page_size: visible_count to return to when filters change
    """

    visible_count: int
    page_increment: int
    page_size: int

    def __post_init__(self) -> None:
        for name in ("visible_count", "page_increment", "page_size"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value}")


def initial_window(config: Settings | None = None) -> PaginationState:
    """Window for a freshly mounted view."""
    config = config or settings
    return PaginationState(
        visible_count=config.page_size,
        page_increment=config.page_increment,
        page_size=config.page_size,
    )


def visible(results: Sequence[T], window: PaginationState) -> tuple[T, ...]:
    """First min(visible_count, len(results)) results, in order."""
    return tuple(results[: window.visible_count])


def grow_window(window: PaginationState) -> PaginationState:
    """Show one more page."""
    grown = replace(window, visible_count=window.visible_count + window.page_increment)
    logger.debug("window_grown", extra={"visible_count": grown.visible_count})
    return grown


def reset_window(window: PaginationState) -> PaginationState:
    """Back to the first page (applied on every filter change)."""
    return replace(window, visible_count=window.page_size)


def has_more(results: Sequence[T], window: PaginationState) -> bool:
    """True if a "View More" affordance should be offered."""
    return window.visible_count < len(results)
