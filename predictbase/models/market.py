from dataclasses import dataclass
from enum import Enum


class MarketStatus(str, Enum):
    """Status tabs offered on the markets view."""

    TRENDING = "trending"
    NEW = "new"
    CLOSING_SOON = "closing-soon"
    RESOLVED = "resolved"


@dataclass(frozen=True, slots=True)
class Market:
    """
    A prediction market listed on the markets view.

    Attributes:
        id: Unique identifier within the market catalog
        title: Question shown on the market card (searched by the view)
        status: Lifecycle tab the market appears under (e.g., "trending")
        category: Topic label (e.g., "crypto", "sports")
        volume: Traded volume in USD, never negative
    """

    id: int
    title: str
    status: str
    category: str
    volume: float
