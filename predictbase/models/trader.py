from dataclasses import dataclass
from enum import Enum


class RiskScore(str, Enum):
    """Risk tier assigned to a trader."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Timeframe(str, Enum):
    """
    Leaderboard timeframe choices.

    The catalog carries no per-period PnL, so every timeframe
    matches every trader.
    """

    ALL_TIME = "all-time"
    THIS_YEAR = "this-year"
    THIS_MONTH = "this-month"
    THIS_WEEK = "this-week"


TRADER_CATEGORIES = ("crypto", "sports", "finance", "technology", "politics")


@dataclass(frozen=True, slots=True)
class Trader:
    """
    A ranked trader on the leaderboard.

    Attributes:
        id: Unique identifier within the trader catalog
        rank: Leaderboard position (unique, may be sparse)
        username: Display name (searched by the view)
        pnl: Realised profit and loss in USD, may be negative
        risk_score: Risk tier (Low, Medium, High)
        category: Market category the trader is most active in
        copiers: Number of users copying this trader
    """

    id: int
    rank: int
    username: str
    pnl: float
    risk_score: RiskScore
    category: str
    copiers: int
