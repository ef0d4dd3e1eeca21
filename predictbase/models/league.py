from dataclasses import dataclass, field
from enum import Enum


class LeagueStatus(str, Enum):
    """Lifecycle of a league."""

    OPEN = "open"
    ACTIVE = "active"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        """Badge text shown on the league card."""
        return _STATUS_LABELS.get(self, "Unknown")


_STATUS_LABELS = {
    LeagueStatus.OPEN: "Open for Entry",
    LeagueStatus.ACTIVE: "In Progress",
}

# (selector id, button label); "all" is the wildcard
LEAGUE_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("all", "All Categories"),
    ("crypto", "Crypto"),
    ("sports", "Sports"),
    ("politics", "Politics"),
    ("finance", "Finance"),
    ("science", "Science"),
)


@dataclass(frozen=True, slots=True)
class League:
    """
    A prediction league users can enter.

    Fees and prize pools are display strings that carry their own
    currency label (e.g., "100 $PROPHET", "0.1 ETH").
    """

    id: int
    name: str
    description: str
    category: str
    entry_fee: str
    prize_pool: str
    participants: int
    max_participants: int
    time_remaining: str
    status: LeagueStatus
    creator: str
    duration: str
    markets: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_full(self) -> bool:
        """True if no more participants can join."""
        return self.participants >= self.max_participants

    @property
    def status_label(self) -> str:
        return self.status.label
