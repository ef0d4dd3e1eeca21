from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BetActivity:
    """A bet placed by a wallet, as shown in the "Recent Bets" feed."""

    user: str
    amount: str
    market: str
    time: str


@dataclass(frozen=True, slots=True)
class ClaimActivity:
    """A winnings claim, as shown in the "Recent Claims" feed."""

    user: str
    amount: str
    market: str
    time: str


@dataclass(frozen=True, slots=True)
class MarketLaunch:
    """A newly created market, as shown in the "Recent Markets" feed."""

    title: str
    time: str


@dataclass(frozen=True)
class ActivityFeed:
    """The three read-only feeds shown beneath the markets grid."""

    bets: tuple[BetActivity, ...] = ()
    claims: tuple[ClaimActivity, ...] = ()
    launches: tuple[MarketLaunch, ...] = ()
