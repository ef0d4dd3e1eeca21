import pytest

from predictbase.models.league import League, LeagueStatus
from predictbase.models.market import Market
from predictbase.models.trader import RiskScore, Trader
from predictbase.services.catalog import get_catalog


@pytest.fixture(autouse=True)
def clear_catalog_cache():
    """Drop the cached packaged catalog between tests."""
    get_catalog.cache_clear()
    yield
    get_catalog.cache_clear()


def _make_market(
    market_id: int,
    title: str = "Untitled market",
    status: str = "trending",
    category: str = "crypto",
    volume: float = 1000,
) -> Market:
    return Market(id=market_id, title=title, status=status, category=category, volume=volume)


def _make_league(
    league_id: int,
    name: str,
    description: str,
    category: str,
    status: LeagueStatus = LeagueStatus.OPEN,
    participants: int = 10,
    max_participants: int = 20,
) -> League:
    return League(
        id=league_id,
        name=name,
        description=description,
        category=category,
        entry_fee="10 USDC",
        prize_pool="1,000 USDC",
        participants=participants,
        max_participants=max_participants,
        time_remaining="3 days",
        status=status,
        creator="tester",
        duration="30 days",
        markets=("BTC/USD",),
    )


@pytest.fixture
def sample_markets() -> list[Market]:
    """Seven markets, three of them trending."""
    return [
        _make_market(1, "Will Bitcoin hit $100k?", "trending", "crypto", 250_000),
        _make_market(2, "Will the Fed cut rates?", "new", "finance", 80_000),
        _make_market(3, "Will the Chiefs win the Super Bowl?", "trending", "sports", 120_000),
        _make_market(4, "Will Ethereum flip Bitcoin?", "closing-soon", "crypto", 40_000),
        _make_market(5, "Will GPT-6 ship this year?", "new", "technology", 5_000),
        _make_market(6, "Will Solana reach $300?", "trending", "crypto", 15_000),
        _make_market(7, "Will the incumbent win?", "resolved", "politics", 900_000),
    ]


@pytest.fixture
def sample_traders() -> list[Trader]:
    return [
        Trader(1, 1, "CryptoWhale", 125_000.0, RiskScore.MEDIUM, "crypto", 1200),
        Trader(2, 2, "SportsOracle", 98_000.0, RiskScore.LOW, "sports", 860),
        Trader(3, 3, "DegenDan", 76_000.0, RiskScore.HIGH, "crypto", 530),
        Trader(4, 5, "MacroMaven", 54_000.0, RiskScore.LOW, "finance", 320),
        Trader(5, 8, "VolatilityVic", -4_200.0, RiskScore.HIGH, "crypto", 87),
    ]


@pytest.fixture
def sample_leagues() -> list[League]:
    return [
        _make_league(1, "Crypto Majors Q4 Showdown", "Trade the biggest crypto markets", "Crypto"),
        _make_league(2, "F1 Constructors Cup", "Predict Formula 1 race outcomes", "Sports"),
        _make_league(3, "Election Night", "Call the swing states", "Politics", LeagueStatus.ACTIVE),
        _make_league(4, "Altcoin Sprint", "Small-cap tokens", "Crypto", LeagueStatus.CLOSED),
    ]


@pytest.fixture
def make_market():
    """Factory for one-off markets."""
    return _make_market


@pytest.fixture
def make_league():
    """Factory for one-off leagues."""
    return _make_league
