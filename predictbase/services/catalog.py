"""
Entity catalog service.

Loads the static market, trader, league, and activity data the dashboard
browses. Records are validated with pydantic at the trust boundary and
converted to frozen dataclasses; nothing downstream mutates them.

INVARIANTS (checked on load, CatalogError otherwise):
- ids are unique within each collection
- trader ranks are unique
- volumes and copier counts are non-negative
- 0 <= participants <= max_participants for every league
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from predictbase.config import settings
from predictbase.models.activity import ActivityFeed, BetActivity, ClaimActivity, MarketLaunch
from predictbase.models.failure import CatalogError, FailureKind
from predictbase.models.league import League, LeagueStatus
from predictbase.models.market import Market
from predictbase.models.trader import RiskScore, Trader

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"


# =============================================================================
# RECORD SCHEMAS (JSON uses the dashboard's camelCase keys)
# =============================================================================


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class MarketRecord(_Record):
    id: int
    title: str
    status: str
    category: str
    volume: float = Field(ge=0)

    def to_entity(self) -> Market:
        return Market(
            id=self.id,
            title=self.title,
            status=self.status,
            category=self.category,
            volume=self.volume,
        )


class TraderRecord(_Record):
    id: int
    rank: int = Field(ge=1)
    username: str
    pnl: float
    risk_score: RiskScore
    category: str
    copiers: int = Field(ge=0)

    def to_entity(self) -> Trader:
        return Trader(
            id=self.id,
            rank=self.rank,
            username=self.username,
            pnl=self.pnl,
            risk_score=self.risk_score,
            category=self.category,
            copiers=self.copiers,
        )


class LeagueRecord(_Record):
    id: int
    name: str
    description: str
    category: str
    entry_fee: str
    prize_pool: str
    participants: int = Field(ge=0)
    max_participants: int = Field(ge=1)
    time_remaining: str
    status: LeagueStatus
    creator: str
    duration: str
    markets: list[str] = Field(default_factory=list)

    def to_entity(self) -> League:
        return League(
            id=self.id,
            name=self.name,
            description=self.description,
            category=self.category,
            entry_fee=self.entry_fee,
            prize_pool=self.prize_pool,
            participants=self.participants,
            max_participants=self.max_participants,
            time_remaining=self.time_remaining,
            status=self.status,
            creator=self.creator,
            duration=self.duration,
            markets=tuple(self.markets),
        )


class _FeedRecord(_Record):
    # Feed entries are display-only; unexpected keys mean a malformed file
    model_config = ConfigDict(extra="forbid")


class BetRecord(_FeedRecord):
    user: str
    amount: str
    market: str
    time: str

    def to_entity(self) -> BetActivity:
        return BetActivity(user=self.user, amount=self.amount, market=self.market, time=self.time)


class ClaimRecord(_FeedRecord):
    user: str
    amount: str
    market: str
    time: str

    def to_entity(self) -> ClaimActivity:
        return ClaimActivity(user=self.user, amount=self.amount, market=self.market, time=self.time)


class LaunchRecord(_FeedRecord):
    title: str
    time: str

    def to_entity(self) -> MarketLaunch:
        return MarketLaunch(title=self.title, time=self.time)


class ActivityRecord(_Record):
    bets: list[BetRecord] = Field(default_factory=list)
    claims: list[ClaimRecord] = Field(default_factory=list)
    launches: list[LaunchRecord] = Field(default_factory=list)

    def to_entity(self) -> ActivityFeed:
        return ActivityFeed(
            bets=tuple(b.to_entity() for b in self.bets),
            claims=tuple(c.to_entity() for c in self.claims),
            launches=tuple(m.to_entity() for m in self.launches),
        )


# =============================================================================
# CATALOG
# =============================================================================


@dataclass(frozen=True)
class Catalog:
    """Every collection the dashboard can browse, in display order."""

    markets: tuple[Market, ...] = ()
    traders: tuple[Trader, ...] = ()
    leagues: tuple[League, ...] = ()
    activity: ActivityFeed = ActivityFeed()


def _read_json(path: Path) -> Any:
    if not path.exists():
        logger.warning("catalog_file_missing", extra={"path": str(path)})
        raise CatalogError(
            f"Catalog file not found: {path.name}",
            detail=str(path),
            kind=FailureKind.NOT_FOUND,
        )
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogError(f"Catalog file is not valid JSON: {path.name}", detail=str(e)) from e
    except OSError as e:
        raise CatalogError(f"Catalog file could not be read: {path.name}", detail=str(e)) from e


def _validate(adapter: TypeAdapter[Any], data: Any, source: str) -> Any:
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        raise CatalogError(
            f"Catalog file has invalid records: {source}",
            detail=f"{e.error_count()} errors: {e.errors()[:3]}",
        ) from e


def _require_unique(values: Iterable[Any], what: str) -> None:
    seen: set[Any] = set()
    duplicates: list[Any] = []
    for value in values:
        if value in seen:
            duplicates.append(value)
        seen.add(value)
    if duplicates:
        raise CatalogError(
            f"Duplicate {what} in catalog",
            detail=f"Duplicates: {duplicates[:10]}",
            kind=FailureKind.INVARIANT_VIOLATION,
        )


_MARKETS = TypeAdapter(list[MarketRecord])
_TRADERS = TypeAdapter(list[TraderRecord])
_LEAGUES = TypeAdapter(list[LeagueRecord])
_ACTIVITY = TypeAdapter(ActivityRecord)


def parse_markets(data: Any) -> tuple[Market, ...]:
    """Validate raw market records and check catalog invariants."""
    markets = tuple(r.to_entity() for r in _validate(_MARKETS, data, "markets"))
    _require_unique((m.id for m in markets), "market ids")
    return markets


def parse_traders(data: Any) -> tuple[Trader, ...]:
    """Validate raw trader records and check catalog invariants."""
    traders = tuple(r.to_entity() for r in _validate(_TRADERS, data, "traders"))
    _require_unique((t.id for t in traders), "trader ids")
    _require_unique((t.rank for t in traders), "trader ranks")
    return traders


def parse_leagues(data: Any) -> tuple[League, ...]:
    """Validate raw league records and check catalog invariants."""
    leagues = tuple(r.to_entity() for r in _validate(_LEAGUES, data, "leagues"))
    _require_unique((lg.id for lg in leagues), "league ids")

    overfull = [lg.id for lg in leagues if lg.participants > lg.max_participants]
    if overfull:
        raise CatalogError(
            "League has more participants than its maximum",
            detail=f"League ids: {overfull}",
            kind=FailureKind.INVARIANT_VIOLATION,
        )
    return leagues


def parse_activity(data: Any) -> ActivityFeed:
    """Validate the activity feed file."""
    return _validate(_ACTIVITY, data, "activity").to_entity()


def load_catalog(data_dir: Path | None = None) -> Catalog:
    """
    Load the full catalog from JSON files.

    Args:
        data_dir: Directory containing markets.json, traders.json,
            leagues.json and activity.json. Defaults to the configured
            catalog_dir, then the packaged data directory.

    Returns:
        Validated, immutable Catalog.

    Raises:
        CatalogError: If a file is missing, malformed, or breaks an invariant
    """
    if data_dir is None:
        data_dir = settings.catalog_dir or DATA_DIR

    catalog = Catalog(
        markets=parse_markets(_read_json(data_dir / "markets.json")),
        traders=parse_traders(_read_json(data_dir / "traders.json")),
        leagues=parse_leagues(_read_json(data_dir / "leagues.json")),
        activity=parse_activity(_read_json(data_dir / "activity.json")),
    )

    logger.info(
        "catalog_loaded",
        extra={
            "path": str(data_dir),
            "markets": len(catalog.markets),
            "traders": len(catalog.traders),
            "leagues": len(catalog.leagues),
        },
    )

    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """
    Get cached catalog.

    Cached after first load (catalog data is read-only).

    Raises:
        CatalogError: If the catalog cannot be loaded
    """
    return load_catalog()
