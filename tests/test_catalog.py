import json
from pathlib import Path

import pytest

from predictbase.models.failure import CatalogError, FailureKind
from predictbase.models.league import LeagueStatus
from predictbase.models.trader import RiskScore
from predictbase.services.catalog import (
    DATA_DIR,
    get_catalog,
    load_catalog,
    parse_activity,
    parse_leagues,
    parse_markets,
    parse_traders,
)
from predictbase.services.views import MarketsView


def _league_record(league_id: int, **overrides) -> dict:
    record = {
        "id": league_id,
        "name": "Test League",
        "description": "A league for tests",
        "category": "Crypto",
        "entryFee": "10 USDC",
        "prizePool": "100 USDC",
        "participants": 5,
        "maxParticipants": 10,
        "timeRemaining": "2 days",
        "status": "open",
        "creator": "tester",
        "duration": "7 days",
        "markets": ["BTC/USD"],
    }
    record.update(overrides)
    return record


def _write_catalog(directory: Path, **files) -> Path:
    contents = {
        "markets": [],
        "traders": [],
        "leagues": [],
        "activity": {},
    }
    contents.update(files)
    for name, data in contents.items():
        (directory / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    return directory


class TestPackagedCatalog:
    """The shipped data files load and satisfy catalog invariants."""

    def test_loads(self) -> None:
        catalog = load_catalog(DATA_DIR)

        assert len(catalog.markets) > 0
        assert len(catalog.traders) > 0
        assert len(catalog.leagues) > 0
        assert len(catalog.activity.bets) == 5
        assert len(catalog.activity.claims) == 4
        assert len(catalog.activity.launches) == 5

    def test_cached(self) -> None:
        assert get_catalog() is get_catalog()

    def test_leagues_from_dashboard(self) -> None:
        leagues = {lg.id: lg for lg in load_catalog(DATA_DIR).leagues}

        assert leagues[1].name == "Crypto Majors Q4 Showdown"
        assert leagues[1].markets == ("BTC/USD", "ETH/USD", "SOL/USD", "ADA/USD")
        assert leagues[2].entry_fee == "0.1 ETH"
        assert leagues[2].status is LeagueStatus.OPEN

    def test_markets_view_over_packaged_data(self) -> None:
        view = MarketsView.from_catalog(load_catalog(DATA_DIR))

        assert all(m.status == "trending" for m in view.results)
        assert len(view.page) == 6
        assert view.has_more


class TestParsing:
    def test_camel_case_keys(self) -> None:
        traders = parse_traders(
            [
                {
                    "id": 1,
                    "rank": 1,
                    "username": "Whale",
                    "pnl": -10.5,
                    "riskScore": "High",
                    "category": "crypto",
                    "copiers": 3,
                }
            ]
        )
        assert traders[0].risk_score is RiskScore.HIGH
        assert traders[0].pnl == -10.5

    def test_snake_case_keys_accepted(self) -> None:
        leagues = parse_leagues(
            [
                {
                    "id": 1,
                    "name": "n",
                    "description": "d",
                    "category": "Sports",
                    "entry_fee": "1 ETH",
                    "prize_pool": "2 ETH",
                    "participants": 0,
                    "max_participants": 8,
                    "time_remaining": "1 day",
                    "status": "active",
                    "creator": "c",
                    "duration": "d",
                }
            ]
        )
        assert leagues[0].max_participants == 8
        assert leagues[0].markets == ()

    def test_preserves_order(self) -> None:
        markets = parse_markets(
            [
                {"id": 3, "title": "c", "status": "new", "category": "x", "volume": 1},
                {"id": 1, "title": "a", "status": "new", "category": "x", "volume": 2},
                {"id": 2, "title": "b", "status": "new", "category": "x", "volume": 3},
            ]
        )
        assert [m.id for m in markets] == [3, 1, 2]


class TestInvariants:
    def test_duplicate_market_ids(self) -> None:
        record = {"id": 1, "title": "a", "status": "new", "category": "x", "volume": 1}
        with pytest.raises(CatalogError) as exc_info:
            parse_markets([record, record])
        assert exc_info.value.kind == FailureKind.INVARIANT_VIOLATION

    def test_negative_volume(self) -> None:
        record = {"id": 1, "title": "a", "status": "new", "category": "x", "volume": -5}
        with pytest.raises(CatalogError) as exc_info:
            parse_markets([record])
        assert exc_info.value.kind == FailureKind.VALIDATION_FAILED

    def test_duplicate_trader_ranks(self) -> None:
        base = {
            "username": "u",
            "pnl": 0,
            "riskScore": "Low",
            "category": "crypto",
            "copiers": 0,
        }
        with pytest.raises(CatalogError, match="trader ranks"):
            parse_traders([{"id": 1, "rank": 1, **base}, {"id": 2, "rank": 1, **base}])

    def test_unknown_risk_score(self) -> None:
        record = {
            "id": 1,
            "rank": 1,
            "username": "u",
            "pnl": 0,
            "riskScore": "Extreme",
            "category": "crypto",
            "copiers": 0,
        }
        with pytest.raises(CatalogError):
            parse_traders([record])

    def test_overfull_league(self) -> None:
        with pytest.raises(CatalogError, match="more participants"):
            parse_leagues([_league_record(1, participants=11, maxParticipants=10)])

    def test_full_league_is_valid(self) -> None:
        leagues = parse_leagues([_league_record(1, participants=10, maxParticipants=10)])
        assert leagues[0].is_full

    def test_bad_activity_entry(self) -> None:
        with pytest.raises(CatalogError):
            parse_activity({"launches": [{"title": "t", "time": "now", "extra": "x"}]})

    def test_activity_entry_missing_field(self) -> None:
        with pytest.raises(CatalogError, match="activity"):
            parse_activity({"bets": [{"user": "0x01", "amount": "$1.00", "time": "now"}]})

    def test_activity_entries_typed(self) -> None:
        feed = parse_activity(
            {
                "claims": [
                    {"user": "0x01", "amount": "$2.00", "market": "NFL", "time": "1 hour ago"}
                ],
                "launches": [{"title": "New market", "time": "now"}],
            }
        )
        assert feed.claims[0].market == "NFL"
        assert feed.launches[0].title == "New market"
        assert feed.bets == ()


class TestLoadCatalog:
    def test_from_directory(self, tmp_path: Path) -> None:
        _write_catalog(
            tmp_path,
            markets=[{"id": 1, "title": "a", "status": "trending", "category": "x", "volume": 0}],
            leagues=[_league_record(1)],
        )
        catalog = load_catalog(tmp_path)

        assert len(catalog.markets) == 1
        assert catalog.traders == ()
        assert catalog.activity.bets == ()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(tmp_path)
        assert exc_info.value.kind == FailureKind.NOT_FOUND
        assert "markets.json" in exc_info.value.message

    def test_invalid_json(self, tmp_path: Path) -> None:
        _write_catalog(tmp_path)
        (tmp_path / "traders.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(tmp_path)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        """Undecodable bytes surface as a catalog error, not a UnicodeDecodeError."""
        _write_catalog(tmp_path)
        (tmp_path / "markets.json").write_bytes(b"\xff\xfe[]")

        with pytest.raises(CatalogError, match="not valid JSON") as exc_info:
            load_catalog(tmp_path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        """A directory where a data file should be is reported as unreadable."""
        _write_catalog(tmp_path)
        (tmp_path / "markets.json").unlink()
        (tmp_path / "markets.json").mkdir()

        with pytest.raises(CatalogError, match="could not be read"):
            load_catalog(tmp_path)

    def test_error_converts_to_detail(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(tmp_path)

        detail = exc_info.value.to_detail()
        assert detail.kind == FailureKind.NOT_FOUND
        assert detail.suggestion is not None
