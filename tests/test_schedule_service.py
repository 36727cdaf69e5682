"""
Tests for snapshot loading and schedule unification
"""
import json

import pytest

from conftest import make_tournament
from poker_planning.models import Platform
from poker_planning.services import schedule_service
from poker_planning.services.schedule_service import (
    JsonSnapshotLoader,
    MemorySnapshotLoader,
    build_schedule,
    deduplicate_by_id,
    get_available_dates,
    quality_snapshot,
    unify_tournaments,
)


@pytest.fixture
def loader(winamax_snapshot, pokerstars_graphql):
    return MemorySnapshotLoader({"winamax": winamax_snapshot, "pokerstars": pokerstars_graphql})


class TestUnify:
    def test_sorted_by_date_then_time(self):
        late = make_tournament(date="2025-06-01", time="22:00")
        early = make_tournament(date="2025-06-01", time="09:00")
        tomorrow = make_tournament(date="2025-06-02", time="08:00")
        merged = unify_tournaments([late, tomorrow], [early])
        assert [t.id for t in merged] == [early.id, late.id, tomorrow.id]

    def test_stable_for_equal_starts(self):
        a = make_tournament(name="A", time="20:00")
        b = make_tournament(name="B", time="20:00", platform=Platform.UNIBET)
        assert [t.name for t in unify_tournaments([a], [b])] == ["A", "B"]
        assert [t.name for t in unify_tournaments([b], [a])] == ["B", "A"]

    def test_first_occurrence_wins_on_duplicate_ids(self):
        first = make_tournament(id="wmx-1", name="First")
        second = make_tournament(id="wmx-1", name="Second")
        kept, removed = deduplicate_by_id([first, second])
        assert [t.name for t in kept] == ["First"]
        assert removed == 1
        assert [t.name for t in unify_tournaments([first], [second])] == ["First"]

    def test_empty_inputs(self):
        assert unify_tournaments([], [], []) == []
        assert unify_tournaments() == []

    def test_available_dates(self):
        tournaments = [
            make_tournament(date="2025-06-03"),
            make_tournament(date="2025-06-01"),
            make_tournament(date="2025-06-03"),
        ]
        assert get_available_dates(tournaments) == ["2025-06-01", "2025-06-03"]
        assert get_available_dates([]) == []


class TestBuildSchedule:
    def test_all_platforms(self, loader):
        schedule = build_schedule(loader, today="2025-06-01", unibet_days=2)

        assert schedule.is_available
        # 3 Winamax + 3 PokerStars + 11 Sunday and 6 Monday Unibet entries
        assert len(schedule.tournaments) == 23
        assert schedule.dates == ["2025-06-01", "2025-06-02"]
        assert schedule.duplicates_removed == 0

        keys = [(t.date, t.time) for t in schedule.tournaments]
        assert keys == sorted(keys)
        assert len({t.id for t in schedule.tournaments}) == len(schedule.tournaments)

        winamax = schedule.sources[Platform.WINAMAX]
        assert (winamax.ok, winamax.count, winamax.dropped) == (True, 3, 1)
        pokerstars = schedule.sources[Platform.POKERSTARS]
        assert (pokerstars.ok, pokerstars.count, pokerstars.dropped) == (True, 3, 2)
        assert schedule.sources[Platform.UNIBET].count == 17

    def test_same_input_same_output(self, loader):
        first = build_schedule(loader, today="2025-06-01", unibet_days=2)
        second = build_schedule(loader, today="2025-06-01", unibet_days=2)
        assert first.tournaments == second.tournaments

    def test_missing_snapshots_leave_unibet(self):
        schedule = build_schedule(MemorySnapshotLoader(), today="2025-06-01", unibet_days=1)

        assert schedule.is_available
        assert {t.platform for t in schedule.tournaments} == {Platform.UNIBET}
        assert schedule.sources[Platform.WINAMAX].ok is False
        assert schedule.sources[Platform.WINAMAX].error == "snapshot unavailable"

    def test_nothing_available(self):
        schedule = build_schedule(MemorySnapshotLoader({"winamax": {}}), today="2025-06-01", unibet_days=0)

        assert not schedule.is_available
        assert schedule.tournaments == []
        assert schedule.dates == []
        assert schedule.sources[Platform.UNIBET].error == "disabled"

    def test_unibet_days_default_from_config(self, monkeypatch):
        monkeypatch.setattr(schedule_service.config, "UNIBET_SCHEDULE_DAYS", 1)
        schedule = build_schedule(MemorySnapshotLoader(), today="2025-06-02")
        assert len(schedule.tournaments) == 6

    def test_duplicate_records_counted(self, winamax_snapshot):
        record = winamax_snapshot["tournaments"][0]
        loader = MemorySnapshotLoader({Platform.WINAMAX: {"tournaments": [record, dict(record)]}})
        schedule = build_schedule(loader, today="2025-06-01", unibet_days=0)
        assert [t.id for t in schedule.tournaments] == ["wmx-1001"]
        assert schedule.duplicates_removed == 1

    def test_failing_normalizer_is_isolated(self, loader, monkeypatch):
        real = schedule_service.normalize_snapshot

        def flaky(platform, data):
            if platform is Platform.POKERSTARS:
                raise RuntimeError("unexpected payload")
            return real(platform, data)

        monkeypatch.setattr(schedule_service, "normalize_snapshot", flaky)
        schedule = build_schedule(loader, today="2025-06-01", unibet_days=0)

        assert schedule.is_available
        assert schedule.sources[Platform.POKERSTARS].ok is False
        assert schedule.sources[Platform.POKERSTARS].error == "unexpected payload"
        assert {t.platform for t in schedule.tournaments} == {Platform.WINAMAX}


class TestJsonSnapshotLoader:
    def test_reads_platform_files(self, tmp_path, winamax_snapshot):
        (tmp_path / "winamax.json").write_text(json.dumps(winamax_snapshot), encoding="utf-8")
        loader = JsonSnapshotLoader(tmp_path)

        assert loader.path_for(Platform.WINAMAX) == tmp_path / "winamax.json"
        assert loader.load(Platform.WINAMAX) == winamax_snapshot
        assert loader.load(Platform.POKERSTARS) is None

    @pytest.mark.parametrize("content", ["", "   \n", "[]", "{}", '"text"', "null"])
    def test_empty_snapshots(self, tmp_path, content):
        (tmp_path / "pokerstars.json").write_text(content, encoding="utf-8")
        assert JsonSnapshotLoader(tmp_path).load(Platform.POKERSTARS) is None

    def test_corrupt_snapshot(self, tmp_path, capsys):
        (tmp_path / "pokerstars.json").write_text('{"tournaments": [', encoding="utf-8")
        assert JsonSnapshotLoader(tmp_path).load(Platform.POKERSTARS) is None
        assert "[pokerstars] ✗ Malformed snapshot" in capsys.readouterr().out

    def test_corrupt_snapshot_does_not_break_schedule(self, tmp_path, winamax_snapshot):
        (tmp_path / "winamax.json").write_text(json.dumps(winamax_snapshot), encoding="utf-8")
        (tmp_path / "pokerstars.json").write_text("{oops", encoding="utf-8")

        schedule = build_schedule(JsonSnapshotLoader(tmp_path), today="2025-06-01", unibet_days=0)
        assert schedule.is_available
        assert len(schedule.tournaments) == 3
        assert schedule.sources[Platform.POKERSTARS].ok is False


def test_quality_snapshot(loader):
    schedule = build_schedule(loader, today="2025-06-01", unibet_days=2)
    report = quality_snapshot(schedule, today="2025-06-01")

    assert report["total"] == 23
    assert report["today"] == 15
    assert report["platforms"] == {"winamax": 3, "pokerstars": 3, "unibet": 17}
    assert report["dateRange"] == {"from": "2025-06-01", "to": "2025-06-02"}
    assert report["duplicatesRemoved"] == 0
    assert report["sources"]["pokerstars"]["dropped"] == 2
    assert sum(report["formats"].values()) == 23


def test_bad_field_keeps_platform_available(winamax_snapshot, pokerstars_graphql):
    """One odd record never takes its platform down"""
    good = winamax_snapshot["tournaments"][0]
    records = pokerstars_graphql["data"]["tournaments"]
    loader = MemorySnapshotLoader({
        "winamax": {"tournaments": [good, dict(good, id="2", buyinRaw=5)]},
        "pokerstars": records + [dict(records[3], guaranteeText=2500, whenStart="2025-06-01T20:00:00Z")],
    })
    schedule = build_schedule(loader, today="2025-06-01", unibet_days=0)

    winamax = schedule.sources[Platform.WINAMAX]
    assert (winamax.ok, winamax.count) == (True, 2)
    pokerstars = schedule.sources[Platform.POKERSTARS]
    assert (pokerstars.ok, pokerstars.count) == (True, 4)


def test_sort_key_is_start():
    t = make_tournament(date="2025-06-01", time="09:05")
    assert schedule_service.sort_key(t) == t.starts_at == "2025-06-01 09:05"
