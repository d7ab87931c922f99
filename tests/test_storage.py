"""Tests for run history, progress and notes."""

from musclememory.levels import list_levels
from musclememory.models import EndpointResult, FullVerificationResult, LevelResult
from musclememory.report import generate_report
from musclememory.storage import RunRecord, load_notes, load_progress, load_records, save_note


def _level(level_id, failed=0):
    return LevelResult(level_id, passed_count=2, failed_count=failed, total_time_ms=30)


def test_record_roundtrip_and_layout(results_dir):
    record = RunRecord.from_result(_level("l1-crud"), "http://localhost:3001", timestamp="20260101T000000Z")
    run_dir = record.save()

    assert run_dir == results_dir / "level" / "l1-crud" / "20260101T000000Z"
    loaded = RunRecord.load(run_dir)
    assert loaded.target == "l1-crud"
    assert loaded.passed is True
    assert loaded.payload["levelId"] == "l1-crud"


def test_endpoint_record_target_slug(results_dir):
    result = EndpointResult(False, "GET", "/health/db", 200, 0, "✗ GET /health/db failed to connect", 3, "refused")
    record = RunRecord.from_result(result, "http://x", timestamp="20260101T000000Z")
    assert record.target == "GET /health/db"
    assert record.failed_count == 1
    assert record.save().parent.name == "GET-health-db"


def test_corrupt_record_ignored(results_dir):
    bad = results_dir / "level" / "l0-server" / "20260101T000000Z"
    bad.mkdir(parents=True)
    (bad / "record.json").write_text("{not json", encoding="utf-8")
    assert load_records() == []


def test_records_sorted_by_timestamp(results_dir):
    RunRecord.from_result(_level("l1-crud"), "u", timestamp="20260102T000000Z").save()
    RunRecord.from_result(_level("l0-server"), "u", timestamp="20260101T000000Z").save()
    assert [r.target for r in load_records("level")] == ["l0-server", "l1-crud"]


def test_progress_unlocks_next_level(results_dir):
    RunRecord.from_result(_level("l0-server"), "u", timestamp="20260101T000000Z").save()
    RunRecord.from_result(_level("l1-crud", failed=1), "u", timestamp="20260101T000100Z").save()

    progress = load_progress()
    statuses = {lp.level.id: lp.status for lp in progress.levels}

    assert statuses["l0-server"] == "completed"
    assert statuses["l1-crud"] == "available"
    assert statuses["l2-database"] == "locked"
    assert progress.total_completed == 1
    assert progress.completion_percentage == round(100 / len(list_levels()))
    assert progress.current_level.id == "l1-crud"


def test_progress_empty_history(results_dir):
    progress = load_progress()
    assert progress.levels[0].status == "available"
    assert all(lp.status == "locked" for lp in progress.levels[1:])
    assert progress.best_speedrun_ms is None


def test_best_speedrun_ignores_failed_runs(results_dir):
    clean = FullVerificationResult(completed=True, total_time_ms=900, passed_count=5)
    faster_but_failed = FullVerificationResult(completed=True, total_time_ms=100, passed_count=4, failed_count=1)
    slower = FullVerificationResult(completed=True, total_time_ms=1500, passed_count=5)
    for i, r in enumerate([clean, faster_but_failed, slower]):
        RunRecord.from_result(r, "u", timestamp=f"2026010{i + 1}T000000Z").save()

    assert load_progress().best_speedrun_ms == 900


def test_notes_and_report(results_dir):
    RunRecord.from_result(_level("l0-server"), "http://localhost:3001", timestamp="20260101T000000Z").save()
    save_note("20260101T000000Z", "first green run")

    assert load_notes() == {"20260101T000000Z": "first green run"}
    path = generate_report()
    text = path.read_text(encoding="utf-8")
    assert path == results_dir / "RESULTS.md"
    assert "## level" in text
    assert "first green run" in text
    assert "l0-server" in text


def test_same_second_runs_are_both_kept(results_dir):
    first = RunRecord.from_result(_level("l0-server"), "u", timestamp="20260101T000000Z")
    second = RunRecord.from_result(_level("l0-server", failed=1), "u", timestamp="20260101T000000Z")
    first_dir = first.save()
    second_dir = second.save()

    assert first_dir != second_dir
    assert second.timestamp == "20260101T000000Z-2"
    records = load_records("level")
    assert [r.timestamp for r in records] == ["20260101T000000Z", "20260101T000000Z-2"]
    assert [r.passed for r in records] == [True, False]


def test_notes_skip_comments_and_keep_latest(results_dir):
    results_dir.mkdir(parents=True)
    (results_dir / "notes.md").write_text("# run notes\nnot a note\n", encoding="utf-8")
    save_note("20260101T000000Z", "cold start")
    save_note("20260101T000000Z", "rerun: warm cache")

    assert load_notes() == {"20260101T000000Z": "rerun: warm cache"}
