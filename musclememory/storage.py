"""Run history for musclememory — stored records, progress and notes.

Records are stored as <results>/<kind>/<target-slug>/<timestamp>/record.json
where kind is 'endpoint', 'level' or 'all'. Progress (which levels are done,
best speed-run time) is derived from the stored records, never stored itself.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from musclememory.levels import LevelInfo, list_levels
from musclememory.models import EndpointResult, FullVerificationResult, LevelResult
from musclememory.settings import results_root

KINDS = ("endpoint", "level", "all")
SPEEDRUN_TARGET = "speedrun"

AnyResult = Union[EndpointResult, LevelResult, FullVerificationResult]


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _target_slug(target: str) -> str:
    """Normalize a target for use in directory paths.

    'GET /health/db' → 'GET-health-db', 'l1-crud' → 'l1-crud'
    """
    slug = re.sub(r"[^A-Za-z0-9_.-]+", "-", target).strip("-")
    return slug or "root"


@dataclass
class RunRecord:
    """One stored verification run."""

    kind: str
    target: str
    base_url: str
    timestamp: str
    passed: bool = False
    passed_count: int = 0
    failed_count: int = 0
    total_time_ms: int = 0
    payload: dict = field(default_factory=dict)

    @classmethod
    def from_result(cls, result: AnyResult, base_url: str, timestamp: Optional[str] = None) -> RunRecord:
        """Wrap an engine result for storage."""
        ts = timestamp or _timestamp()
        if isinstance(result, EndpointResult):
            return cls(
                kind="endpoint",
                target=f"{result.method} {result.path}",
                base_url=base_url,
                timestamp=ts,
                passed=result.success,
                passed_count=1 if result.success else 0,
                failed_count=0 if result.success else 1,
                total_time_ms=result.response_time_ms,
                payload=result.to_dict(),
            )
        if isinstance(result, LevelResult):
            return cls(
                kind="level",
                target=result.level_id,
                base_url=base_url,
                timestamp=ts,
                passed=result.passed,
                passed_count=result.passed_count,
                failed_count=result.failed_count,
                total_time_ms=result.total_time_ms,
                payload=result.to_dict(),
            )
        return cls(
            kind="all",
            target=SPEEDRUN_TARGET,
            base_url=base_url,
            timestamp=ts,
            passed=result.passed,
            passed_count=result.passed_count,
            failed_count=result.failed_count,
            total_time_ms=result.total_time_ms,
            payload=result.to_dict(),
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "target": self.target,
            "base_url": self.base_url,
            "timestamp": self.timestamp,
            "passed": self.passed,
            "passed_count": self.passed_count,
            "failed_count": self.failed_count,
            "total_time_ms": self.total_time_ms,
            "payload": self.payload,
        }

    @classmethod
    def from_dict(cls, d: dict) -> RunRecord:
        return cls(
            kind=d.get("kind", ""),
            target=d.get("target", ""),
            base_url=d.get("base_url", ""),
            timestamp=d.get("timestamp", ""),
            passed=d.get("passed", False),
            passed_count=d.get("passed_count", 0),
            failed_count=d.get("failed_count", 0),
            total_time_ms=d.get("total_time_ms", 0),
            payload=d.get("payload", {}),
        )

    def run_dir(self, root: Optional[Path] = None) -> Path:
        return (root or results_root()) / self.kind / _target_slug(self.target) / self.timestamp

    def save(self, root: Optional[Path] = None) -> Path:
        """Write record.json and return its directory.

        A second run of the same target within one second gets a ``-2``,
        ``-3``... suffix on its timestamp instead of overwriting the first.
        """
        base_ts = self.timestamp
        run_dir = self.run_dir(root)
        n = 1
        while run_dir.exists():
            n += 1
            self.timestamp = f"{base_ts}-{n}"
            run_dir = self.run_dir(root)
        run_dir.mkdir(parents=True)
        (run_dir / "record.json").write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return run_dir

    @classmethod
    def load(cls, run_dir: Path) -> Optional[RunRecord]:
        """Load record.json from a run directory."""
        p = run_dir / "record.json"
        if not p.exists():
            return None
        try:
            return cls.from_dict(json.loads(p.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError):
            return None


def save_result(result: AnyResult, base_url: str, root: Optional[Path] = None) -> RunRecord:
    """Store an engine result and return the record written."""
    record = RunRecord.from_result(result, base_url)
    record.save(root)
    return record


def load_records(kind: Optional[str] = None, root: Optional[Path] = None) -> list[RunRecord]:
    """Load every stored record (optionally of one kind), oldest first."""
    base = root or results_root()
    kinds = [kind] if kind else list(KINDS)
    records: list[RunRecord] = []
    for k in kinds:
        kind_dir = base / k
        if not kind_dir.is_dir():
            continue
        for target_dir in kind_dir.iterdir():
            if not target_dir.is_dir():
                continue
            for run_dir in target_dir.iterdir():
                record = RunRecord.load(run_dir)
                if record:
                    records.append(record)
    records.sort(key=lambda r: r.timestamp)
    return records


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------

@dataclass
class LevelProgress:
    level: LevelInfo
    status: str
    last_run: Optional[str] = None


@dataclass
class Progress:
    """Curriculum progress derived from stored level and speed-run records."""

    levels: list[LevelProgress] = field(default_factory=list)
    best_speedrun_ms: Optional[int] = None

    @property
    def total_completed(self) -> int:
        return sum(1 for lp in self.levels if lp.status == "completed")

    @property
    def completion_percentage(self) -> int:
        if not self.levels:
            return 0
        return round(self.total_completed / len(self.levels) * 100)

    @property
    def current_level(self) -> Optional[LevelInfo]:
        """First level not yet completed."""
        for lp in self.levels:
            if lp.status != "completed":
                return lp.level
        return None


def load_progress(root: Optional[Path] = None, levels: Optional[list[LevelInfo]] = None) -> Progress:
    """Derive per-level status and best speed-run time.

    A level is 'completed' once any stored run of it passed. The level after
    a completed one (and level 0) is 'available'; the rest are 'locked'.
    """
    catalogue = levels if levels is not None else list_levels()
    level_records = load_records("level", root)

    completed: set[str] = set()
    last_run: dict[str, str] = {}
    for r in level_records:
        last_run[r.target] = r.timestamp  # last one wins since sorted by time
        if r.passed:
            completed.add(r.target)

    progress = Progress()
    previous_done = True
    for level in catalogue:
        if level.id in completed:
            status = "completed"
        elif previous_done:
            status = "available"
        else:
            status = "locked"
        progress.levels.append(LevelProgress(level=level, status=status, last_run=last_run.get(level.id)))
        previous_done = status == "completed"

    clean_runs = [r.total_time_ms for r in load_records("all", root) if r.passed and r.failed_count == 0]
    if clean_runs:
        progress.best_speedrun_ms = min(clean_runs)
    return progress


# ---------------------------------------------------------------------------
# Notes system
# ---------------------------------------------------------------------------

def _notes_path(root: Optional[Path] = None) -> Path:
    """notes.md sits beside the kind directories in the results root."""
    return (root or results_root()) / "notes.md"


def _parse_note(line: str) -> Optional[tuple[str, str]]:
    line = line.strip()
    if line.startswith("#"):
        return None
    ts, sep, text = line.partition(": ")
    if not sep or not ts.strip():
        return None
    return ts.strip(), text.strip()


def load_notes(root: Optional[Path] = None) -> dict[str, str]:
    """Map run timestamps (as stored in record.json) to their note.

    A later note for the same run replaces an earlier one.
    """
    path = _notes_path(root)
    if not path.is_file():
        return {}
    notes: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_note(line)
        if parsed:
            notes[parsed[0]] = parsed[1]
    return notes


def save_note(timestamp: str, text: str, root: Optional[Path] = None) -> None:
    """Attach a note to a stored run; shown in the RESULTS.md Notes column."""
    path = _notes_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(f"{timestamp}: {text}\n")
