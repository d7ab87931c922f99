"""Level discovery and loading for musclememory.

Each level is a module in musclememory/levels/ named ``lNN_<slug>.py`` and
defining:
    ID              — level identifier, e.g. 'l0-server'
    NUMBER          — position in the curriculum
    TITLE, DESCRIPTION, DIFFICULTY, ESTIMATED_TIME
    CHECKS          — ordered list of check dicts (id, name, method, path,
                      expected_status, optional body and headers,
                      description)
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from musclememory.models import EndpointSpec, HttpMethod, LevelSpec


@dataclass
class LevelCheck:
    """One verification check belonging to a level."""

    id: str
    name: str
    spec: EndpointSpec
    description: str = ""


@dataclass
class LevelInfo:
    """Metadata about a discovered level."""

    id: str
    number: int
    title: str
    description: str
    difficulty: str
    estimated_time: str
    checks: list[LevelCheck] = field(default_factory=list)

    def to_level_spec(self) -> LevelSpec:
        return LevelSpec(level_id=self.id, endpoints=[c.spec for c in self.checks])


def _levels_root() -> Path:
    """Absolute path to the levels/ directory."""
    return Path(__file__).parent


def _build_check(raw: dict[str, Any]) -> LevelCheck:
    return LevelCheck(
        id=raw["id"],
        name=raw["name"],
        description=raw.get("description", ""),
        spec=EndpointSpec(
            method=HttpMethod(raw["method"]),
            path=raw["path"],
            expected_status=raw.get("expected_status"),
            body=raw.get("body"),
            headers=raw.get("headers"),
        ),
    )


def _load_module(module_name: str) -> Optional[LevelInfo]:
    try:
        mod = importlib.import_module(f"musclememory.levels.{module_name}")
    except ImportError:
        return None

    level_id = getattr(mod, "ID", None)
    if not level_id:
        return None

    return LevelInfo(
        id=level_id,
        number=getattr(mod, "NUMBER", 0),
        title=getattr(mod, "TITLE", level_id),
        description=getattr(mod, "DESCRIPTION", ""),
        difficulty=getattr(mod, "DIFFICULTY", ""),
        estimated_time=getattr(mod, "ESTIMATED_TIME", ""),
        checks=[_build_check(c) for c in getattr(mod, "CHECKS", [])],
    )


def list_levels() -> list[LevelInfo]:
    """Discover all levels, ordered by curriculum number."""
    levels = []
    for child in _levels_root().glob("l*.py"):
        info = _load_module(child.stem)
        if info:
            levels.append(info)
    levels.sort(key=lambda level: level.number)
    return levels


def load_level(level_id: str) -> Optional[LevelInfo]:
    """Load a single level by its ID (e.g. 'l1-crud').

    Returns:
        LevelInfo if a level module declares that ID, None otherwise.
    """
    for level in list_levels():
        if level.id == level_id:
            return level
    return None
