"""musclememory — endpoint verification for Backend Muscle Memory.

Point it at a learner-built backend and it walks the level checks: sends each
declared HTTP request, compares status codes, validates response shapes, and
reports pass/fail per level with timing.

Usage:
    python -m musclememory levels                    # Show levels
    python -m musclememory level l0-server           # Verify one level
    python -m musclememory all --url http://localhost:3001
"""

from musclememory.engine import VerificationEngine

__all__ = ["VerificationEngine"]
