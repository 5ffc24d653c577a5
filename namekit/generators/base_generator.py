#!/usr/bin/env python3
"""
Generation Policies
===================
Shared pieces of the generate and mutate loops:
- GenerationConfig: defaults from app.yaml
- GenerationExhausted: raised when a loop runs out of restarts
- RestartBudget: counts restarts and enforces the cap
- check_bounds: argument validation common to both loops

Both loops retry until the model produces an in-range word that is not in
the training set. A model that never produces such a word would keep them
retrying forever, so each call is capped at ``generation.max_restarts``
restarts (null in app.yaml removes the cap).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from namekit.settings import get_setting

logger = logging.getLogger(__name__)


class _FromConfig:
    def __repr__(self) -> str:
        return "FROM_CONFIG"


# Default for ``max_restarts`` arguments: read generation.max_restarts
FROM_CONFIG = _FromConfig()


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class GenerationConfig:
    """Defaults for generation and mutation."""
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_random_chars: Optional[int] = None
    batch_attempt_factor: Optional[int] = None
    max_restarts: object = FROM_CONFIG     # None = unbounded

    def __post_init__(self):
        cfg = get_setting("generation", {}) or {}
        if self.min_length is None:
            self.min_length = cfg.get("min_length")
        if self.max_length is None:
            self.max_length = cfg.get("max_length")
        if self.min_random_chars is None:
            self.min_random_chars = cfg.get("min_random_chars")
        if self.batch_attempt_factor is None:
            self.batch_attempt_factor = cfg.get("batch_attempt_factor")
        if self.max_restarts is FROM_CONFIG:
            self.max_restarts = cfg.get("max_restarts")

        missing = [
            name for name, value in (
                ("min_length", self.min_length),
                ("max_length", self.max_length),
                ("min_random_chars", self.min_random_chars),
                ("batch_attempt_factor", self.batch_attempt_factor),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"generation settings missing in app.yaml: {', '.join(missing)}")

        check_bounds(self.min_length, self.max_length)


# =============================================================================
# Errors & Budgets
# =============================================================================

class GenerationExhausted(RuntimeError):
    """No acceptable word was found within the restart budget."""

    def __init__(self, restarts: int, min_length: int, max_length: int):
        self.restarts = restarts
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(
            f"No word of length {min_length}-{max_length} outside the training "
            f"set after {restarts} restarts"
        )


class RestartBudget:
    """
    Restart counter for one generate/mutate call.

    Each discarded candidate costs one restart, whatever the reason it was
    dropped for.

    Usage:
        budget = RestartBudget(100, min_length=4, max_length=8)
        budget.spend()   # raises GenerationExhausted on restart 101
    """

    def __init__(self, limit, min_length: int, max_length: int):
        if limit is FROM_CONFIG:
            limit = get_setting("generation.max_restarts")
        if limit is not None and limit < 0:
            raise ValueError("max_restarts must be >= 0 or None")
        self.limit = limit
        self.min_length = min_length
        self.max_length = max_length
        self.restarts = 0

    def spend(self) -> None:
        self.restarts += 1
        if self.limit is not None and self.restarts > self.limit:
            logger.warning("Gave up after %d restarts (length %d-%d)",
                           self.limit, self.min_length, self.max_length)
            raise GenerationExhausted(self.limit, self.min_length, self.max_length)


def check_bounds(min_length: int, max_length: int) -> None:
    """Reject length bounds no word could satisfy."""
    if min_length < 1:
        raise ValueError(f"min_length must be at least 1, got {min_length}")
    if max_length < min_length:
        raise ValueError(
            f"max_length ({max_length}) must be >= min_length ({min_length})"
        )


__all__ = [
    "FROM_CONFIG",
    "GenerationConfig",
    "GenerationExhausted",
    "RestartBudget",
    "check_bounds",
]
