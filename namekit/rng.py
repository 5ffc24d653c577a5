#!/usr/bin/env python3
"""
Shared Random Source
====================
One pseudo-random generator per process, seeded once.

Every sampling call in namekit draws from the generator returned by
``get_rng()`` unless the caller passes its own ``random.Random``. Seeding
happens on first use, from ``random.seed`` in app.yaml or, when that is null,
from OS entropy. Tests and the CLI ``--seed`` flag call ``seed_rng`` to get
reproducible output.
"""

import random
from typing import Optional

from namekit.settings import get_setting


_rng: Optional[random.Random] = None


def get_rng() -> random.Random:
    """Get the process-wide random generator, creating it on first use."""
    global _rng
    if _rng is None:
        _rng = random.Random(get_setting("random.seed"))
    return _rng


def seed_rng(seed=None) -> random.Random:
    """Re-seed the process-wide generator (``None`` means OS entropy)."""
    rng = get_rng()
    rng.seed(seed)
    return rng


def resolve_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Return ``rng`` if given, otherwise the shared generator."""
    return rng if rng is not None else get_rng()


__all__ = ["get_rng", "seed_rng", "resolve_rng"]
