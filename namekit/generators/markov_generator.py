#!/usr/bin/env python3
"""
Markov Word Generator
=====================
Builds fresh words one character at a time from a trained ChainModel.

The loop keeps a single candidate and restarts it from scratch whenever it
grows past ``max_length``, ends before ``min_length``, or ends as a word the
model was trained on.
"""

import logging
import random
from typing import Optional

from namekit.chain import END, ChainModel
from namekit.rng import resolve_rng
from .base_generator import (
    FROM_CONFIG,
    GenerationConfig,
    GenerationExhausted,
    RestartBudget,
    check_bounds,
)

logger = logging.getLogger(__name__)


def generate(model: ChainModel,
             min_length: int,
             max_length: int,
             rng: Optional[random.Random] = None,
             max_restarts=FROM_CONFIG) -> str:
    """
    Generate a single word.

    Args:
        model: Trained chain model
        min_length: Minimum word length
        max_length: Maximum word length
        rng: Random source (default: the shared process generator)
        max_restarts: Restart cap (default: generation.max_restarts, None = no cap)

    Returns:
        A word of ``min_length``..``max_length`` characters not in the corpus

    Raises:
        GenerationExhausted: If the restart cap is hit
    """
    check_bounds(min_length, max_length)
    rng = resolve_rng(rng)
    budget = RestartBudget(max_restarts, min_length, max_length)

    word = ""
    while True:
        next_char = model.sample(word, rng)
        restarted = False

        # Too long: start over before looking at what came next
        if len(word) + 1 > max_length:
            word = ""
            budget.spend()
            restarted = True

        if next_char is END:
            if len(word) < min_length:
                # Already counted when the over-length word was dropped
                if not restarted:
                    budget.spend()
                word = ""
                continue

            if model.contains_training_word(word):
                word = ""
                budget.spend()
                continue

            break

        word += next_char

    logger.debug("Generated %r after %d restarts", word, budget.restarts)
    return word.strip()


def generate_batch(model: ChainModel,
                   count: int,
                   config: Optional[GenerationConfig] = None,
                   rng: Optional[random.Random] = None) -> list[str]:
    """
    Generate up to ``count`` distinct words.

    Stops after ``count * config.batch_attempt_factor`` calls; an exhausted
    call counts as an attempt and is skipped.
    """
    if config is None:
        config = GenerationConfig()
    rng = resolve_rng(rng)

    results = []
    seen = set()
    attempts = 0
    max_attempts = count * config.batch_attempt_factor

    while len(results) < count and attempts < max_attempts:
        attempts += 1
        try:
            word = generate(model, config.min_length, config.max_length,
                            rng=rng, max_restarts=config.max_restarts)
        except GenerationExhausted as e:
            logger.debug("Batch attempt %d failed: %s", attempts, e)
            continue

        if word not in seen:
            seen.add(word)
            results.append(word)

    if len(results) < count:
        logger.warning("Generated %d of %d requested words in %d attempts",
                       len(results), count, attempts)
    return results


__all__ = ["generate", "generate_batch"]
