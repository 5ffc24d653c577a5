#!/usr/bin/env python3
"""
Word Mutator
============
Produces variants of one source word instead of the whole corpus.

A random-length prefix of the source word (the seed) is kept and the tail is
regrown through the chain model. Every restart goes back to the seed, so the
result always starts with it.

Example:
    mutate(model, "dragon", 3, 10, min_random_chars=2)
    # seed is one of "dr", "dra", "drag", "drago"; result e.g. "dragmir"

An empty string means no mutation could be produced from the chosen seed.
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


def pick_seed(source_word: str,
              min_random_chars: int = 1,
              rng: Optional[random.Random] = None) -> str:
    """
    Take a random-length prefix of ``source_word``.

    The prefix is at least ``min_random_chars`` long and normally one
    character short of the full word. ``min_random_chars`` equal to the word
    length keeps the whole word; anything longer is clamped to one short.
    """
    if not source_word or not source_word.strip():
        raise ValueError("source_word must not be empty")
    if min_random_chars < 1:
        raise ValueError(f"min_random_chars must be at least 1, got {min_random_chars}")

    source_word = source_word.strip().lower()
    if min_random_chars > len(source_word):
        min_random_chars = len(source_word) - 1
    longest = max(min_random_chars, len(source_word) - 1)

    length = resolve_rng(rng).randint(min_random_chars, longest)
    return source_word[:length]


def mutate(model: ChainModel,
           source_word: str,
           min_length: int,
           max_length: int,
           min_random_chars: int = 1,
           rng: Optional[random.Random] = None,
           max_restarts=FROM_CONFIG) -> str:
    """
    Grow a new word from a prefix of ``source_word``.

    Args:
        model: Trained chain model
        source_word: Word to take the prefix from
        min_length: Minimum word length
        max_length: Maximum word length
        min_random_chars: Minimum prefix length kept from the source
        rng: Random source (default: the shared process generator)
        max_restarts: Restart cap (default: generation.max_restarts, None = no cap)

    Returns:
        The mutated word, or "" if the seed is a dead end

    Raises:
        GenerationExhausted: If the restart cap is hit
    """
    check_bounds(min_length, max_length)
    rng = resolve_rng(rng)
    seed = pick_seed(source_word, min_random_chars, rng)
    budget = RestartBudget(max_restarts, min_length, max_length)

    word = seed
    while True:
        if len(word) + 1 > max_length:
            # Restarting would only reproduce the seed
            if word == seed:
                logger.debug("Seed %r cannot grow within %d chars", seed, max_length)
                return ""
            word = seed
            budget.spend()
            continue

        # Nothing can follow and the word cannot legally end here
        if not model.has_options(word):
            logger.debug("Dead end at %r (seed %r)", word, seed)
            return ""

        next_char = model.sample(word, rng)

        if next_char is END:
            if len(word) < min_length:
                if word == seed:
                    logger.debug("Seed %r ends before %d chars", seed, min_length)
                    return ""
                word = seed
                budget.spend()
                continue

            if model.contains_training_word(word):
                word = seed
                budget.spend()
                continue

            break

        word += next_char

    logger.debug("Mutated %r -> %r after %d restarts", source_word, word, budget.restarts)
    return word.strip()


def mutate_batch(model: ChainModel,
                 source_word: str,
                 count: int,
                 config: Optional[GenerationConfig] = None,
                 rng: Optional[random.Random] = None) -> list[str]:
    """
    Mutate ``source_word`` up to ``count`` times, keeping distinct results.

    Empty results and exhausted calls count as attempts.
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
            word = mutate(model, source_word, config.min_length, config.max_length,
                          config.min_random_chars, rng=rng,
                          max_restarts=config.max_restarts)
        except GenerationExhausted as e:
            logger.debug("Mutation attempt %d failed: %s", attempts, e)
            continue

        if word and word not in seen:
            seen.add(word)
            results.append(word)

    if len(results) < count:
        logger.warning("Produced %d of %d requested mutations of %r in %d attempts",
                       len(results), count, source_word, attempts)
    return results


__all__ = ["pick_seed", "mutate", "mutate_batch"]
