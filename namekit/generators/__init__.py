#!/usr/bin/env python3
"""
Word Generators
===============
Provides two generation strategies over a trained ChainModel:
- Markov: fresh words sampled from the whole corpus
- Mutator: variants regrown from a prefix of one source word
"""

from .base_generator import (
    FROM_CONFIG,
    GenerationConfig,
    GenerationExhausted,
    RestartBudget,
)
from .markov_generator import (
    generate,
    generate_batch,
)
from .mutator import (
    pick_seed,
    mutate,
    mutate_batch,
)

__all__ = [
    "FROM_CONFIG",
    "GenerationConfig",
    "GenerationExhausted",
    "RestartBudget",
    "generate",
    "generate_batch",
    "pick_seed",
    "mutate",
    "mutate_batch",
]
