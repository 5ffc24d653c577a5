#!/usr/bin/env python3
"""
namekit - Markov Word Generator
===============================

Invents pronounceable words in the style of a training corpus by learning
character transitions and sampling new sequences from them.

Quick Start
-----------
    from namekit import NameKit

    kit = NameKit.from_categories(["elven"])

    # Fresh words
    words = kit.generate(count=10)

    # Variants of one word
    variants = kit.mutate("Elandor", count=5)

Modules
-------
    namekit.chain      - Chain model, sampling, persistence
    namekit.generators - Fresh generation and mutation
    namekit.corpus     - Text splitting and built-in corpora
    namekit.settings   - app.yaml settings

CLI Usage
---------
    python -m namekit generate -n 10 --category norse
    python -m namekit mutate Thorgar -n 5
    python -m namekit train --corpus names.txt -o model.json
"""

__version__ = "0.2.0"
__author__ = "namekit"

import logging
import random
from typing import Iterable, Optional

from .chain import END, ChainModel, WeightedChoices, load_model, save_model
from .corpus import (
    COMMON_DELIMITERS,
    TRAINING_CORPUS,
    get_corpus,
    list_categories,
    load_corpus,
    split_words,
)
from .generators import (
    GenerationConfig,
    GenerationExhausted,
    generate,
    generate_batch,
    mutate,
    mutate_batch,
)
from .rng import get_rng, seed_rng
from .settings import get_setting

logger = logging.getLogger(__name__)


class NameKit:
    """
    A trained model plus generation defaults.

    Example:
        kit = NameKit(order=3)
        kit.train(["aldric", "brannoc", "caelith"])
        kit.generate(count=5)
    """

    def __init__(self,
                 model: Optional[ChainModel] = None,
                 order: Optional[int] = None,
                 config: Optional[GenerationConfig] = None,
                 rng: Optional[random.Random] = None):
        if model is None:
            if order is None:
                order = get_setting("model.order")
            if order is None:
                raise ValueError("model.order must be set in app.yaml")
            model = ChainModel(order)
        self.model = model
        self.config = config or GenerationConfig()
        self.rng = rng

    @classmethod
    def from_categories(cls, categories: Optional[Iterable[str]] = None, **kwargs) -> 'NameKit':
        """Build a kit trained on built-in corpora."""
        kit = cls(**kwargs)
        kit.train(get_corpus(categories))
        return kit

    @classmethod
    def from_file(cls, path, delimiters: Optional[str] = None, **kwargs) -> 'NameKit':
        """Build a kit trained on a text file."""
        if delimiters is None:
            delimiters = get_setting("model.delimiters", COMMON_DELIMITERS)
        kit = cls(**kwargs)
        kit.train(load_corpus(path, delimiters))
        return kit

    @classmethod
    def load(cls, path, **kwargs) -> 'NameKit':
        """Build a kit around a saved model."""
        return cls(model=load_model(path), **kwargs)

    def train(self, words: Iterable[str]) -> int:
        return self.model.ingest_many(words)

    def save(self, path) -> None:
        save_model(self.model, path)

    def generate(self, count: int = 1) -> list[str]:
        """Generate up to ``count`` distinct words."""
        return generate_batch(self.model, count, self.config, rng=self.rng)

    def generate_one(self) -> str:
        """Generate a single word (raises GenerationExhausted on failure)."""
        return generate(self.model, self.config.min_length, self.config.max_length,
                        rng=self.rng, max_restarts=self.config.max_restarts)

    def mutate(self, word: str, count: int = 1) -> list[str]:
        """Produce up to ``count`` distinct variants of ``word``."""
        return mutate_batch(self.model, word, count, self.config, rng=self.rng)


__all__ = [
    "__version__",
    "NameKit",
    # Core
    "END",
    "ChainModel",
    "WeightedChoices",
    "generate",
    "generate_batch",
    "mutate",
    "mutate_batch",
    "GenerationConfig",
    "GenerationExhausted",
    # Persistence
    "save_model",
    "load_model",
    # Corpus
    "COMMON_DELIMITERS",
    "TRAINING_CORPUS",
    "get_corpus",
    "list_categories",
    "load_corpus",
    "split_words",
    # Random source
    "get_rng",
    "seed_rng",
]
