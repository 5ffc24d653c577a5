#!/usr/bin/env python3
"""
Character Chain Model
=====================
Weighted character-transition graph learned from a corpus of words.

Each context (the up to ``order`` characters preceding a position) maps to a
weighted set of next symbols. A symbol is either a lowercase character or the
``END`` sentinel, which closes a word.

Lookups shrink the context from the left until a known context is found:

    order=3, context "dragon" -> "gon" -> "on" -> "n" -> END

Usage:
    from namekit.chain import ChainModel, END

    model = ChainModel.train(["ann", "amy"], order=2)
    model.sample("a")          # 'n' or 'm'
    model.sample("xyz")        # END, nothing known about "z"
"""

import json
import logging
import random
from bisect import bisect_right
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Union

from namekit.corpus import COMMON_DELIMITERS, split_words
from namekit.rng import resolve_rng

logger = logging.getLogger(__name__)


class Terminator(Enum):
    """Transition target meaning the word ends here."""
    END = "end"

    def __repr__(self) -> str:
        return "END"


END = Terminator.END

Symbol = Union[str, Terminator]

# JSON object keys must be strings; a real symbol is always one character.
_END_KEY = ""


# =============================================================================
# Weighted Choices
# =============================================================================

class WeightedChoices:
    """
    Next-symbol distribution for one context.

    Symbols and cumulative weights are kept in parallel lists so that a draw
    is a single bisect.
    """

    __slots__ = ("symbols", "cumulative", "_index")

    def __init__(self):
        self.symbols: List[Symbol] = []
        self.cumulative: List[int] = []
        self._index: Dict[Symbol, int] = {}

    def add(self, symbol: Symbol, count: int = 1) -> None:
        """Increase the weight of ``symbol`` by ``count``."""
        if count < 1:
            raise ValueError("count must be positive")
        idx = self._index.get(symbol)
        if idx is None:
            self._index[symbol] = len(self.symbols)
            self.symbols.append(symbol)
            self.cumulative.append(self.total + count)
            return
        for i in range(idx, len(self.cumulative)):
            self.cumulative[i] += count

    @property
    def total(self) -> int:
        return self.cumulative[-1] if self.cumulative else 0

    def weight(self, symbol: Symbol) -> int:
        idx = self._index.get(symbol)
        if idx is None:
            return 0
        previous = self.cumulative[idx - 1] if idx else 0
        return self.cumulative[idx] - previous

    def weights(self) -> Dict[Symbol, int]:
        """Return ``{symbol: weight}`` in insertion order."""
        return {s: self.weight(s) for s in self.symbols}

    def choose(self, rng: random.Random) -> Symbol:
        """Draw a symbol with probability ``weight / total``."""
        if not self.symbols:
            raise IndexError("Cannot choose from an empty distribution")
        r = rng.randrange(self.total)
        return self.symbols[bisect_right(self.cumulative, r)]

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._index

    def __repr__(self) -> str:
        return f"WeightedChoices({self.weights()!r})"


# =============================================================================
# Chain Model
# =============================================================================

class ChainModel:
    """
    Fixed-order character chain with corpus membership.

    The model only grows: ``ingest`` adds transitions and training words,
    nothing removes them.
    """

    def __init__(self, order: int = 2):
        if not isinstance(order, int) or order < 1:
            raise ValueError(f"order must be a positive integer, got {order!r}")
        self._order = order
        self.transitions: Dict[str, WeightedChoices] = {}
        self.training_words: Set[str] = set()

    @property
    def order(self) -> int:
        return self._order

    @classmethod
    def train(cls, words: Iterable[str], order: int = 2) -> 'ChainModel':
        """Build a model of the given order from a sequence of words."""
        model = cls(order)
        model.ingest_many(words)
        return model

    # -------------------------------------------------------------------------
    # Training
    # -------------------------------------------------------------------------

    def ingest(self, word: Optional[str]) -> None:
        """Learn the transitions of a single word."""
        if word is None or not word.strip():
            return

        word = word.strip().lower()
        if word in self.training_words:
            return
        self.training_words.add(word)

        symbols: List[Symbol] = list(word) + [END]
        context = ""
        for symbol in symbols:
            if len(context) > self._order:
                context = context[-self._order:]
            self._add_transition(context, symbol)
            if symbol is not END:
                context += symbol

    def ingest_many(self, words: Iterable[str]) -> int:
        """Ingest every word; returns how many were new."""
        before = len(self.training_words)
        for word in words:
            self.ingest(word)
        added = len(self.training_words) - before
        logger.debug("Ingested %d new words (order=%d, contexts=%d)",
                     added, self._order, len(self.transitions))
        return added

    def ingest_text(self, text: str, delimiters: Optional[str] = None) -> int:
        """Split raw text into words and ingest them."""
        if delimiters is None:
            delimiters = COMMON_DELIMITERS
        return self.ingest_many(split_words(text, delimiters))

    def _add_transition(self, context: str, symbol: Symbol, count: int = 1) -> None:
        choices = self.transitions.get(context)
        if choices is None:
            choices = self.transitions[context] = WeightedChoices()
        choices.add(symbol, count)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _resolve(self, context: str) -> str:
        """Trailing ``order`` characters, shrunk until known or one character long."""
        key = context.lower()
        if len(key) > self._order:
            key = key[-self._order:]
        while len(key) > 1 and not self.transitions.get(key):
            key = key[1:]
        return key

    def sample(self, context: str, rng: Optional[random.Random] = None) -> Symbol:
        """
        Pick the character that follows ``context``.

        Returns ``END`` when no known context remains after shrinking, which
        means the word cannot be extended.
        """
        choices = self.transitions.get(self._resolve(context))
        if not choices:
            return END
        return choices.choose(resolve_rng(rng))

    def has_options(self, context: str) -> bool:
        """True if ``context`` resolves to a non-empty context with transitions."""
        key = self._resolve(context)
        if not key:
            return False
        return bool(self.transitions.get(key))

    def contains_training_word(self, word: Optional[str]) -> bool:
        if word is None:
            return False
        return word.strip().lower() in self.training_words

    def distribution(self, context: str) -> Dict[Symbol, int]:
        """Weights for an exact context (no shrinking); empty if unknown."""
        choices = self.transitions.get(context)
        return choices.weights() if choices else {}

    def __len__(self) -> int:
        return len(self.training_words)

    def __repr__(self) -> str:
        return (f"ChainModel(order={self._order}, words={len(self.training_words)}, "
                f"contexts={len(self.transitions)})")

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize model to dictionary"""
        return {
            'order': self._order,
            'transitions': {
                context: {
                    (_END_KEY if s is END else s): w
                    for s, w in choices.weights().items()
                }
                for context, choices in self.transitions.items()
            },
            'training_words': sorted(self.training_words),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ChainModel':
        """Deserialize model from dictionary"""
        model = cls(order=data['order'])
        for context, weights in data['transitions'].items():
            for key, weight in weights.items():
                symbol = END if key == _END_KEY else key
                model._add_transition(context, symbol, int(weight))
        model.training_words = set(data.get('training_words', []))
        return model


# =============================================================================
# Persistence
# =============================================================================

def save_model(model: ChainModel, filepath) -> None:
    """Save a trained model to a JSON file"""
    Path(filepath).write_text(json.dumps(model.to_dict(), indent=2))
    logger.info("Saved model %r to %s", model, filepath)


def load_model(filepath) -> ChainModel:
    """Load a trained model from a JSON file"""
    data = json.loads(Path(filepath).read_text())
    model = ChainModel.from_dict(data)
    logger.info("Loaded model %r from %s", model, filepath)
    return model


__all__ = [
    "END",
    "Terminator",
    "WeightedChoices",
    "ChainModel",
    "save_model",
    "load_model",
]
