#!/usr/bin/env python3
"""
Training Corpora
================
Turns raw text into training words and ships a few built-in name sets.

Raw text is lowercased, delimiter characters become spaces, anything outside
``a-z`` is dropped, and the remainder is split on whitespace.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

COMMON_DELIMITERS = " !.,-'\r\n\t"

LEGAL_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz ")


# =============================================================================
# BUILT-IN CORPORA
# =============================================================================

# Invented names grouped by naming style
TRAINING_CORPUS = {
    'fantasy': [
        'Aldric', 'Brannoc', 'Caelith', 'Dorran', 'Elowen',
        'Fenwick', 'Garrick', 'Halvard', 'Isolde', 'Jorvan',
        'Kestrel', 'Lorcan', 'Maelis', 'Norrin', 'Orrin',
        'Perrin', 'Quillon', 'Rowan', 'Seraphine', 'Tamsin',
        'Ulric', 'Vesper', 'Wendell', 'Yorick', 'Zarek',
        'Ardent', 'Bellamy', 'Corwin', 'Daelin', 'Eldric',
        'Faelan', 'Gideon', 'Haldor', 'Ivor', 'Jareth',
        'Kaelen', 'Leoric', 'Merrick', 'Nyssa', 'Osric',
    ],

    'elven': [
        'Aelindra', 'Caladrel', 'Elandor', 'Faelinor', 'Galadhel',
        'Ilythra', 'Lathirel', 'Melisande', 'Nimriel', 'Orophin',
        'Sylvaren', 'Thalanil', 'Vaelora', 'Yavandis', 'Aerendil',
        'Celebrin', 'Elenwe', 'Finarel', 'Ithilwen', 'Laurien',
        'Miriel', 'Narwen', 'Rilian', 'Tinuvel', 'Varandel',
    ],

    'dwarven': [
        'Balgrim', 'Durnak', 'Thrain', 'Grundor', 'Harbek',
        'Korgan', 'Morgrim', 'Orsik', 'Rurik', 'Thorgar',
        'Ulfgar', 'Vondal', 'Brokk', 'Dolgrin', 'Gimbar',
        'Hrodgar', 'Kazbur', 'Norgrim', 'Storn', 'Tordek',
    ],

    'norse': [
        'Asgeir', 'Bjornar', 'Dagny', 'Eirik', 'Frodi',
        'Gunnhild', 'Halfdan', 'Ingrid', 'Jorund', 'Ketil',
        'Leif', 'Njal', 'Olvir', 'Ragnhild', 'Sigrun',
        'Torvald', 'Ulfhild', 'Vigdis', 'Yngvar', 'Arnbjorg',
    ],
}


def list_categories() -> list[str]:
    return sorted(TRAINING_CORPUS)


def get_corpus(categories: Optional[Iterable[str]] = None) -> list[str]:
    """
    Get built-in training words.

    Args:
        categories: Corpus names to include (default: all)

    Raises:
        ValueError: If a category is unknown
    """
    if categories is None:
        categories = list_categories()

    words = []
    for category in categories:
        names = TRAINING_CORPUS.get(category)
        if names is None:
            available = ', '.join(list_categories())
            raise ValueError(
                f"Unknown corpus '{category}'. Available corpora: {available}"
            )
        words.extend(name.lower() for name in names)
    return words


# =============================================================================
# TEXT SPLITTING
# =============================================================================

def split_words(text: str, delimiters: str = COMMON_DELIMITERS) -> list[str]:
    """Split raw text into lowercase training words."""
    text = text.lower()

    for delim in delimiters:
        text = text.replace(delim, ' ')

    text = ''.join(c for c in text if c in LEGAL_CHARS)
    return text.split()


def load_corpus(path, delimiters: str = COMMON_DELIMITERS) -> list[str]:
    """Read a text file and split it into training words."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus file not found: {path}")

    words = split_words(path.read_text(encoding='utf-8'), delimiters)
    logger.info("Loaded %d words from %s", len(words), path)
    return words


__all__ = [
    "COMMON_DELIMITERS",
    "TRAINING_CORPUS",
    "list_categories",
    "get_corpus",
    "split_words",
    "load_corpus",
]
