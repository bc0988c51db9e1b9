"""
playfair_crypto — Playfair digraph substitution cipher
======================================================
A 5x5 key square built from a secret phrase, and an engine that
encodes / decodes letter pairs by their geometry on the square.

Modules:
    square   KeySquare — phrase → 25-letter grid, lookups, pair geometry
    engine   CipherEngine — digest text into digraphs, encode, decode
    errors   ConfigError, LookupInconsistency, DegeneratePairError, ...

Not modern-secure. Classical cipher for teaching and puzzles.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import (ConfigError, DegeneratePairError, LookupInconsistency,
                     NotDigestedError, PlayfairError)
from .square import KeySquare, PairGeometry, Position
from .engine import CipherEngine, Direction

__all__ = [
    "KeySquare",
    "PairGeometry",
    "Position",
    "CipherEngine",
    "Direction",
    "PlayfairError",
    "ConfigError",
    "LookupInconsistency",
    "DegeneratePairError",
    "NotDigestedError",
]
