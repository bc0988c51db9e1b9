"""
Errors
======
Every failure the cipher can report. Each class also derives from the
builtin the rest of the package would raise for the same situation, so
callers catching ValueError / RuntimeError / LookupError keep working.

    ConfigError          bad phrase, letter sequence, merge or filler
    LookupInconsistency  symbol that is not on the key square
    DegeneratePairError  both letters of a digraph on the same cell
    NotDigestedError     encode/decode called before digest
"""


class PlayfairError(Exception):
    """Base class for all Playfair errors."""


class ConfigError(PlayfairError, ValueError):
    """Key material or engine options cannot produce a valid 5x5 square."""


class LookupInconsistency(PlayfairError, LookupError):
    """A symbol outside the 25-letter alphabet reached a square lookup."""


class DegeneratePairError(PlayfairError, ValueError):
    """A digraph whose two letters occupy the same grid position."""


class NotDigestedError(PlayfairError, RuntimeError):
    """The engine holds no digested message yet."""
