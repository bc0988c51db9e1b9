"""
Key Square — the 5x5 Playfair grid
==================================
The key square holds the 25-letter cipher alphabet (A–Z with one letter
merged into another, I/J by default) laid out row-major. The secret
phrase goes in first, duplicates dropped, then the unused alphabet
letters follow in natural order:

    phrase "PLAYFAIREXAMPLE"        P L A Y F
                                    I R E X M
                                    B C D G H
                                    K N O Q S
                                    T U V W Z

Once built the square never changes, so one instance can be shared by
any number of engines or threads.
"""

import enum
import hashlib
import logging
from collections import namedtuple
from typing import Iterable, Optional, Tuple

from .errors import ConfigError, DegeneratePairError, LookupInconsistency

logger = logging.getLogger(__name__)


Position = namedtuple("Position", ["row", "column"])


class PairGeometry(enum.Enum):
    """How two distinct cells of the square relate to each other."""

    SAME_ROW    = "row"
    SAME_COLUMN = "column"
    RECTANGLE   = "rectangle"


class KeySquare:
    """Immutable 5x5 key square built from a secret phrase."""

    SIZE          = 5
    BASE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    MERGE         = ("J", "I")   # (dropped, kept)
    ASCII_LETTERS = BASE_ALPHABET + BASE_ALPHABET.lower()

    def __init__(self, phrase: str = "", merge: Optional[Tuple[str, str]] = None):
        """
        Build the square from `phrase`.

        merge : (dropped, kept) letter pair; `dropped` is removed from the
                alphabet and rewritten to `kept` everywhere.

        Raises ConfigError if the phrase contains anything but alphabet
        letters and whitespace, or if the merge pair is invalid.
        """
        self._merge    = self._check_merge(merge or self.MERGE)
        self._alphabet = "".join(c for c in self.BASE_ALPHABET
                                 if c != self._merge[0])

        seen = []
        for ch in self._normalize_phrase(phrase) + self._alphabet:
            if ch not in seen:
                seen.append(ch)

        size = self.SIZE * self.SIZE
        if len(seen) != size or set(seen) != set(self._alphabet):
            stray = "".join(c for c in seen if c not in self._alphabet)
            raise ConfigError(
                f"Phrase yields invalid alphabet coverage: {len(seen)} unique "
                f"symbols, expected {size}"
                + (f" (not in alphabet: {stray!r})" if stray else "")
            )

        self._letters = "".join(seen)
        self._rows = tuple(
            tuple(self._letters[r * self.SIZE:(r + 1) * self.SIZE])
            for r in range(self.SIZE)
        )
        self._index = {
            letter: Position(i // self.SIZE, i % self.SIZE)
            for i, letter in enumerate(self._letters)
        }
        logger.info(f"KeySquare built | merge={self._merge[0]}->{self._merge[1]} "
                    f"fingerprint={self.fingerprint()[:12]}")

    @classmethod
    def from_letters(cls, letters: Iterable[str],
                     merge: Optional[Tuple[str, str]] = None) -> "KeySquare":
        """
        Lay an explicit sequence of 25 distinct alphabet letters into the
        grid, row-major, e.g. "ABCDEFGHIJKLMNOPQRSTUVXYZ" with merge ("W", "V").
        """
        merge = cls._check_merge(merge or cls.MERGE)
        text  = "".join("".join(letters).split())
        text  = "".join(c.upper() if c in cls.ASCII_LETTERS else c for c in text)
        text  = text.replace(merge[0], merge[1])
        size  = cls.SIZE * cls.SIZE
        if len(text) != size or len(set(text)) != size:
            raise ConfigError(
                f"Expected {size} distinct letters, got {len(text)} "
                f"({len(set(text))} distinct)."
            )
        return cls(text, merge)

    # ── read-only views ─────────────────────────────────────────────────────

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return self._rows

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def merge(self) -> Tuple[str, str]:
        return self._merge

    # ── queries ─────────────────────────────────────────────────────────────

    def normalize(self, letter: str) -> str:
        """Uppercase one ASCII letter and apply the merge; others pass through."""
        if len(letter) != 1 or letter not in self.ASCII_LETTERS:
            return letter
        letter = letter.upper()
        return self._merge[1] if letter == self._merge[0] else letter

    def locate(self, letter: str) -> Position:
        """Return the (row, column) of `letter`."""
        try:
            return self._index[self.normalize(letter)]
        except KeyError:
            raise LookupInconsistency(
                f"{letter!r} is not on the key square; "
                f"input was not filtered to the cipher alphabet."
            ) from None

    def letter_at(self, row: int, column: int) -> str:
        if not (0 <= row < self.SIZE and 0 <= column < self.SIZE):
            raise IndexError(f"Cell ({row}, {column}) is outside the "
                             f"{self.SIZE}x{self.SIZE} square.")
        return self._rows[row][column]

    def classify(self, pos_a: Position, pos_b: Position) -> PairGeometry:
        """Column is checked before row; coinciding cells are rejected."""
        if pos_a == pos_b:
            raise DegeneratePairError(
                f"Both letters sit on cell {tuple(pos_a)}; "
                f"a digraph needs two distinct letters."
            )
        if pos_a[1] == pos_b[1]:
            return PairGeometry.SAME_COLUMN
        if pos_a[0] == pos_b[0]:
            return PairGeometry.SAME_ROW
        return PairGeometry.RECTANGLE

    def fingerprint(self) -> str:
        """SHA-256 over merge + grid; equal squares give equal fingerprints."""
        seed = f"{self._merge[0]}{self._merge[1]}:{self._letters}".encode()
        return hashlib.sha256(seed).hexdigest()

    # ── helpers ─────────────────────────────────────────────────────────────

    @classmethod
    def _check_merge(cls, merge) -> Tuple[str, str]:
        try:
            dropped, kept = (m.upper() for m in merge)
        except (TypeError, ValueError, AttributeError):
            raise ConfigError(f"Merge must be a (dropped, kept) letter pair, "
                              f"got {merge!r}.") from None
        if (len(dropped) != 1 or len(kept) != 1 or dropped == kept
                or dropped not in cls.BASE_ALPHABET
                or kept not in cls.BASE_ALPHABET
                or any(m not in cls.ASCII_LETTERS for m in merge)):
            raise ConfigError(f"Merge must name two distinct letters A-Z, "
                              f"got {merge!r}.")
        return dropped, kept

    def _normalize_phrase(self, phrase: str) -> str:
        return "".join(self.normalize(c) for c in "".join(phrase.split()))

    # ── dunder ──────────────────────────────────────────────────────────────

    def __contains__(self, letter) -> bool:
        return isinstance(letter, str) and self.normalize(letter) in self._index

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeySquare):
            return NotImplemented
        return (self._letters, self._merge) == (other._letters, other._merge)

    def __hash__(self) -> int:
        return hash((self._letters, self._merge))

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self._rows)

    def __repr__(self):
        return f"KeySquare({self._letters!r}, merge={self._merge!r})"
