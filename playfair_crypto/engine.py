"""
Cipher Engine — digraph substitution over a KeySquare
=====================================================
Playfair works on letter pairs (digraphs). Each pair is located on the
key square and rewritten according to its geometry:

    same row     shift one column right (encode) / left (decode), wrapping
    same column  shift one row down (encode) / up (decode), wrapping
    rectangle    swap the two columns; its own inverse, so both directions agree

Usage:
    engine = CipherEngine.from_phrase("PLAYFAIREXAMPLE")
    engine.digest("Hide the gold in the tree stump")
    engine.encode()    # -> "BMODZBXDNABEKUDMUIXMMOUVIF"

The engine holds one digested message at a time; a new digest replaces
it. The key square is shared read-only, the digested state is not
thread-safe.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
Broken by hand with digraph frequency analysis; not modern-secure.
"""

import enum
import logging
from typing import List, Optional, Tuple

from .errors import ConfigError, DegeneratePairError, NotDigestedError
from .square import KeySquare, PairGeometry

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]


class Direction(enum.Enum):
    ENCODE = 1
    DECODE = -1


class CipherEngine:
    """Playfair encode / decode bound to one KeySquare."""

    FILLER     = "X"
    ALT_FILLER = "Q"

    def __init__(self, key_square: KeySquare, filler: str = None,
                 alt_filler: str = None, split_repeats: bool = True):
        """
        filler        : pads odd-length input and splits doubled letters
        alt_filler    : used wherever the filler would pair with itself;
                        defaults to Q, or the first free alphabet letter
                        when the merge folds Q onto the filler
        split_repeats : insert the filler between doubled letters of a pair;
                        when False a doubled pair raises DegeneratePairError
        """
        self._square = key_square
        self._filler = self._check_filler(
            self.FILLER if filler is None else filler)
        if alt_filler is None:
            self._alt_filler = self._default_alt_filler()
        else:
            self._alt_filler = self._check_filler(alt_filler)
        if self._filler == self._alt_filler:
            raise ConfigError("Filler and alternate filler must differ.")
        self._split_repeats = split_repeats
        self._pairs: Optional[List[Pair]] = None
        logger.info(f"CipherEngine ready | filler={self._filler} "
                    f"alt={self._alt_filler} split_repeats={split_repeats}")

    @classmethod
    def from_phrase(cls, phrase: str, merge: Tuple[str, str] = None,
                    **options) -> "CipherEngine":
        """Build the key square from `phrase` and attach a new engine."""
        return cls(KeySquare(phrase, merge), **options)

    @property
    def key_square(self) -> KeySquare:
        return self._square

    @property
    def pairs(self) -> Tuple[Pair, ...]:
        """The current digested pairs (empty before the first digest)."""
        return tuple(self._pairs or ())

    # ── digestion ───────────────────────────────────────────────────────────

    def digest(self, message: str) -> List[Pair]:
        """
        Normalize `message` and split it into digraphs.

        Non-alphabet characters are dropped silently, the merged letter is
        rewritten, doubled letters inside a pair are split with the filler
        and a trailing lone letter is padded. The result replaces any
        previously digested message.
        """
        text = [self._square.normalize(c) for c in message]
        text = [c for c in text if c in self._square]

        pairs = []
        i = 0
        while i < len(text):
            first = text[i]
            if i + 1 == len(text):
                pairs.append((first, self._pad_for(first)))
                i += 1
            elif first == text[i + 1]:
                if not self._split_repeats:
                    raise DegeneratePairError(
                        f"Doubled letter {first}{first} at position {i}; "
                        f"enable split_repeats or change the message."
                    )
                pairs.append((first, self._pad_for(first)))
                i += 1
            else:
                pairs.append((first, text[i + 1]))
                i += 2

        self._pairs = pairs
        logger.debug(f"Digested {len(text)} letters into {len(pairs)} pairs")
        return list(pairs)

    # ── transformation ──────────────────────────────────────────────────────

    def transform_pair(self, pair: Pair, direction: Direction) -> Pair:
        """Rewrite one digraph according to its geometry on the square."""
        square = self._square
        size   = square.SIZE
        shift  = direction.value
        pos_a  = square.locate(pair[0])
        pos_b  = square.locate(pair[1])

        geometry = square.classify(pos_a, pos_b)
        if geometry is PairGeometry.SAME_ROW:
            return (square.letter_at(pos_a.row, (pos_a.column + shift) % size),
                    square.letter_at(pos_b.row, (pos_b.column + shift) % size))
        if geometry is PairGeometry.SAME_COLUMN:
            return (square.letter_at((pos_a.row + shift) % size, pos_a.column),
                    square.letter_at((pos_b.row + shift) % size, pos_b.column))
        return (square.letter_at(pos_a.row, pos_b.column),
                square.letter_at(pos_b.row, pos_a.column))

    def encode(self) -> str:
        """Encode the current digested message."""
        return self._run(Direction.ENCODE)

    def decode(self) -> str:
        """Decode the current digested message."""
        return self._run(Direction.DECODE)

    def encrypt(self, plaintext: str) -> str:
        """Digest and encode in one call."""
        self.digest(plaintext)
        return self.encode()

    def decrypt(self, ciphertext: str) -> str:
        """Digest and decode in one call. Fillers are left in place."""
        self.digest(ciphertext)
        return self.decode()

    # ── diagnostics ─────────────────────────────────────────────────────────

    def show(self) -> str:
        """Render the square followed by the digested pairs."""
        pairs = " ".join(a + b for a, b in self.pairs)
        out = f"{self._square}\n\n{pairs}"
        logger.debug(f"Engine state:\n{out}")
        return out

    # ── helpers ─────────────────────────────────────────────────────────────

    def _run(self, direction: Direction) -> str:
        if self._pairs is None:
            raise NotDigestedError("Nothing digested; call digest() first.")
        result = []
        for pair in self._pairs:
            result.extend(self.transform_pair(pair, direction))
        logger.debug(f"{direction.name.lower()}: {len(self._pairs)} pairs")
        return "".join(result)

    def _pad_for(self, letter: str) -> str:
        return self._alt_filler if letter == self._filler else self._filler

    def _default_alt_filler(self) -> str:
        # a merge can fold ALT_FILLER onto the filler; take the first free letter
        for letter in self._square.normalize(self.ALT_FILLER) + self._square.alphabet:
            if letter != self._filler:
                return letter

    def _check_filler(self, filler: str) -> str:
        if not isinstance(filler, str) or len(filler) != 1:
            raise ConfigError(f"Filler must be a single letter, got {filler!r}.")
        filler = self._square.normalize(filler)
        if filler not in self._square:
            raise ConfigError(f"Filler {filler!r} is not in the cipher alphabet.")
        return filler

    def __repr__(self):
        return (f"CipherEngine({self._square!r}, filler={self._filler!r}, "
                f"alt_filler={self._alt_filler!r}, "
                f"split_repeats={self._split_repeats})")
