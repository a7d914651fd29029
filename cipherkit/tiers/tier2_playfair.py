"""
Tier 2 — POLYGRAPHIC: Playfair Digraph Substitution
===================================================
Letters are enciphered two at a time against a 5x5 key square.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
Used in the field through both World Wars. Breakable by hand with enough
ciphertext, but the first practical digraph cipher.

Rules for a pair (a, b):
    same row     ->  each letter moves one column right  (left to decrypt)
    same column  ->  each letter moves one row down      (up to decrypt)
    otherwise    ->  each letter keeps its row, takes its partner's column

Moves wrap around the square. The rectangle rule is its own inverse.
Decryption output keeps the padding letters and the I/J merge; those are
lossy and not undone.
"""

import logging
from typing import Iterable

from ..digraphs import Digraph, FILLER, letters_only, pairs, prepare
from ..keysquare import KeySquare, SIZE
from ..result import EmptyInput, NoMatrix, OddLength

logger = logging.getLogger(__name__)


class PlayfairCipher:
    """Playfair cipher bound to one key square."""

    FILLER = FILLER

    def __init__(self, square: KeySquare, filler: str = None):
        if square is None:
            raise NoMatrix()
        self._square = square
        self._filler = filler or self.FILLER

    @classmethod
    def from_keyword(cls, keyword: str, filler: str = None) -> "PlayfairCipher":
        return cls(KeySquare.build(keyword), filler)

    @property
    def square(self) -> KeySquare:
        return self._square

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext. Non-letters are dropped, J becomes I."""
        if not plaintext:
            raise EmptyInput("Please enter a message to encrypt")
        return self._transform(prepare(plaintext, self._filler), shift=1)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext. Raises OddLength if the letters don't pair up."""
        if not ciphertext:
            raise EmptyInput("Please enter ciphertext to decrypt")
        cleaned = letters_only(ciphertext)
        if len(cleaned) % 2:
            raise OddLength()
        return self._transform(pairs(cleaned), shift=SIZE - 1)

    # ── helpers ──────────────────────────────────────────────────────────────

    def _transform(self, digraphs: Iterable[Digraph], shift: int) -> str:
        out = []
        for a, b in digraphs:
            out.append(self._substitute(a, b, shift))
        logger.debug(f"Playfair: {len(out)} digraphs, shift={shift}")
        return "".join(out)

    def _substitute(self, a: str, b: str, shift: int) -> str:
        sq = self._square
        (r1, c1), (r2, c2) = sq.locate(a), sq.locate(b)
        if r1 == r2:
            return sq.letter_at(r1, (c1 + shift) % SIZE) + sq.letter_at(r2, (c2 + shift) % SIZE)
        if c1 == c2:
            return sq.letter_at((r1 + shift) % SIZE, c1) + sq.letter_at((r2 + shift) % SIZE, c2)
        return sq.letter_at(r1, c2) + sq.letter_at(r2, c1)
