"""
Playfair Key Square
===================
The 5x5 letter grid that is the whole of a Playfair key.

Construction from a keyword:
    1. uppercase, merge J into I
    2. keep the first occurrence of each letter, in order
    3. fill with the unused letters of the 25-letter alphabet, A to Z
    4. cut into five rows of five

    KeySquare.build("PLAYFAIR")

        P L A Y F
        I R B C D
        E G H K M
        N O Q S T
        U V W X Z

Stored flat: the letter at index i sits at row i // 5, column i % 5.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

from .result import EmptyKey, NoMatrix, NotFound

logger = logging.getLogger(__name__)

SIZE       = 5
MERGE_FROM = "J"
MERGE_TO   = "I"
ALPHABET   = "ABCDEFGHIKLMNOPQRSTUVWXYZ"   # A-Z without MERGE_FROM


class Position(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class KeySquare:
    """Immutable 5x5 Playfair grid."""

    letters: str

    SIZE = SIZE

    def __post_init__(self):
        if len(self.letters) != SIZE * SIZE or sorted(self.letters) != sorted(ALPHABET):
            raise NoMatrix(f"Key square must hold each of {ALPHABET} exactly once")

    @classmethod
    def build(cls, keyword: str) -> "KeySquare":
        """Derive the square from a keyword. Raises EmptyKey."""
        if not keyword:
            raise EmptyKey("Please enter a key for the Playfair matrix")

        seen = []
        for ch in keyword.upper().replace(MERGE_FROM, MERGE_TO):
            if "A" <= ch <= "Z" and ch not in seen:
                seen.append(ch)
        seen.extend(ch for ch in ALPHABET if ch not in seen)

        square = cls("".join(seen))
        logger.debug(f"Key square built, first row {square.letters[:SIZE]}")
        return square

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "KeySquare":
        """Adopt a grid given as five rows of five letters."""
        if not rows:
            raise NoMatrix()
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise NoMatrix(f"Key square must be {SIZE}x{SIZE}")
        return cls("".join("".join(row) for row in rows).upper())

    @property
    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(self.letters[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    def letter_at(self, row: int, col: int) -> str:
        return self.letters[row * SIZE + col]

    def locate(self, letter: str) -> Position:
        """Row and column of `letter`. Raises NotFound if absent."""
        for idx, cell in enumerate(self.letters):
            if cell == letter:
                return Position(idx // SIZE, idx % SIZE)
        raise NotFound(f"Letter {letter!r} not found in key square")

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows)
