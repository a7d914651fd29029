"""
Digraph preparation for Playfair.

Plaintext is reduced to A-Z (J folded into I) and cut into letter pairs:

    same letter twice  ->  (letter, X), and the second copy starts the next pair
    lone last letter   ->  (letter, X)
    otherwise          ->  (letter, next)

    BALLOON  ->  BA LX LO ON
"""

from typing import Iterator, NamedTuple

from .keysquare import MERGE_FROM, MERGE_TO

FILLER = "X"


class Digraph(NamedTuple):
    first: str
    second: str


def letters_only(text: str) -> str:
    return "".join(ch for ch in text.upper() if "A" <= ch <= "Z")


def normalize(text: str) -> str:
    """Uppercase letters only, J merged into I."""
    return letters_only(text).replace(MERGE_FROM, MERGE_TO)


def prepare(text: str, filler: str = FILLER) -> Iterator[Digraph]:
    cleaned = normalize(text)
    i = 0
    while i < len(cleaned):
        current = cleaned[i]
        if i + 1 >= len(cleaned):
            yield Digraph(current, filler)
            return
        nxt = cleaned[i + 1]
        if current == nxt:
            yield Digraph(current, filler)
            i += 1
        else:
            yield Digraph(current, nxt)
            i += 2


def pairs(cleaned: str) -> Iterator[Digraph]:
    """Split even-length ciphertext into consecutive pairs, no re-pairing."""
    for i in range(0, len(cleaned), 2):
        yield Digraph(cleaned[i], cleaned[i + 1])
