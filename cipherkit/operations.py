"""
CIPHER OPERATIONS  |  cipherkit

The six calls a front end needs. Each one returns a CipherResult and
never raises for bad input: validation errors from the cipher classes
are caught here and turned into failure results.

    pad_encrypt(plaintext, key)          -> ciphertext (base64)
    pad_decrypt(ciphertext, key)         -> plaintext
    build_key_square(keyword)            -> KeySquare
    playfair_encrypt(plaintext, square)  -> ciphertext
    playfair_decrypt(ciphertext, square) -> plaintext (padded, I for J)
    locate_in_matrix(letter, square)     -> Position
"""

import logging
from functools import wraps
from typing import Optional, Sequence, Union

from .keysquare import KeySquare, Position
from .result import CipherError, CipherResult, EmptyInput, NoMatrix
from .tiers.tier1_pad import PadCipher
from .tiers.tier2_playfair import PlayfairCipher

logger = logging.getLogger(__name__)

SquareLike = Optional[Union[KeySquare, Sequence[Sequence[str]]]]

_pad = PadCipher()


def _as_result(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs) -> CipherResult:
        try:
            return CipherResult.success(fn(*args, **kwargs))
        except CipherError as exc:
            logger.debug(f"{fn.__name__} failed: {exc.kind.name}")
            return CipherResult.failure(exc)
    return wrapper


def _coerce_square(square: SquareLike) -> KeySquare:
    if isinstance(square, KeySquare):
        return square
    if not square:
        raise NoMatrix()
    try:
        return KeySquare.from_rows(square)
    except TypeError:
        raise NoMatrix("Key square must be rows of letters") from None


@_as_result
def pad_encrypt(plaintext: str, key: str) -> str:
    return _pad.encrypt(plaintext, key)


@_as_result
def pad_decrypt(ciphertext: str, key: str) -> str:
    return _pad.decrypt(ciphertext, key)


@_as_result
def build_key_square(keyword: str) -> KeySquare:
    return KeySquare.build(keyword)


@_as_result
def playfair_encrypt(plaintext: str, square: SquareLike) -> str:
    # empty message is reported ahead of a missing square
    if not plaintext:
        raise EmptyInput("Please enter a message to encrypt")
    return PlayfairCipher(_coerce_square(square)).encrypt(plaintext)


@_as_result
def playfair_decrypt(ciphertext: str, square: SquareLike) -> str:
    if not ciphertext:
        raise EmptyInput("Please enter ciphertext to decrypt")
    return PlayfairCipher(_coerce_square(square)).decrypt(ciphertext)


@_as_result
def locate_in_matrix(letter: str, square: SquareLike) -> Position:
    return _coerce_square(square).locate(letter.upper())
