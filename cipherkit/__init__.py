"""
cipherkit — Classical Ciphers
=============================
Two hand ciphers as pure, stateless transforms.

Tiers:
    1  STREAM       — Vernam pad cipher (XOR, base64 transport)
    2  POLYGRAPHIC  — Playfair digraph substitution (5x5 key square)

Teaching ciphers. Neither offers real security.
"""

__version__  = "1.0.0"

from .result                  import CipherResult, ErrorKind, CipherError
from .keysquare               import KeySquare, Position
from .digraphs                import Digraph
from .tiers.tier1_pad         import PadCipher
from .tiers.tier2_playfair    import PlayfairCipher
from .operations              import (
    pad_encrypt,
    pad_decrypt,
    build_key_square,
    playfair_encrypt,
    playfair_decrypt,
    locate_in_matrix,
)

__all__ = [
    "CipherResult",
    "ErrorKind",
    "CipherError",
    "KeySquare",
    "Position",
    "Digraph",
    "PadCipher",
    "PlayfairCipher",
    "pad_encrypt",
    "pad_decrypt",
    "build_key_square",
    "playfair_encrypt",
    "playfair_decrypt",
    "locate_in_matrix",
]
