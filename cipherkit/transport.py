"""
Transport Encoding: Base64
==========================
Carries raw pad-cipher output as printable text.

Alphabet: A-Z a-z 0-9 + /   with = padding (RFC 4648, section 4).
Decoding is strict: stray characters, missing padding or a bad length
are rejected rather than silently dropped.
"""

import base64
import binascii

from .result import MalformedTransportEncoding


def encode_to_transport(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_from_transport(text: str) -> bytes:
    """Invert encode_to_transport. Raises MalformedTransportEncoding."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        # ValueError covers non-ASCII str input
        raise MalformedTransportEncoding() from None
