"""
Tier 1 — STREAM: Vernam Pad Cipher
==================================
Each message character is XOR-ed with the key character at the same
position. The raw result is carried as base64 text.

Historical note: Gilbert Vernam, 1917. With a truly random key, as long
as the message and never reused, this is the one-time pad. Here the key
is whatever the caller types, so it is a teaching cipher, not a secure one.

Key rules:
    - consumed strictly by position, never wrapped or repeated
    - must be at least as long as the message
    - any surplus key characters are simply unused

Output format: base64( p[0]^k[0] || p[1]^k[1] || ... )
"""

import logging
import secrets
import string

from ..result import EmptyInput, EmptyKey, KeyTooShort, UnsupportedCharacter
from ..transport import encode_to_transport, decode_from_transport

logger = logging.getLogger(__name__)


class PadCipher:
    """XOR pad cipher over text, with base64 transport."""

    KEY_ALPHABET = string.ascii_letters + string.digits
    MAX_CODE     = 0xFF   # largest code a transport byte can carry

    @staticmethod
    def generate_key(length: int) -> str:
        """Fresh random printable key of exactly `length` characters."""
        if length <= 0:
            raise ValueError("Pad length must be positive.")
        return "".join(secrets.choice(PadCipher.KEY_ALPHABET) for _ in range(length))

    def encrypt(self, plaintext: str, key: str) -> str:
        """
        Encrypt plaintext with key.
        Returns: base64 text of the XOR-combined codes.
        """
        if not plaintext:
            raise EmptyInput("Please enter a message to encrypt")
        if not key:
            raise EmptyKey("Please enter a key")
        if len(key) < len(plaintext):
            raise KeyTooShort("Key must be at least as long as the message")

        codes = [ord(p) ^ ord(k) for p, k in zip(plaintext, key)]
        if max(codes) > self.MAX_CODE:
            raise UnsupportedCharacter()
        logger.debug(f"Pad encrypt: {len(codes)} chars, {len(key) - len(codes)} key chars unused")
        return encode_to_transport(bytes(codes))

    def decrypt(self, ciphertext: str, key: str) -> str:
        """
        Decrypt base64 ciphertext with key.
        Raises MalformedTransportEncoding if ciphertext is not valid base64.
        """
        if not ciphertext:
            raise EmptyInput("Please enter ciphertext to decrypt")
        if not key:
            raise EmptyKey("Please enter the key")

        raw = decode_from_transport(ciphertext)
        if len(key) < len(raw):
            raise KeyTooShort("Key must be at least as long as the decoded message")

        logger.debug(f"Pad decrypt: {len(raw)} bytes")
        return "".join(chr(b ^ ord(k)) for b, k in zip(raw, key))
