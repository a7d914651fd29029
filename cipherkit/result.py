"""
Results & Errors
================
Every public operation returns a CipherResult instead of raising.

Inside the library, validation failures are raised as CipherError
subclasses (one per ErrorKind). The operations layer catches them at its
boundary and hands the caller a tagged result to branch on.

    result = pad_encrypt("HELLO", "HI")
    if not result:
        print(result.error, result.message)   # ErrorKind.KEY_TOO_SHORT ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    EMPTY_INPUT                  = "empty_input"
    EMPTY_KEY                    = "empty_key"
    KEY_TOO_SHORT                = "key_too_short"
    MALFORMED_TRANSPORT_ENCODING = "malformed_transport_encoding"
    NO_MATRIX                    = "no_matrix"
    ODD_LENGTH                   = "odd_length"
    NOT_FOUND                    = "not_found"
    UNSUPPORTED_CHARACTER        = "unsupported_character"


class CipherError(ValueError):
    """Base class for every expected validation failure."""

    kind: ErrorKind = None
    default_message = "Cipher operation failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInput(CipherError):
    kind = ErrorKind.EMPTY_INPUT
    default_message = "Please enter a message"


class EmptyKey(CipherError):
    kind = ErrorKind.EMPTY_KEY
    default_message = "Please enter a key"


class KeyTooShort(CipherError):
    kind = ErrorKind.KEY_TOO_SHORT
    default_message = "Key must be at least as long as the message"


class MalformedTransportEncoding(CipherError):
    kind = ErrorKind.MALFORMED_TRANSPORT_ENCODING
    default_message = "Invalid base64 encoded ciphertext"


class NoMatrix(CipherError):
    kind = ErrorKind.NO_MATRIX
    default_message = "Matrix not generated"


class OddLength(CipherError):
    kind = ErrorKind.ODD_LENGTH
    default_message = "Ciphertext must have an even number of characters"


class NotFound(CipherError, LookupError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Letter not found in key square"


class UnsupportedCharacter(CipherError):
    kind = ErrorKind.UNSUPPORTED_CHARACTER
    default_message = "Message and key must use 8-bit characters"


_ERRORS_BY_KIND = {
    cls.kind: cls
    for cls in (EmptyInput, EmptyKey, KeyTooShort, MalformedTransportEncoding,
                NoMatrix, OddLength, NotFound, UnsupportedCharacter)
}


@dataclass(frozen=True)
class CipherResult:
    """Success carries `value`; failure carries `error` and `message`."""

    ok: bool
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any) -> "CipherResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: CipherError) -> "CipherResult":
        return cls(ok=False, error=exc.kind, message=exc.message)

    def __bool__(self) -> bool:
        return self.ok

    @property
    def text(self) -> Optional[str]:
        """The payload when it is text (ciphertext or recovered plaintext)."""
        return self.value if isinstance(self.value, str) else None

    def unwrap(self) -> Any:
        """Return the payload, or raise the CipherError this result records."""
        if self.ok:
            return self.value
        raise _ERRORS_BY_KIND[self.error](self.message)
