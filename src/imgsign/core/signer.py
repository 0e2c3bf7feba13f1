"""
URL signing.

The signature is ``HMAC-SHA256(key, salt + utf8(path))`` encoded as unpadded
URL-safe base64. The salt is prepended to the path, matching how the proxy
verifies requests. Without credentials the literal ``insecure`` is used.
"""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

from .codec import hex_decode, urlsafe_b64encode, utf8_bytes
from .constants import INSECURE_SIGNATURE
from .errors import ArgumentError

DIGEST_SIZE = hashlib.sha256().digest_size


@dataclass(frozen=True)
class Credentials:
    """Binary signing key and salt."""

    key: bytes
    salt: bytes

    def __repr__(self) -> str:
        # Never leak secrets into logs or tracebacks
        return f"Credentials(key=<{len(self.key)} bytes>, salt=<{len(self.salt)} bytes>)"

    @classmethod
    def from_hex(cls, key: str, salt: str) -> Credentials:
        """Decode hex-encoded key and salt.

        Raises:
            ArgumentError: If either value is empty or has an odd number of
                digits.
            FormatError: If either value contains non-hex characters.
        """
        if not key:
            raise ArgumentError("Signing key must not be empty", argument="key")
        if not salt:
            raise ArgumentError("Signing salt must not be empty", argument="salt")
        if len(key) % 2 == 1:
            raise ArgumentError(
                "Invalid key. The key cannot have an odd number of digits",
                argument="key",
            )
        if len(salt) % 2 == 1:
            raise ArgumentError(
                "Invalid salt. The salt cannot have an odd number of digits",
                argument="salt",
            )
        return cls(key=hex_decode(key), salt=hex_decode(salt))


class Signer:
    """Computes path signatures, optionally truncated to ``signature_size``."""

    def __init__(
        self,
        credentials: Credentials | None = None,
        *,
        signature_size: int = DIGEST_SIZE,
    ) -> None:
        if not 1 <= signature_size <= DIGEST_SIZE:
            raise ArgumentError(
                f"signature_size must be between 1 and {DIGEST_SIZE}",
                argument="signature_size",
            )
        self.credentials = credentials
        self.signature_size = signature_size

    @property
    def is_secure(self) -> bool:
        return self.credentials is not None

    def digest(self, path: str) -> bytes:
        if self.credentials is None:
            raise ArgumentError(
                "Cannot compute a digest without credentials", argument="credentials"
            )
        message = self.credentials.salt + utf8_bytes(path)
        mac = hmac.new(self.credentials.key, message, hashlib.sha256)
        return mac.digest()[: self.signature_size]

    def sign(self, path: str) -> str:
        if self.credentials is None:
            return INSECURE_SIGNATURE
        return urlsafe_b64encode(self.digest(path))


__all__ = ["Credentials", "DIGEST_SIZE", "Signer"]
