"""Device signatures, password hashes and session token claims."""

from __future__ import annotations

import base64
import sys
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from .hexadecimal import from_hexadecimal, to_hexadecimal

_SIGNATURE_BYTES = 16
_HASH_BYTES = 64
_TOKEN_LIFETIME = timedelta(days=15)


@dataclass(frozen=True)
class DeviceSignature:
    """A 128-bit fingerprint sent by a client device."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < 1 << (8 * _SIGNATURE_BYTES):
            raise ValueError("device signature must fit in 128 bits")

    @classmethod
    def from_hex(cls, text: str) -> DeviceSignature:
        return cls(from_hexadecimal(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> DeviceSignature:
        if len(data) != _SIGNATURE_BYTES:
            raise ValueError("device signature must be 16 bytes")
        return cls(int.from_bytes(data, sys.byteorder))

    def to_bytes(self) -> bytes:
        """The signature's 16 bytes in the machine's byte order."""
        return self.value.to_bytes(_SIGNATURE_BYTES, sys.byteorder)

    def __str__(self) -> str:
        return to_hexadecimal(self.value)


@dataclass(frozen=True)
class PasswordHash:
    """A 64-byte password digest."""

    digest: bytes

    def __post_init__(self) -> None:
        if len(self.digest) != _HASH_BYTES:
            raise ValueError("Cannot convert to PasswordHash")

    @classmethod
    def from_sql(cls, data: bytes) -> PasswordHash:
        return cls(bytes(data))

    def to_sql(self) -> bytes:
        return self.digest

    def __str__(self) -> str:
        return base64.b64encode(self.digest).rstrip(b"=").decode("ascii")


@dataclass(frozen=True)
class JwtClaims:
    """Claims carried in a session token."""

    session_id: uuid.UUID
    exp: int

    @classmethod
    def new(cls, session_id: uuid.UUID) -> JwtClaims:
        """Claims for ``session_id`` that expire fifteen days from now."""
        expiry = datetime.now(timezone.utc) + _TOKEN_LIFETIME
        return cls(session_id, int(expiry.timestamp()))

    def to_dict(self) -> dict[str, Any]:
        return {"session_id": str(self.session_id), "exp": self.exp}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JwtClaims:
        try:
            raw_id = data["session_id"]
            exp = data["exp"]
        except KeyError as missing:
            raise ValueError(f"missing field {missing.args[0]}") from None
        if isinstance(exp, bool) or not isinstance(exp, int) or exp < 0:
            raise ValueError(f"invalid exp: {exp!r}")
        return cls(uuid.UUID(str(raw_id)), exp)