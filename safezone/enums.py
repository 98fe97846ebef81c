"""Enumerations stored as small integers and exchanged as JSON values."""

from __future__ import annotations

import enum
from typing import Any

_U32_MAX = 0xFFFFFFFF


def _as_u32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an unsigned integer, got {value!r}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{value} is out of range for an unsigned 32-bit integer")
    return value


class Category(enum.IntEnum):
    """Kind of person a violation was recorded against."""

    STUDENT = 1
    VISITOR = 2
    FACULTY = 3
    STAFF = 4

    @classmethod
    def from_json(cls, value: Any) -> Category:
        number = _as_u32(value)
        try:
            return cls(number)
        except ValueError:
            raise ValueError(f"invalid value for User role: {number}") from None

    def to_json(self) -> int:
        return int(self)

    @classmethod
    def from_sql(cls, value: int) -> Category:
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Unrecognized UserRole variant") from None

    def to_sql(self) -> int:
        return int(self)


class DeviceOs(enum.IntEnum):
    """Operating system of a device that signs in."""

    ANDROID = 1
    WINDOWS = 2
    LINUX = 3

    @property
    def json_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_json(cls, value: Any) -> DeviceOs:
        """Accept the variant name, either capitalised or all lower case."""
        if isinstance(value, str):
            for member in cls:
                if value in (member.json_name, member.json_name.lower()):
                    return member
        raise ValueError(
            f"unknown variant {value!r}, expected one of "
            + ", ".join(member.json_name for member in cls)
        )

    def to_json(self) -> str:
        return self.json_name

    def to_sql(self) -> int:
        return int(self)


class UserRole(enum.IntEnum):
    """Role a user account holds."""

    SECURITY_GUARD = 1
    SECURITY_HEAD = 2
    SYSTEM_ADMIN = 3

    @classmethod
    def from_json(cls, value: Any) -> UserRole:
        """Read a role; incoming JSON numbers the roles from zero."""
        number = _as_u32(value)
        try:
            return cls(number + 1)
        except ValueError:
            raise ValueError(f"invalid value for User role: {number}") from None

    def to_json(self) -> int:
        return int(self)

    @classmethod
    def from_sql(cls, value: int) -> UserRole:
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Unrecognized UserRole variant") from None

    def to_sql(self) -> int:
        return int(self)


class ViolationKind(enum.IntEnum):
    """Kind of rule that was broken."""

    FACEMASK_PROTOCOL = 1
    FOOT_TRAFFIC = 2

    @classmethod
    def from_json(cls, value: Any) -> ViolationKind:
        """Read a kind; incoming JSON numbers the kinds from zero."""
        number = _as_u32(value)
        try:
            return cls(number + 1)
        except ValueError:
            raise ValueError(f"invalid value for violation kind: {number}") from None

    def to_json(self) -> int:
        return int(self)

    @classmethod
    def from_sql(cls, value: int) -> ViolationKind:
        try:
            return cls(value)
        except ValueError:
            raise ValueError("ViolationKind UserRole variant") from None

    def to_sql(self) -> int:
        return int(self)