"""Rows written to and read from the database, and the requests that make them."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from .credentials import PasswordHash
from .enums import Category, DeviceOs, UserRole, ViolationKind
from .errors import LogLevel, ResponseError

_AREA_FIELD_LIMIT = 10


def _naive_timestamp(moment: datetime) -> str:
    """Render a naive timestamp with as many fraction digits as it needs."""
    if moment.microsecond == 0:
        spec = "seconds"
    elif moment.microsecond % 1000 == 0:
        spec = "milliseconds"
    else:
        spec = "microseconds"
    return moment.isoformat(timespec=spec)


def _required(row: Mapping[str, Any], column: str) -> Any:
    try:
        value = row[column]
    except KeyError:
        raise ValueError(f"missing column {column}") from None
    if value is None:
        raise ValueError(f"column {column} is null")
    return value


def _utf8_length(text: str) -> int:
    return len(text.encode("utf-8"))


@dataclass
class SessionInsert:
    """A new sign-in session."""

    user_id: uuid.UUID
    created_time: datetime
    last_login: datetime
    logout_time: datetime | None
    device_os: DeviceOs
    device_name: str
    device_hash: bytes

    @classmethod
    def create(
        cls,
        user_id: uuid.UUID,
        device_os: DeviceOs,
        device_name: str,
        device_hash: bytes,
    ) -> SessionInsert:
        """A session opened now, in UTC, that has not been logged out."""
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        return cls(
            user_id=user_id,
            created_time=now,
            last_login=now,
            logout_time=None,
            device_os=device_os,
            device_name=device_name,
            device_hash=bytes(device_hash),
        )


@dataclass
class ViolationUnknownInsert:
    """A freshly detected violation whose person is not yet known."""

    area_code: str
    violation_kind: ViolationKind
    date_time: datetime
    image_bytes: bytes
    identified: bool


@dataclass
class ViolationUnknown:
    """A violation still waiting to be identified."""

    id: uuid.UUID
    area_code: str
    violation_kind: ViolationKind
    date_time: datetime

    def to_json(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "area-code": self.area_code,
            "violation-kind": self.violation_kind.to_json(),
            "date-time": _naive_timestamp(self.date_time),
        }


@dataclass
class IdentifiedViolation:
    """A violation linked to the person who committed it."""

    id: uuid.UUID
    area_code: str
    violation_kind: ViolationKind
    date_time: datetime
    personnel_id: uuid.UUID
    first_name: str
    last_name: str
    category: Category

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> IdentifiedViolation:
        """Build from a violations row; the identification columns must be set."""
        return cls(
            id=uuid.UUID(str(_required(row, "id"))),
            area_code=_required(row, "area_code"),
            violation_kind=ViolationKind.from_sql(_required(row, "violation_kind")),
            date_time=_required(row, "date_time"),
            personnel_id=uuid.UUID(str(_required(row, "personnel_id"))),
            first_name=_required(row, "first_name"),
            last_name=_required(row, "last_name"),
            category=Category.from_sql(_required(row, "category")),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "violation-id": str(self.id),
            "area-code": self.area_code,
            "violation-kind": self.violation_kind.to_json(),
            "date-time": _naive_timestamp(self.date_time),
            "personnel-id": str(self.personnel_id),
            "first-name": self.first_name,
            "last-name": self.last_name,
            "category": self.category.to_json(),
        }


@dataclass
class UserInsert:
    """A new user account."""

    username: str
    first_name: str
    last_name: str
    password_hash: PasswordHash
    deactivated: bool
    assigned_role: UserRole
    assigned_area: str | None = None


@dataclass
class UserBasicSelect:
    """A user's identifier and name."""

    id: uuid.UUID
    last_name: str
    first_name: str

    def to_json(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "last-name": self.last_name,
            "first-name": self.first_name,
        }


@dataclass
class CreateAreaRequest:
    """A request to create an area."""

    code: str
    name: str


@dataclass
class AreaInsert:
    """A new area."""

    name: str
    code: str

    @classmethod
    def from_request(cls, request: CreateAreaRequest) -> AreaInsert:
        """Check the request's field lengths and build the row."""
        if _utf8_length(request.code) > _AREA_FIELD_LIMIT:
            raise ResponseError(
                "Length limit for area code reached",
                "Area code must of at least 3 and maximum of 8 characters",
                LogLevel.INFORMATION,
                HTTPStatus.UNPROCESSABLE_ENTITY,
            )
        if _utf8_length(request.name) > _AREA_FIELD_LIMIT:
            raise ResponseError(
                "Length limit for area name reached",
                "Area name must of at least 3 and maximum of 128 characters",
                LogLevel.INFORMATION,
                HTTPStatus.UNPROCESSABLE_ENTITY,
            )
        return cls(name=request.name, code=request.code)


@dataclass
class AreaSelect:
    """An existing area."""

    name: str
    code: str

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "code": self.code}


@dataclass
class AreaGuardCount:
    """An area with the number of guards assigned to it."""

    name: str
    code: str
    guard_count: int

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "code": self.code, "guard-count": self.guard_count}


@dataclass
class CameraInsert:
    """A new camera row."""

    label: str
    area_code: str
    camera_url: str
    deactivated: bool


def _field(data: Mapping[str, Any], names: tuple[str, ...], kind: type) -> Any:
    for name in names:
        if name in data:
            value = data[name]
            if not isinstance(value, kind):
                raise ValueError(f"invalid type for field {names[0]}")
            return value
    raise ValueError(f"missing field {names[0]}")


@dataclass
class CameraAddRequest:
    """A request to add a camera to an area."""

    label: str
    area_code: str
    camera_url: str
    enable: bool

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> CameraAddRequest:
        """Read a decoded JSON object; hyphenated field names are accepted too."""
        if not isinstance(data, Mapping):
            raise ValueError("camera request must be an object")
        return cls(
            label=_field(data, ("label",), str),
            area_code=_field(data, ("area_code", "area-code"), str),
            camera_url=_field(data, ("camera_url", "camera-url"), str),
            enable=_field(data, ("enable",), bool),
        )

    def model(self) -> CameraInsert:
        """Check field lengths and build the camera row."""
        ResponseError.length_limit_check("Label", self.label, 3, 15)
        ResponseError.length_limit_check("Area code", self.area_code, 3, 10)
        ResponseError.length_limit_check("Camera URL", self.camera_url, 10, 512)
        return CameraInsert(
            label=self.label,
            area_code=self.area_code,
            camera_url=self.camera_url,
            deactivated=not self.enable,
        )