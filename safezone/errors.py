"""Errors that carry a log level and, for responses, an HTTP status."""

from __future__ import annotations

import enum
import json
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any


class LogLevel(enum.Enum):
    """Severity of a logged event; the value is its short name."""

    ERROR = "error"
    WARNING = "warn"
    INFORMATION = "info"
    DEBUG = "debug"
    TRACE = "trace"


def _now() -> datetime:
    return datetime.now(timezone.utc)


class LoggableError(Exception):
    """An error worth recording in the log."""

    def __init__(
        self, message: str, level: LogLevel, timestamp: datetime | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.level = level
        self.timestamp = timestamp if timestamp is not None else _now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoggableError):
            return NotImplemented
        return (self.message, self.level, self.timestamp) == (
            other.message,
            other.level,
            other.timestamp,
        )

    __hash__ = None  # type: ignore[assignment]


class ResponseError(Exception):
    """An error that is both logged and answered with an HTTP status."""

    content_type = "application/json"

    def __init__(
        self,
        log_message: str,
        response_message: str,
        level: LogLevel,
        status_code: int,
        timestamp: datetime | None = None,
    ) -> None:
        super().__init__(log_message)
        self.log_message = log_message
        self.response_message = response_message
        self.level = level
        self.status_code = HTTPStatus(status_code)
        self.timestamp = timestamp if timestamp is not None else _now()

    @property
    def message(self) -> str:
        """The message written to the log."""
        return self.log_message

    def __str__(self) -> str:
        return self.log_message

    @classmethod
    def unauthorized(cls, user_id: Any) -> ResponseError:
        return cls(
            f"Denied access to user: {user_id}",
            "User unauthorized",
            LogLevel.INFORMATION,
            HTTPStatus.UNAUTHORIZED,
        )

    @classmethod
    def server_error(cls) -> ResponseError:
        return cls(
            "Server Error",
            "Internal Server Error",
            LogLevel.ERROR,
            HTTPStatus.INTERNAL_SERVER_ERROR,
        )

    @classmethod
    def invalid_field_format(cls, field_name: str) -> ResponseError:
        text = f"Invalid {field_name} format"
        return cls(text, text, LogLevel.INFORMATION, HTTPStatus.BAD_REQUEST)

    @classmethod
    def length_limit_check(
        cls, field_name: str, field_value: str, min_length: int, max_length: int
    ) -> None:
        """Raise if the UTF-8 length of ``field_value`` is out of bounds."""
        length = len(field_value.encode("utf-8"))
        if length > max_length:
            raise cls(
                f"{field_name} exceed limit",
                f"{field_name} must not be longer than {max_length} characters",
                LogLevel.INFORMATION,
                HTTPStatus.BAD_REQUEST,
            )
        if length < min_length:
            raise cls(
                f"{field_name} is too short",
                f"{field_name} must be at least {min_length} characters",
                LogLevel.INFORMATION,
                HTTPStatus.BAD_REQUEST,
            )

    @classmethod
    def conflict_field(cls, field_name: str) -> ResponseError:
        text = f"{field_name} already exists"
        return cls(text, text, LogLevel.INFORMATION, HTTPStatus.CONFLICT)

    @classmethod
    def value_do_not_exist(cls, value: str) -> ResponseError:
        text = f"{value} doesn't exists"
        return cls(text, text, LogLevel.INFORMATION, HTTPStatus.NOT_FOUND)

    def error_body(self) -> str:
        """The JSON body sent to the client."""
        return json.dumps(
            {"message": self.response_message},
            separators=(",", ":"),
            ensure_ascii=False,
        )


def into_response(loggable: Any, response_message: str, status_code: int) -> ResponseError:
    """Turn any loggable error into a response error, keeping its log data."""
    return ResponseError(
        loggable.message,
        response_message,
        loggable.level,
        status_code,
    )