"""Push of violation and activation events to connected clients."""

from __future__ import annotations

import enum
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

import cbor2


class Response(enum.Enum):
    """Outcome of delivering a notification to one client."""

    NOTIFICATION_SENT = "Notification Sent"
    NOTIFICATION_SKIPPED = "Notification Skipped"
    SERIALIZATION_FAILED = "Serialization Failed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ActiveEntry:
    """Whether one camera is currently active."""

    id: uuid.UUID
    activity: bool

    def to_wire(self) -> dict[str, Any]:
        return {"id": self.id.bytes, "activity": self.activity}


class NotificationEvent(enum.IntEnum):
    NEW_VIOLATIONS = 1
    NEW_ACTIVATION = 2


@dataclass(frozen=True)
class Notification:
    """An event sent to every listening client."""

    event: NotificationEvent
    ids: tuple[uuid.UUID, ...] = ()
    activities: tuple[ActiveEntry, ...] = ()

    @classmethod
    def new_violations(cls, ids: Iterable[uuid.UUID]) -> Notification:
        return cls(NotificationEvent.NEW_VIOLATIONS, ids=tuple(ids))

    @classmethod
    def new_activation(cls, activities: Iterable[ActiveEntry]) -> Notification:
        return cls(NotificationEvent.NEW_ACTIVATION, activities=tuple(activities))

    def to_cbor(self) -> bytes:
        """Encode as a two-entry CBOR map; identifiers go as 16-byte strings."""
        if self.event is NotificationEvent.NEW_VIOLATIONS:
            payload: dict[str, Any] = {
                "event": 1,
                "ids": [identifier.bytes for identifier in self.ids],
            }
        else:
            payload = {
                "event": 2,
                "activities": [entry.to_wire() for entry in self.activities],
            }
        return cbor2.dumps(payload)


@dataclass(frozen=True)
class ClientRequest:
    """A client's request to switch one kind of event on or off."""

    event: int
    listen: bool

    @classmethod
    def from_cbor(cls, data: bytes) -> ClientRequest:
        try:
            decoded = cbor2.loads(data)
        except Exception as error:
            raise ValueError(f"malformed CBOR: {error}") from error
        if not isinstance(decoded, dict):
            raise ValueError("client request must be a map")
        try:
            event = decoded["event"]
            listen = decoded["listen"]
        except KeyError as missing:
            raise ValueError(f"missing field {missing.args[0]}") from None
        if isinstance(event, bool) or not isinstance(event, int):
            raise ValueError("event must be an integer")
        if not 0 <= event <= 0xFFFFFFFF:
            raise ValueError("event out of range")
        if not isinstance(listen, bool):
            raise ValueError("listen must be a boolean")
        return cls(event, listen)


@dataclass
class Listener:
    """One connected client and the events it wants."""

    send: Callable[[bytes], Any]
    claims: Any = None
    listen_notification: bool = True
    listen_activation: bool = True

    def handle_message(self, data: Any) -> None:
        """Apply a binary request from the client; anything else is ignored."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            return
        try:
            request = ClientRequest.from_cbor(bytes(data))
        except ValueError:
            return
        if request.event == 1:
            self.listen_notification = request.listen
        elif request.event == 2:
            self.listen_activation = request.listen

    def deliver(self, notification: Notification) -> Response:
        if notification.event is NotificationEvent.NEW_VIOLATIONS:
            wanted = self.listen_notification
        else:
            wanted = self.listen_activation
        if not wanted:
            return Response.NOTIFICATION_SKIPPED
        try:
            payload = notification.to_cbor()
        except (cbor2.CBOREncodeError, TypeError, ValueError):
            return Response.SERIALIZATION_FAILED
        self.send(payload)
        return Response.NOTIFICATION_SENT


@dataclass
class Notifier:
    """Connected clients, keyed by session."""

    clients: dict[uuid.UUID, Listener] = field(default_factory=dict)

    def add_client(self, session_id: uuid.UUID, listener: Listener) -> None:
        """Register a client; a session that reconnects replaces its old entry."""
        self.clients[session_id] = listener

    def notify(self, notification: Notification) -> dict[uuid.UUID, Response]:
        """Deliver to every client and report what happened to each."""
        return {
            session_id: listener.deliver(notification)
            for session_id, listener in self.clients.items()
        }