"""Domain models for push notifications."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationMessage:
    """A notification addressed to a messaging topic."""

    topic: str | None
    title: str
    body: str


@dataclass(frozen=True)
class DispatchResult:
    """Provider acknowledgement of a dispatched notification."""

    message_id: str
    topic: str
