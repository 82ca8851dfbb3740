"""Topic notification dispatch."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.notifications import DispatchResult, NotificationMessage
from calorie_tracker.errors import DispatchError, ValidationError

_TOPIC_PATTERN = re.compile(r"^[a-zA-Z0-9\-_.~%]+$")
_TOPIC_PREFIX = "/topics/"

_logger = logging.getLogger(__name__)


class PushProvider(Protocol):
    """Interface for a topic-based push messaging provider."""

    def send_to_topic(self, topic: str, title: str, body: str) -> str:
        """Send a notification to a topic and return the provider message id."""


@dataclass
class NotificationDispatcher:
    """Sends one notification per call; retries are left to the caller."""

    provider: PushProvider
    default_topic: str = "general"

    def dispatch(self, message: NotificationMessage) -> DispatchResult:
        """Send a notification to its topic.

        Raises ValidationError for an unusable topic and DispatchError wrapping
        whatever the provider raised.
        """
        topic = self.resolve_topic(message.topic)
        try:
            message_id = self.provider.send_to_topic(topic, message.title, message.body)
        except Exception as exc:
            _logger.warning(
                "Notification dispatch failed: topic=%s error=%s", topic, exc
            )
            raise DispatchError(exc) from exc
        _logger.info("Notification sent: topic=%s message_id=%s", topic, message_id)
        return DispatchResult(message_id=message_id, topic=topic)

    def resolve_topic(self, topic: str | None) -> str:
        """Apply the default topic and validate the result."""
        resolved = (topic or "").strip() or self.default_topic.strip()
        if resolved.startswith(_TOPIC_PREFIX):
            resolved = resolved[len(_TOPIC_PREFIX) :]
        if not resolved:
            raise ValidationError("Notification topic must not be empty")
        if not _TOPIC_PATTERN.match(resolved):
            raise ValidationError(f"Invalid notification topic: {resolved!r}")
        return resolved
