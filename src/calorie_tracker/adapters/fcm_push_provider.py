"""Firebase Cloud Messaging adapter."""

from dataclasses import dataclass

from firebase_admin import App, messaging

from calorie_tracker.services.notifications import PushProvider


@dataclass
class FirebasePushProvider(PushProvider):
    """Push provider that sends topic messages through FCM."""

    app: App | None = None
    dry_run: bool = False

    def send_to_topic(self, topic: str, title: str, body: str) -> str:
        """Send a notification message to an FCM topic."""
        message = messaging.Message(
            notification=messaging.Notification(title=title, body=body),
            topic=topic,
        )
        return messaging.send(message, dry_run=self.dry_run, app=self.app)
