"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.notifications import NotificationMessage
from calorie_tracker.errors import DispatchError, ValidationError

_ALL_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.api_route("/sendTopicNotification", methods=list(_ALL_METHODS))
    async def send_topic_notification(
        request: Request,
        topic: str | None = None,
        title: str | None = None,
        body: str | None = None,
    ) -> JSONResponse:
        """Send a push notification to a topic."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        message = NotificationMessage(
            topic=topic,
            title=settings.default_notification_title if title is None else title,
            body=settings.default_notification_body if body is None else body,
        )
        try:
            result = await run_in_threadpool(
                state_container.notification_dispatcher.dispatch, message
            )
        except (DispatchError, ValidationError) as exc:
            logger.exception("Topic notification failed", extra={"topic": topic})
            return JSONResponse(status_code=500, content={"error": str(exc)})
        return JSONResponse(status_code=200, content={"result": result.message_id})

    return app
