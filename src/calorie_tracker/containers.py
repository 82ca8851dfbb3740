"""Dependency container wiring for the application."""

import logging
import os
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials, firestore
from google.auth.credentials import AnonymousCredentials
from google.auth.exceptions import GoogleAuthError
from supabase import create_client

from calorie_tracker.adapters.fcm_push_provider import FirebasePushProvider
from calorie_tracker.adapters.firestore_food_repository import (
    FirestoreFoodRepository,
)
from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.config import Settings
from calorie_tracker.errors import InitializationError
from calorie_tracker.services.foods import BulkUpserter, FoodRepository
from calorie_tracker.services.notifications import NotificationDispatcher

_logger = logging.getLogger(__name__)

_EMULATOR_PROJECT_ID = "demo-calorie-tracker"
_EMULATOR_HOST_ENV = "FIRESTORE_EMULATOR_HOST"


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    bulk_upserter: BulkUpserter
    notification_dispatcher: NotificationDispatcher
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, *, use_local_store: bool = False
) -> AppContainer:
    """Create the default dependency container.

    Raises InitializationError when a client cannot be configured.
    """
    resolved_settings = settings or Settings()
    firebase_app = _initialize_firebase(resolved_settings)
    try:
        repository = _build_food_repository(
            resolved_settings, firebase_app, use_local_store=use_local_store
        )
    except InitializationError:
        firebase_admin.delete_app(firebase_app)
        raise

    bulk_upserter = BulkUpserter(repository)
    notification_dispatcher = NotificationDispatcher(
        provider=FirebasePushProvider(
            app=firebase_app, dry_run=resolved_settings.fcm_dry_run
        ),
        default_topic=resolved_settings.default_topic,
    )

    async def close_resources() -> None:
        firebase_admin.delete_app(firebase_app)

    return AppContainer(
        settings=resolved_settings,
        bulk_upserter=bulk_upserter,
        notification_dispatcher=notification_dispatcher,
        close_resources=close_resources,
    )


def _initialize_firebase(settings: Settings) -> firebase_admin.App:
    """Create a named Firebase app owned by this container."""
    options: dict[str, object] = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id
    try:
        credential = (
            credentials.Certificate(settings.firebase_credentials_path)
            if settings.firebase_credentials_path
            else credentials.ApplicationDefault()
        )
        return firebase_admin.initialize_app(
            credential, options, name=settings.firebase_app_name
        )
    except (ValueError, OSError) as exc:
        raise InitializationError(f"Failed to initialize Firebase: {exc}") from exc


def _build_food_repository(
    settings: Settings, firebase_app: firebase_admin.App, *, use_local_store: bool
) -> FoodRepository:
    if settings.food_store == "supabase":
        return _build_supabase_repository(settings, use_local_store=use_local_store)
    try:
        if use_local_store:
            _logger.info(
                "Using Firestore emulator at %s", settings.firestore_emulator_host
            )
            with _emulator_host(settings.firestore_emulator_host):
                client = firestore.Client(
                    project=settings.firebase_project_id or _EMULATOR_PROJECT_ID,
                    credentials=AnonymousCredentials(),
                )
        else:
            client = firestore.client(app=firebase_app)
    except (ValueError, GoogleAuthError) as exc:
        raise InitializationError(f"Failed to create Firestore client: {exc}") from exc
    return FirestoreFoodRepository(client, collection=settings.foods_collection)


@contextmanager
def _emulator_host(host: str) -> Iterator[None]:
    """Point Firestore clients created inside the block at the emulator."""
    previous = os.environ.get(_EMULATOR_HOST_ENV)
    os.environ[_EMULATOR_HOST_ENV] = host
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop(_EMULATOR_HOST_ENV, None)
        else:
            os.environ[_EMULATOR_HOST_ENV] = previous


def _build_supabase_repository(
    settings: Settings, *, use_local_store: bool
) -> SupabaseFoodRepository:
    if use_local_store:
        _logger.info("Using local Supabase at %s", settings.supabase_local_url)
        url = settings.supabase_local_url
        key = settings.supabase_local_service_key or settings.supabase_service_key
    else:
        url = settings.supabase_url
        key = settings.supabase_service_key
    if not url or not key:
        raise InitializationError("Supabase URL and service key must be configured")
    try:
        client = create_client(url, key)
    except Exception as exc:
        raise InitializationError(f"Failed to create Supabase client: {exc}") from exc
    return SupabaseFoodRepository(client, table=settings.foods_collection)
