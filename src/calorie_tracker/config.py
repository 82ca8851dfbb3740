"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    food_store: Literal["firestore", "supabase"] = "firestore"
    foods_collection: str = "foods"
    firebase_app_name: str = "calorie-tracker"
    firebase_project_id: str | None = None
    firebase_credentials_path: str | None = None
    firestore_emulator_host: str = "localhost:8080"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_local_url: str = "http://127.0.0.1:54321"
    supabase_local_service_key: str | None = None
    default_topic: str = "general"
    default_notification_title: str = "Test Notification"
    default_notification_body: str = "This is a test message from Cloud Functions"
    seed_concurrency: int = 1
    fcm_dry_run: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
