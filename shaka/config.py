"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FirestoreSettings(BaseModel):
    """Firestore connection configuration."""

    # GCP project hosting the database (falls back to the credentials' project)
    project_id: str | None = None

    # Path to a service account JSON file
    # When unset, Application Default Credentials are used
    credentials_path: str | None = None

    # Name of the firebase_admin app, so several apps can coexist in one process
    app_name: str = "shaka"


class NotificationSettings(BaseModel):
    """Notification configuration."""

    # Number of comment characters copied into the notification snippet
    snippet_length: int = Field(default=50, ge=0)


class ThreadSettings(BaseModel):
    """Comment thread controller configuration."""

    # Seconds the submit lock stays held after an accepted submission
    submit_cooldown_seconds: float = Field(default=1.0, ge=0)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested sections:

        ENVIRONMENT=production
        FIRESTORE__PROJECT_ID=shaka-prod
        FIRESTORE__CREDENTIALS_PATH=/secrets/service-account.json
        THREAD__SUBMIT_COOLDOWN_SECONDS=1.0
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows FIRESTORE__PROJECT_ID syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    firestore: FirestoreSettings = FirestoreSettings()
    notifications: NotificationSettings = NotificationSettings()
    thread: ThreadSettings = ThreadSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
