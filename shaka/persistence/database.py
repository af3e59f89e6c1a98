"""Firestore client setup."""

import firebase_admin
import logfire
from firebase_admin import credentials, firestore

from shaka.config import Settings


def create_firebase_app(settings: Settings) -> firebase_admin.App:
    """Initialize (or reuse) the firebase_admin app.

    Uses the service account file from settings when given, otherwise
    Application Default Credentials.

    Args:
        settings: Application settings

    Returns:
        Firebase app
    """
    name = settings.firestore.app_name
    try:
        return firebase_admin.get_app(name)
    except ValueError:
        pass  # Not initialized yet

    if settings.firestore.credentials_path:
        cred = credentials.Certificate(settings.firestore.credentials_path)
    else:
        cred = credentials.ApplicationDefault()

    options = {}
    if settings.firestore.project_id:
        options["projectId"] = settings.firestore.project_id

    app = firebase_admin.initialize_app(cred, options, name=name)
    logfire.info(
        "Firebase app initialized",
        app_name=name,
        project_id=settings.firestore.project_id,
    )
    return app


def create_client(app: firebase_admin.App) -> firestore.Client:
    """Create a Firestore client bound to the app.

    The synchronous client is used because only it supports snapshot
    listeners; repositories move blocking calls off the event loop.

    Args:
        app: Firebase app

    Returns:
        Firestore client
    """
    return firestore.client(app)
