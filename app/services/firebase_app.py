import json
import logging
import os

import firebase_admin
from firebase_admin import credentials

logger = logging.getLogger(__name__)

SERVICE_ACCOUNT_ENV = "FIREBASE_SERVICE_ACCOUNT_JSON"


def load_service_account() -> dict:
    """
    Reads the service-account document from the environment.
    Raises RuntimeError if it is missing or not valid JSON.
    """
    raw = os.getenv(SERVICE_ACCOUNT_ENV)
    if not raw:
        raise RuntimeError(f"Missing {SERVICE_ACCOUNT_ENV}")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"{SERVICE_ACCOUNT_ENV} is not valid JSON: {e}") from e


def init_firebase():
    """
    Initializes the default Firebase app once per process.
    An app that is already initialized is returned untouched.
    """
    if firebase_admin._apps:
        logger.info("Firebase Admin SDK already initialized.")
        return firebase_admin.get_app()

    cred = credentials.Certificate(load_service_account())
    firebase_app = firebase_admin.initialize_app(cred)
    logger.info("Firebase Admin SDK initialized successfully.")
    return firebase_app
