# file: database/connection.py

import os
from dotenv import load_dotenv
from firebase_admin import firestore

load_dotenv()

USERS_COLLECTION = os.getenv("USERS_COLLECTION", "users_v2")


def get_firestore():
    """Returns the Firestore client bound to the default Firebase app."""
    return firestore.client()
