# file: database/recipients.py

from typing import Any, Dict, List, Optional

from app.database.connection import USERS_COLLECTION, get_firestore

# Recipient documents store device tokens under either name; earlier wins.
TOKEN_FIELDS = ("fcmTokens", "deviceTokens")


class RecipientDirectory:
    """Read-only view over the recipient documents in Firestore."""

    def __init__(self, collection: str = USERS_COLLECTION):
        self.collection = collection

    def fetch(self, recipient_id: str) -> Optional[Dict[str, Any]]:
        """
        Returns the recipient's fields, or None if no document exists.
        A document without fields comes back as an empty dict.
        """
        snapshot = get_firestore().collection(self.collection).document(recipient_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}


def extract_device_tokens(data: Dict[str, Any]) -> List[str]:
    """
    Picks the first TOKEN_FIELDS entry holding a non-empty list, then drops
    its falsy tokens. Duplicates are forwarded as stored.
    """
    for field in TOKEN_FIELDS:
        value = data.get(field)
        if isinstance(value, (list, tuple)) and value:
            return [token for token in value if token]
    return []


def get_recipient_directory() -> RecipientDirectory:
    return RecipientDirectory()
