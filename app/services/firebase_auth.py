from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth

# auto_error=False lets the route decide how a missing token is reported.
bearer_scheme = HTTPBearer(auto_error=False)

BEARER_PREFIX = "Bearer "


async def get_bearer_token(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """
    Returns the token from an 'Authorization: Bearer <token>' header,
    or None if the header is absent, has no token, or does not start with
    exactly 'Bearer '. bearer_scheme only documents the scheme in OpenAPI.
    """
    authorization = request.headers.get("Authorization", "")
    if not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):] or None


class FirebaseTokenVerifier:
    """Verifies Firebase ID tokens presented by callers."""

    def verify(self, id_token: str) -> dict:
        # Raises on invalid, expired or revoked tokens.
        return auth.verify_id_token(id_token)


def get_token_verifier() -> FirebaseTokenVerifier:
    return FirebaseTokenVerifier()
