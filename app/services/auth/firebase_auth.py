"""Firebase Authentication Service Module

This module verifies Firebase ID tokens and exposes the verified caller to the
route layer. Token issuance and user management stay with Firebase; this service
only trusts what a verified token says about the caller.

The Firebase app is initialized on first use so importing the module does not
require credentials.

Dependencies:
- firebase_admin: For Firebase ID token verification.
- fastapi: For request access and dependency injection.
- loguru: For logging operations.
- app.schemas.auth.user_auth_schemas: For the authenticated user model.
- app.errors.exceptions: For custom exception handling.

Author: @kcaparas1630
"""

import os
import threading
import firebase_admin
from firebase_admin import auth, credentials
from fastapi import Depends, Request
from loguru import logger
from app.schemas.auth.user_auth_schemas import AuthenticatedUser
from app.errors.exceptions import Unauthorized, Forbidden

_firebase_lock = threading.Lock()


def _firebase_initialized() -> bool:
    try:
        firebase_admin.get_app()
        return True
    except ValueError:
        return False


def _ensure_firebase_app():
    """Initialize the default Firebase app once, from FIREBASE_CREDENTIALS_PATH."""
    if _firebase_initialized():
        return
    with _firebase_lock:
        if _firebase_initialized():
            return
        file_path = os.getenv("FIREBASE_CREDENTIALS_PATH")
        # Check if credentials exists
        if not file_path or not os.path.exists(file_path):
            logger.error(f"Firebase credentials file not found at {file_path}")
            raise FileNotFoundError(f"Firebase credentials file not found at {file_path}")
        cred = credentials.Certificate(file_path)
        firebase_admin.initialize_app(cred)
        logger.info("Firebase app initialized")


def verify_id_token(id_token: str):
    """Verify Firebase ID token and extract user information.

    Args:
        id_token (str): Firebase ID token to verify

    Returns:
        tuple: (decoded_token, uid) if valid, (None, None) if invalid

    Note:
        Checks if token is revoked using check_revoked=True parameter
    """
    _ensure_firebase_app()
    try:
        decoded_token = auth.verify_id_token(id_token, check_revoked=True)
        uid = decoded_token['uid']
        return decoded_token, uid
    except (auth.InvalidIdTokenError, auth.UserDisabledError, ValueError) as e:
        # Token is invalid, expired, revoked or belongs to a disabled user.
        logger.warning(f"Rejected ID token: {e}")
        return None, None


def get_current_user(request: Request) -> AuthenticatedUser:
    """Extract and verify the Firebase ID token from the Authorization header.

    Serves as a FastAPI dependency for every interview endpoint. The admin flag
    comes from an ``admin`` custom claim or a ``role`` claim equal to "admin".

    Args:
        request (Request): FastAPI request object containing headers

    Returns:
        AuthenticatedUser: The verified caller

    Raises:
        Unauthorized: 401 if the header is missing or the token is invalid or expired
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise Unauthorized("Missing or invalid authorization header")

    token = auth_header.split(" ", 1)[1]
    decoded_token, uid = verify_id_token(token)
    if not uid:
        raise Unauthorized("Invalid or expired token")

    return AuthenticatedUser(
        uid=uid,
        email=decoded_token.get("email", ""),
        is_admin=bool(decoded_token.get("admin")) or decoded_token.get("role") == "admin"
    )


def require_admin(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
    """FastAPI dependency that only lets administrators through."""
    if not user.is_admin:
        logger.warning(f"User {user.uid} attempted an admin operation")
        raise Forbidden("Access denied")
    return user
