"""
Request identity resolution.

The practice endpoints only need a numeric user id. It is taken from the
trusted header set by the gateway, or else from a Bearer token signed with
the shared auth secret.
"""
from fastapi import Request
from typing import Optional
import jwt
import logging

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.utils.text_utils import parse_int

logger = logging.getLogger(__name__)

JWT_ALGORITHMS = ["HS256"]


def _parse_user_id(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    user_id = parse_int(value)
    return user_id if user_id is not None and user_id > 0 else None


def user_id_from_token(token: str) -> Optional[int]:
    """Verify a Bearer token and return its userId claim, or None if it is unusable."""
    if not settings.auth_secret:
        logger.warning("Bearer token received but AUTH_SECRET is not configured")
        return None
    try:
        payload = jwt.decode(token, settings.auth_secret, algorithms=JWT_ALGORITHMS)
    except jwt.PyJWTError as e:
        logger.info(f"Rejected Bearer token: {type(e).__name__}")
        return None
    return _parse_user_id(payload.get("userId"))


def get_current_user_id(request: Request) -> int:
    """Dependency resolving the authenticated user id for the request."""
    user_id = _parse_user_id(request.headers.get(settings.trusted_user_header))
    if user_id is not None:
        return user_id

    auth_header = request.headers.get("authorization", "")
    if auth_header.startswith("Bearer "):
        user_id = user_id_from_token(auth_header[len("Bearer "):])
        if user_id is not None:
            return user_id

    raise AuthenticationError("Not authenticated")
