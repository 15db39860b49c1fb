# app/auth/dependencies.py
from typing import Dict, Any, Optional
import logging

from fastapi import Header, HTTPException

from app.auth.jwt_handler import decode_jwt

logger = logging.getLogger(__name__)


def _extract_bearer(auth_header: Optional[str]) -> Optional[str]:
    """'Bearer <token>' -> token; None for a missing or malformed header."""
    scheme, _, token = (auth_header or "").strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        return None
    return token


def get_current_user_payload(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """Claims of a valid bearer token (id, email, roles); 401 otherwise."""
    token = _extract_bearer(authorization)
    if not token:
        raise HTTPException(status_code=401, detail="Missing auth token")

    payload = decode_jwt(token)
    if payload is None:
        logger.warning("Rejected invalid or expired bearer token")
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return payload
