# app/auth/jwt_handler.py
# Uses python-jose to create/verify the bearer tokens returned by /api/login
from datetime import datetime, timedelta
from typing import Dict, Any, Optional

from jose import jwt, JWTError

from app.config import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES


def create_access_token(payload: Dict[str, Any], expires_minutes: Optional[int] = None) -> str:
    """
    Create a JWT token with an 'exp' claim.
    payload: a dict, e.g. {"sub": "4", "id": 4, "email": "a@b.tn", "roles": ["admin"]}
    Defaults to ACCESS_TOKEN_EXPIRE_MINUTES (24 hours).
    """
    to_encode = payload.copy()
    minutes = ACCESS_TOKEN_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
    to_encode.update({"exp": datetime.utcnow() + timedelta(minutes=minutes)})
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_jwt(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and verify a JWT token. Returns payload dict on success, otherwise None.
    """
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None
