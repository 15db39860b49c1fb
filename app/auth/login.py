# app/auth/login.py
import logging
from typing import Dict, Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.auth.models import User
from app.auth.jwt_handler import create_access_token
from app.auth.dependencies import get_current_user_payload
from app.schemas.auth_schema import LoginSchema, LoginOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login_post(body: LoginSchema, db: Session = Depends(get_db)):
    email = (body.email or "").strip().lower()

    user = db.query(User).filter(User.email == email).first()
    if not user or not user.check_password(body.password):
        logger.info("Failed login for %s", email)
        raise HTTPException(status_code=401, detail="Identifiants invalides")

    roles = user.role_names
    token = create_access_token({
        "sub": str(user.id),
        "id": user.id,
        "email": user.email,
        "roles": roles,
    })

    logger.info("User %s logged in with roles %s", user.email, roles)
    return {"user": {"id": user.id, "email": user.email}, "roles": roles, "token": token}


@router.get("/me")
def read_me(payload: Dict[str, Any] = Depends(get_current_user_payload)):
    """Claims of the bearer token: id, email, roles."""
    return {"user": {"id": payload.get("id"), "email": payload.get("email")}, "roles": payload.get("roles") or []}
