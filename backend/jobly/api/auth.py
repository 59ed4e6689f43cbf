from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from jobly.auth import TokenClaims, create_access_token, ensure_logged_in, hash_password, verify_password
from jobly.database import get_db
from jobly.errors import BadRequestError, NotFoundError, UnauthorizedError
from jobly.models.user import User
from jobly.schemas.auth import RegisterRequest, TokenRequest, TokenResponse


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> TokenResponse:
    username = payload.username.strip()
    existing = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
    if existing:
        raise BadRequestError(f"Duplicate username: {username}")

    user = User(
        username=username,
        password_hash=hash_password(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        is_admin=False,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s", user.username)

    return TokenResponse(token=create_access_token(user.id, is_admin=user.is_admin))


@router.post("/token", response_model=TokenResponse)
def token(payload: TokenRequest, db: Session = Depends(get_db)) -> TokenResponse:
    user = db.execute(select(User).where(User.username == payload.username)).scalar_one_or_none()
    if not user or not user.is_active or not verify_password(payload.password, user.password_hash):
        raise UnauthorizedError("Invalid username/password")
    return TokenResponse(token=create_access_token(user.id, is_admin=user.is_admin))


@router.get("/me")
def me(claims: TokenClaims = Depends(ensure_logged_in), db: Session = Depends(get_db)) -> dict:
    user = db.get(User, claims.user_id)
    if not user:
        raise NotFoundError(f"No user: {claims.user_id}")
    return {
        "user": {
            "username": user.username,
            "firstName": user.first_name,
            "lastName": user.last_name,
            "email": user.email,
            "isAdmin": user.is_admin,
        }
    }
