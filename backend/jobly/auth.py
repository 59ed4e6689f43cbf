from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
import time
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.config import settings
from jobly.errors import UnauthorizedError


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)
DEFAULT_ITERATIONS = 210_000


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    is_admin: bool


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        DEFAULT_ITERATIONS,
    ).hex()
    return f"pbkdf2_sha256${DEFAULT_ITERATIONS}${salt}${digest}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        _, iterations_str, salt, digest = password_hash.split("$", 3)
        iterations = int(iterations_str)
    except ValueError:
        return False
    expected = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
    ).hex()
    return hmac.compare_digest(expected, digest)


def _sign(payload: str) -> str:
    return hmac.new(settings.auth_secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()


def create_access_token(user_id: int, is_admin: bool = False) -> str:
    exp = int(time.time()) + settings.token_ttl_seconds
    nonce = secrets.token_hex(6)
    payload = f"{user_id}:{int(is_admin)}:{exp}:{nonce}"
    token_raw = f"{payload}:{_sign(payload)}".encode("utf-8")
    return base64.urlsafe_b64encode(token_raw).decode("utf-8").rstrip("=")


def decode_access_token(token: str) -> TokenClaims | None:
    if not token:
        return None
    padding = "=" * (-len(token) % 4)
    try:
        decoded = base64.urlsafe_b64decode((token + padding).encode("utf-8")).decode("utf-8")
        user_id_str, admin_str, exp_str, nonce, signature = decoded.split(":", 4)
    except (ValueError, UnicodeDecodeError):
        return None

    payload = f"{user_id_str}:{admin_str}:{exp_str}:{nonce}"
    if not hmac.compare_digest(_sign(payload), signature):
        return None

    try:
        exp = int(exp_str)
        user_id = int(user_id_str)
    except ValueError:
        return None
    if exp < int(time.time()):
        return None
    return TokenClaims(user_id=user_id, is_admin=admin_str == "1")


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenClaims | None:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return None
    claims = decode_access_token(credentials.credentials)
    if claims is None:
        logger.info("Rejected invalid bearer token")
    return claims


def ensure_logged_in(claims: TokenClaims | None = Depends(get_token_claims)) -> TokenClaims:
    if claims is None:
        raise UnauthorizedError()
    return claims


def ensure_admin(claims: TokenClaims | None = Depends(get_token_claims)) -> TokenClaims:
    if claims is None or not claims.is_admin:
        raise UnauthorizedError()
    return claims
