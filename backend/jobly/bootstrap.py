from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from jobly.auth import hash_password
from jobly.config import settings
from jobly.models.user import User


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def ensure_admin_user(engine: Engine) -> None:
    username = settings.admin_username.strip()
    if not username:
        return
    with Session(engine) as db:
        existing = db.execute(select(User).where(User.username == username)).scalar_one_or_none()
        if existing:
            return
        db.add(
            User(
                username=username,
                password_hash=hash_password(settings.admin_password),
                first_name="Admin",
                last_name="User",
                email=f"{username}@jobly.local",
                is_admin=True,
            )
        )
        db.commit()
    logger.info("Created admin user %s", username)
