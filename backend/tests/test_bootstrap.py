from sqlalchemy import func, select
from sqlalchemy.orm import Session

from jobly.auth import verify_password
from jobly.bootstrap import ensure_admin_user
from jobly.config import settings
from jobly.models.user import User


def test_ensure_admin_user_creates_missing_admin(engine, seed, monkeypatch):
    monkeypatch.setattr(settings, "admin_username", "boss")
    monkeypatch.setattr(settings, "admin_password", "boss-pass")

    ensure_admin_user(engine)

    with Session(engine) as db:
        boss = db.execute(select(User).where(User.username == "boss")).scalar_one()
        assert boss.is_admin
        assert verify_password("boss-pass", boss.password_hash)


def test_ensure_admin_user_leaves_existing_user(engine, seed, monkeypatch):
    monkeypatch.setattr(settings, "admin_username", "u1")

    ensure_admin_user(engine)

    with Session(engine) as db:
        u1 = db.execute(select(User).where(User.username == "u1")).scalar_one()
        assert not u1.is_admin
        assert db.execute(select(func.count()).select_from(User)).scalar_one() == 2
