from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.auth import create_access_token, hash_password
from jobly.database import Base, build_engine, get_db
from jobly.main import app
from jobly.models import Company, Job, User


@pytest.fixture()
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def seed(engine) -> dict:
    """Companies c1..c3, jobs Job1..Job4 (all at c1), a plain user and an admin."""
    with Session(engine) as session:
        session.add_all(
            [
                Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
                Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
                Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
            ]
        )
        session.flush()
        jobs = [
            Job(title="Job1", salary=100, equity="0.1", company_handle="c1"),
            Job(title="Job2", salary=200, equity="0.2", company_handle="c1"),
            Job(title="Job3", salary=300, equity="0", company_handle="c1"),
            Job(title="Job4", salary=None, equity=None, company_handle="c1"),
        ]
        u1 = User(
            username="u1",
            password_hash=hash_password("password1"),
            first_name="U1F",
            last_name="U1L",
            email="user1@user.com",
            is_admin=False,
        )
        admin = User(
            username="admin",
            password_hash=hash_password("password2"),
            first_name="AdF",
            last_name="AdL",
            email="admin@user.com",
            is_admin=True,
        )
        session.add_all([*jobs, u1, admin])
        session.flush()
        ids = {
            "job_ids": [job.id for job in jobs],
            "u1_id": u1.id,
            "admin_id": admin.id,
        }
        session.commit()
    return ids


@pytest.fixture()
def db(engine, seed):
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    yield session
    session.close()


@pytest.fixture()
def job_ids(seed) -> list[int]:
    return seed["job_ids"]


@pytest.fixture()
def u1_token(seed) -> str:
    return create_access_token(seed["u1_id"], is_admin=False)


@pytest.fixture()
def admin_token(seed) -> str:
    return create_access_token(seed["admin_id"], is_admin=True)


@pytest.fixture()
def client(engine, seed):
    testing_session = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        session = testing_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
