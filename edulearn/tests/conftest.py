import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from edulearn.core.config import get_settings
from edulearn.db.base import Base
from edulearn.api.deps import get_db
from edulearn.core.security import create_admin_token, create_user_token, hash_password
from edulearn.models import Admin, AdminRole, Subject, SubjectCategory, Topic, User


@pytest.fixture(scope="session")
def db_engine(tmp_path_factory):
    db_path = tmp_path_factory.mktemp("data") / "test.db"
    os.environ["DATABASE_URL"] = f"sqlite:///{db_path}"
    os.environ["FILES_DIR"] = str(tmp_path_factory.mktemp("uploads"))
    get_settings.cache_clear()
    settings = get_settings()
    engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)


@pytest.fixture()
def db_session(db_engine):
    session_local = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = session_local()
    try:
        yield db
    finally:
        db.close()
        with db_engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())


@pytest.fixture()
def client(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from edulearn.main import app

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def superadmin(db_session):
    admin = Admin(
        username="admin",
        email="admin@edulearn.com",
        password_hash=hash_password("admin123"),
        role=AdminRole.superadmin,
    )
    db_session.add(admin)
    db_session.commit()
    return admin


@pytest.fixture()
def learner(db_session):
    user = User(name="Ada", email="ada@example.com", password_hash=hash_password("secret123"))
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture()
def admin_headers(superadmin):
    return {"x-auth-token": create_admin_token(superadmin.id)}


@pytest.fixture()
def user_headers(learner):
    return {"x-auth-token": create_user_token(learner.id)}


@pytest.fixture()
def catalog_data(db_session):
    python = Subject(
        name="Python", slug="python", description="Python basics",
        category=SubjectCategory.programming, order=2,
    )
    algebra = Subject(
        name="Algebra", slug="algebra", description="Numbers",
        category=SubjectCategory.mathematics, order=1,
    )
    hidden = Subject(
        name="Hidden", slug="hidden", description="Draft",
        category=SubjectCategory.other, order=0, is_active=False,
    )
    db_session.add_all([python, algebra, hidden])
    db_session.flush()

    variables = Topic(subject_id=python.id, title="Variables", slug="variables", order=1)
    intro = Topic(subject_id=python.id, title="Intro", slug="intro", order=0)
    draft = Topic(subject_id=python.id, title="Draft", slug="draft", order=2, is_active=False)
    db_session.add_all([variables, intro, draft])
    db_session.flush()
    variables.prerequisites.append(intro)
    db_session.commit()
    return {
        "python": python,
        "algebra": algebra,
        "hidden": hidden,
        "intro": intro,
        "variables": variables,
        "draft": draft,
    }
