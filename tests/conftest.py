import pytest
from fastapi.testclient import TestClient

from health_care.config import Settings
from health_care.database import Base, create_db_engine, create_session_factory
from health_care.main import create_app
from health_care.models import Admin, User, UserRole


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL="sqlite://",
        BCRYPT_ROUNDS=4,
        LOG_DIR=str(tmp_path / "logs"),
    )


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def app_db(client):
    """Session bound to the database the running test app uses."""
    session = client.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_admin():
    """Inserts a user and admin profile directly, bypassing password hashing."""
    def _add_admin(session, name, email, contact_number=None, profile_photo=None):
        user = User(email=email, hashed_password="not-a-real-hash", role=UserRole.ADMIN)
        session.add(user)
        session.flush()
        admin = Admin(
            name=name,
            email=email,
            contact_number=contact_number,
            profile_photo=profile_photo,
            user_id=user.id,
        )
        session.add(admin)
        session.commit()
        return admin
    return _add_admin
