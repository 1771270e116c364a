import os

# Must be set before the app (and its settings/engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.core.security as security
from app.main import app
from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.models.profile import Profile
from app.models.user import User
from app.models.user_role import UserRoleAssignment, ADMIN_ROLE

# Cheap hashes keep the suite fast
security.BCRYPT_ROUNDS = 4

# 1. Setup In-Memory SQLite Database
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 2. Dependency Override
def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

# 3. Fixtures
@pytest.fixture
def db_session():
    import app.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client(db_session):
    with TestClient(app) as c:
        yield c

@pytest.fixture
def make_user(db_session):
    """Create an identity directly in the store (bypassing provisioning)."""
    def _make_user(email, password="password123", roles=(), profile_completed=True, name=None):
        user = User(
            email=email,
            name=name,
            hashed_password=get_password_hash(password),
            email_verified=True,
            is_active=True,
        )
        user.profile = Profile(
            profile_completed=profile_completed,
            mobile="9999999999" if profile_completed else None,
            university_roll_number="CS-001" if profile_completed else None,
        )
        for role in roles:
            user.roles.append(UserRoleAssignment(role=role))
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user

@pytest.fixture
def admin_user(make_user):
    return make_user("admin@example.com", roles=(ADMIN_ROLE,), name="Admin")

@pytest.fixture
def regular_user(make_user):
    return make_user("user@example.com", name="Normal User")

def bearer(user):
    return {"Authorization": f"Bearer {create_access_token({'sub': user.user_id})}"}

@pytest.fixture
def admin_headers(admin_user):
    return bearer(admin_user)

@pytest.fixture
def user_headers(regular_user):
    return bearer(regular_user)

@pytest.fixture
def headers_for():
    return bearer
