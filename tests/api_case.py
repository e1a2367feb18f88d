"""Base TestCase for API tests: in-memory SQLite per test and a TestClient on the real app."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api.deps import get_jwt_config
from storefront.core.database import get_db
from storefront.core.security import create_access_token, hash_password
from storefront.main import app
from storefront.models import Base, User


class APITestCase(unittest.TestCase):
    """Fresh database for every test; get_db is overridden to use it."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)
        self.config = get_jwt_config()

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def create_user(
        self,
        username: str,
        email: str,
        password: str = "password123",
        role: str = "user",
        is_active: bool = True,
    ) -> User:
        """Insert a user directly (admins cannot be created through the API)."""
        db = self.SessionLocal()
        try:
            user = User(
                username=username,
                email=email,
                password_hash=hash_password(password, rounds=4),
                role=role,
                is_active=is_active,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            db.expunge(user)
            return user
        finally:
            db.close()

    def auth_headers(self, user: User) -> dict[str, str]:
        token = create_access_token(self.config, user.id, role=user.role, email=user.email)
        return {"Authorization": f"Bearer {token}"}

    def register(self, username: str = "alice", email: str = "a@x.com", password: str = "secret123"):
        return self.client.post(
            "/api/auth/register",
            json={"username": username, "email": email, "password": password},
        )
