"""Shared fixtures: in-memory database, API clients and seed data."""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.api.deps import admin_required, get_db
from app.core.security import hash_password
from app.main import app
from app.models import Category, Product, User, UserRole

ADMIN_EMAIL = "admin@test.local"
ADMIN_PASSWORD = "secret-password"


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def override_db(session):
    """Route every request through the test session."""
    app.dependency_overrides[get_db] = lambda: session
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(session) -> User:
    user = User(
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        name="Admin",
        role=UserRole.ADMIN,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def as_admin(override_db, admin_user):
    """Skip the JWT check for admin routes."""
    app.dependency_overrides[admin_required] = lambda: admin_user
    yield admin_user


@pytest.fixture
def client(as_admin):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def anon_client(override_db):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def categories(session) -> Dict[str, Category]:
    """microsaas, nocode and art categories keyed by slug."""
    items = [
        Category(name="Micro SaaS", slug="microsaas", sort_order=1),
        Category(name="No-Code", slug="nocode", sort_order=2),
        Category(name="Art", slug="art", sort_order=3),
    ]
    for item in items:
        session.add(item)
    session.commit()
    for item in items:
        session.refresh(item)
    return {item.slug: item for item in items}


@pytest.fixture
def make_product(session):
    """Factory inserting a product directly into the database."""

    def _make(
        title: str,
        id: Optional[int] = None,
        categories: Optional[List[Category]] = None,
        category_id: Optional[int] = None,
        tags: Optional[List[str]] = None,
        **fields,
    ) -> Product:
        product = Product(
            id=id,
            title=title,
            category_id=category_id,
            tags=tags or [],
            **fields,
        )
        product.categories = list(categories or [])
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make
