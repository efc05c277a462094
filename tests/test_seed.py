"""Tests for the seed script and logging setup."""

import logging

from sqlmodel import select

from app.core.config import settings
from app.core.logging import setup_logging
from app.core.security import verify_password
from app.models import Category, User, UserRole
from app.scripts.seed import seed_admin, seed_categories


def test_seed_categories_is_idempotent(session):
    seed_categories(session)
    seed_categories(session)

    slugs = [c.slug for c in session.exec(select(Category).order_by(Category.sort_order)).all()]
    assert slugs == ["microsaas", "nocode"]


def test_seed_admin_skipped_without_password(session, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", None)

    seed_admin(session)

    assert session.exec(select(User)).all() == []


def test_seed_admin_creates_once(session, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAIL", "owner@test.local")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "owner-pass")

    seed_admin(session)
    seed_admin(session)

    users = session.exec(select(User)).all()
    assert len(users) == 1
    assert users[0].role == UserRole.ADMIN
    assert verify_password("owner-pass", users[0].password_hash)


def test_setup_logging_sets_level():
    root = logging.getLogger()
    handlers = list(root.handlers)

    setup_logging("debug")
    assert root.level == logging.DEBUG

    setup_logging("warning")
    assert root.level == logging.WARNING
    # Handler is installed only once
    assert len(root.handlers) <= len(handlers) + 1
