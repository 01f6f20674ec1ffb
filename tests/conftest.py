# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_DEFAULT_ROLES"] = "true"

from src.api.deps import get_db
from src.events import EventBus
from src.main import app
from src.models import Shop
from src.models.base import Base
from src.services import group_sync_service, shop_service

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def bus(db_session) -> EventBus:
    """Event bus with the group sync handlers registered."""
    event_bus = EventBus(propagate_errors=True)
    group_sync_service.register_group_sync_handlers(event_bus, TestingSessionLocal)
    return event_bus


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def primary_shop(db_session) -> Shop:
    """Create the primary shop."""
    return shop_service.create_shop(db_session, "Main Shop", is_primary=True)


@pytest.fixture
def other_shop(db_session) -> Shop:
    """Create a regular, non-primary shop."""
    return shop_service.create_shop(db_session, "Second Shop")
