# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for shop_service."""

import uuid

import pytest

from src.models import Shop
from src.services import shop_service
from src.services.shop_service import ShopNotFoundError


def test_no_primary_shop(db_session):
    shop_service.create_shop(db_session, "Plain")

    assert shop_service.get_primary_shop_id(db_session) is None


def test_create_primary_shop(db_session, primary_shop):
    assert primary_shop.is_primary is True
    assert shop_service.get_primary_shop_id(db_session) == primary_shop.id


def test_only_one_primary_shop(db_session, primary_shop):
    newer = shop_service.create_shop(db_session, "Newer", is_primary=True)

    db_session.refresh(primary_shop)
    assert primary_shop.is_primary is False
    assert shop_service.get_primary_shop_id(db_session) == newer.id
    assert db_session.query(Shop).filter(Shop.is_primary.is_(True)).count() == 1


def test_set_primary_shop(db_session, primary_shop, other_shop):
    shop_service.set_primary_shop(db_session, other_shop.id)

    db_session.refresh(primary_shop)
    assert primary_shop.is_primary is False
    assert shop_service.get_primary_shop_id(db_session) == other_shop.id


def test_set_primary_shop_unknown(db_session):
    with pytest.raises(ShopNotFoundError):
        shop_service.set_primary_shop(db_session, uuid.uuid4())
