# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shop (tenant) persistence and primary shop designation."""

import logging
import uuid

from sqlalchemy.orm import Session

from src.models import Shop

logger = logging.getLogger(__name__)


class ShopNotFoundError(Exception):
    """Shop does not exist."""


def create_shop(db: Session, name: str, is_primary: bool = False) -> Shop:
    """Create a shop, optionally making it the primary shop."""
    shop = Shop(name=name, is_primary=False)
    db.add(shop)
    db.flush()
    if is_primary:
        _clear_primary(db, keep=shop.id)
        shop.is_primary = True
    db.commit()
    db.refresh(shop)
    return shop


def set_primary_shop(db: Session, shop_id: uuid.UUID) -> Shop:
    """Mark a shop as primary, clearing the flag on any other shop."""
    shop = db.get(Shop, shop_id)
    if shop is None:
        raise ShopNotFoundError(f"Shop {shop_id} not found")

    _clear_primary(db, keep=shop.id)
    shop.is_primary = True
    db.commit()
    db.refresh(shop)
    logger.info(f"Shop {shop.id} is now the primary shop")
    return shop


def get_primary_shop_id(db: Session) -> uuid.UUID | None:
    """Get the primary shop id, or None when no shop is primary."""
    row = db.query(Shop.id).filter(Shop.is_primary.is_(True)).first()
    return row[0] if row else None


def _clear_primary(db: Session, keep: uuid.UUID) -> None:
    db.query(Shop).filter(Shop.is_primary.is_(True), Shop.id != keep).update(
        {Shop.is_primary: False}, synchronize_session="fetch"
    )
