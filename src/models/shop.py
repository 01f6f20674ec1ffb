# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shop (tenant) model."""

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.group import Group


class Shop(Base, TimestampMixin):
    """Tenant that owns shop-scoped groups."""

    __tablename__ = "shops"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # At most one shop is primary; maintained by shop_service.set_primary_shop
    is_primary: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        index=True,
    )

    groups: Mapped[list["Group"]] = relationship(
        "Group",
        back_populates="shop",
        cascade="all, delete-orphan",
    )
