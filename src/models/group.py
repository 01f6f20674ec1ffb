# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization group model."""

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import JSON, ForeignKey, Index, String, UniqueConstraint, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.shop import Shop


class Group(Base, TimestampMixin):
    """A named bundle of permission identifiers, global or shop-scoped.

    Groups without a shop_id are global. The slug identifies the bundle kind
    and is unique within its shop scope.
    """

    __tablename__ = "groups"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    shop_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("shops.id", ondelete="CASCADE"),
        nullable=True,
    )
    permissions: Mapped[list[str]] = mapped_column(
        JSON,  # ordered list of permission identifiers
        default=list,
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("shop_id", "slug", name="_group_shop_slug_uc"),
        # NULL shop_ids never collide in the constraint above
        Index(
            "ix_groups_global_slug",
            "slug",
            unique=True,
            sqlite_where=text("shop_id IS NULL"),
            postgresql_where=text("shop_id IS NULL"),
        ),
    )

    shop: Mapped["Shop"] = relationship("Shop", back_populates="groups")
