# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role registry entry model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base, TimestampMixin


class Role(Base, TimestampMixin):
    """A registered permission identifier.

    The registry only records that a permission exists so it can be listed;
    the name is the primary key, which keeps entries unique.
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
