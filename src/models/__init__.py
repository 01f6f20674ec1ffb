# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.base import Base, TimestampMixin
from src.models.enums import BundleKind
from src.models.group import Group
from src.models.role import Role
from src.models.shop import Shop

__all__ = [
    "Base",
    "BundleKind",
    "Group",
    "Role",
    "Shop",
    "TimestampMixin",
]
