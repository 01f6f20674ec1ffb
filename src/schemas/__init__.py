# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""

from src.schemas.rbac import GroupSchema, RoleSchema

__all__ = [
    "GroupSchema",
    "RoleSchema",
]
