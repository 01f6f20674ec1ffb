# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class BundleKind(str, Enum):
    """Recognized group kinds, keyed by the group slug.

    Groups whose slug is not listed here are custom groups and receive no
    default permissions.
    """

    ACCOUNTS_MANAGER = "accounts-manager"
    SYSTEM_MANAGER = "system-manager"
    SHOP_MANAGER = "shop manager"
    SHOP_OWNER = "owner"

    @classmethod
    def from_slug(cls, slug: str | None) -> "BundleKind | None":
        """Return the kind for a group slug, or None for custom slugs."""
        if not slug:
            return None
        try:
            return cls(slug)
        except ValueError:
            return None
