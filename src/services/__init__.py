# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from src.services import (
    group_service,
    group_sync_service,
    role_registry_service,
    shop_service,
)

__all__ = [
    "group_service",
    "group_sync_service",
    "role_registry_service",
    "shop_service",
]
