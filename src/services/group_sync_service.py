# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Keeps group permissions and the role registry consistent.

New groups without explicit permissions receive defaults for their bundle
kind. Shop groups prefer the permissions of the same group on the primary
shop over the built-in defaults. Every permission assigned to a group is
registered as a role so that it can be listed.
"""

import logging
from collections.abc import Callable, Collection

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.events import EventBus, EventPayload, GroupEvent, event_bus
from src.models import BundleKind
from src.rbac.roles import SHOP_GROUP_KINDS, catalog_for
from src.schemas.rbac import GroupSchema

from . import group_service, role_registry_service, shop_service

logger = logging.getLogger(__name__)

SUBSCRIBER_ID = "group-sync"

# Global kinds that always get their built-in defaults
GLOBAL_GROUP_KINDS = (BundleKind.ACCOUNTS_MANAGER, BundleKind.SYSTEM_MANAGER)


def resolve_inherited_permissions(db: Session, slug: str) -> list[str] | None:
    """Get the permissions a new shop group should inherit.

    Returns None for slugs that are not shop groups, without any lookup.
    Otherwise returns the non-empty permission list of the group with the
    same slug on the primary shop, falling back to the built-in defaults
    when there is no primary shop, no such group, or its list is empty.

    Raises:
        GroupStoreUnavailableError: The primary shop or group lookup failed
    """
    kind = BundleKind.from_slug(slug)
    if kind not in SHOP_GROUP_KINDS:
        return None
    defaults = list(catalog_for(kind) or ())

    try:
        primary_shop_id = shop_service.get_primary_shop_id(db)
    except SQLAlchemyError as e:
        raise group_service.GroupStoreUnavailableError(
            f"Primary shop lookup failed: {e}"
        ) from e
    if primary_shop_id is None:
        logger.debug(f"No primary shop, using default permissions for '{slug}'")
        return defaults

    primary_group = group_service.get_group_by_slug(db, primary_shop_id, slug)
    if primary_group is not None and len(primary_group.permissions or []) > 0:
        logger.debug(f"Inheriting '{slug}' permissions from shop {primary_shop_id}")
        return list(primary_group.permissions)
    return defaults


def default_permissions_for(db: Session, group: GroupSchema) -> list[str]:
    """Decide the initial permissions of a group created without any."""
    kind = BundleKind.from_slug(group.slug)
    if kind in GLOBAL_GROUP_KINDS:
        return list(catalog_for(kind) or ())
    if group.shop_id is not None and kind in SHOP_GROUP_KINDS:
        return resolve_inherited_permissions(db, group.slug) or []
    return []


async def handle_group_created(
    db: Session, group: GroupSchema, bus: EventBus = event_bus
) -> list[str] | None:
    """Assign initial permissions to a newly created group.

    Explicitly supplied permissions are never overwritten; they are only
    registered as roles and None is returned. Otherwise the group is updated
    (even to an empty list) and the registry is synced with the result.
    """
    if len(group.permissions) > 0:
        logger.debug(f"Group {group.id} was created with permissions, keeping them")
        role_registry_service.ensure_roles(db, group.permissions)
        return None

    permissions = default_permissions_for(db, group)
    logger.info(
        f"Assigning {len(permissions)} permissions to new group "
        f"{group.id} ({group.slug})"
    )
    await group_service.update_group_permissions(
        db, group.id, group.shop_id, permissions, bus=bus
    )
    role_registry_service.ensure_roles(db, permissions)
    return permissions


def handle_group_updated(
    db: Session, group: GroupSchema, updated_fields: Collection[str] | None
) -> list[str]:
    """Register the group's permissions as roles when they changed.

    Returns the names newly added to the registry.
    """
    if not isinstance(updated_fields, (list, tuple, set, frozenset)):
        return []
    if "permissions" not in updated_fields:
        return []
    return role_registry_service.ensure_roles(db, group.permissions)


def seed_default_roles(db: Session) -> list[str]:
    """Register every built-in default permission set.

    This function is idempotent.
    """
    created = []
    for kind in BundleKind:
        defaults = catalog_for(kind) or ()
        created.extend(role_registry_service.ensure_roles(db, defaults))
    return created


def register_group_sync_handlers(
    bus: EventBus, session_factory: Callable[[], Session]
) -> None:
    """Subscribe the reconcilers to group events.

    Each delivery uses its own session. Calling this again replaces the
    previous registration.

    The handlers are coroutines but run synchronous SQLAlchemy sessions, so
    database I/O blocks the event loop for the duration of each query.
    """

    async def on_group_created(payload: EventPayload) -> None:
        group = GroupSchema.model_validate(payload.data["group"])
        db = session_factory()
        try:
            await handle_group_created(db, group, bus=bus)
        finally:
            db.close()

    async def on_group_updated(payload: EventPayload) -> None:
        group = GroupSchema.model_validate(payload.data["group"])
        db = session_factory()
        try:
            handle_group_updated(db, group, payload.data.get("updated_fields"))
        finally:
            db.close()

    bus.unsubscribe_all(SUBSCRIBER_ID)
    bus.subscribe(GroupEvent.GROUP_CREATED, on_group_created, SUBSCRIBER_ID)
    bus.subscribe(GroupEvent.GROUP_UPDATED, on_group_updated, SUBSCRIBER_ID)
