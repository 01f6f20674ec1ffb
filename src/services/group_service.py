# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group store: lookups and mutations that emit group events."""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.events import EventBus, GroupEvent, event_bus
from src.models import Group
from src.schemas.rbac import GroupSchema

logger = logging.getLogger(__name__)


class GroupServiceError(Exception):
    """Base exception for group store errors."""


class GroupStoreUnavailableError(GroupServiceError):
    """The group store could not be read or written."""


class GroupNotFoundError(GroupServiceError):
    """No group matches the given id and shop scope."""


class DuplicateGroupError(GroupServiceError):
    """A group with the same slug already exists in the shop scope."""


def get_group(db: Session, group_id: uuid.UUID) -> Group | None:
    """Get a group by its primary key."""
    try:
        return db.get(Group, group_id)
    except SQLAlchemyError as e:
        raise GroupStoreUnavailableError(f"Group lookup failed: {e}") from e


def get_group_by_slug(
    db: Session, shop_id: uuid.UUID | None, slug: str
) -> Group | None:
    """Get the group with the given slug in a shop scope (None for global)."""
    query = db.query(Group).filter(Group.slug == slug)
    if shop_id is None:
        query = query.filter(Group.shop_id.is_(None))
    else:
        query = query.filter(Group.shop_id == shop_id)
    try:
        return query.first()
    except SQLAlchemyError as e:
        raise GroupStoreUnavailableError(f"Group lookup failed: {e}") from e


async def create_group(
    db: Session,
    name: str,
    slug: str,
    shop_id: uuid.UUID | None = None,
    permissions: Iterable[str] | None = None,
    bus: EventBus = event_bus,
) -> Group:
    """Create a group and publish GROUP_CREATED.

    Handlers run before this returns; with a propagating bus their failures
    are raised from here after the group itself has been committed.
    """
    group = Group(
        name=name,
        slug=slug,
        shop_id=shop_id,
        permissions=list(permissions or []),
    )
    try:
        db.add(group)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateGroupError(
            f"Group '{slug}' already exists for shop {shop_id}"
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        raise GroupStoreUnavailableError(f"Group creation failed: {e}") from e

    db.refresh(group)
    logger.info(f"Created group {group.id} ({slug}) for shop {shop_id}")

    await bus.publish(
        GroupEvent.GROUP_CREATED,
        {"group": GroupSchema.model_validate(group)},
        source="group_service",
    )
    return group


async def update_group_permissions(
    db: Session,
    group_id: uuid.UUID,
    shop_id: uuid.UUID | None,
    permissions: Iterable[str],
    bus: EventBus = event_bus,
) -> Group:
    """Replace a group's permission list and publish GROUP_UPDATED.

    The event lists ``permissions`` among the updated fields.

    Raises:
        GroupNotFoundError: No group with this id exists in the shop scope
        GroupStoreUnavailableError: The store could not be read or written
    """
    group = get_group(db, group_id)
    if group is None or group.shop_id != shop_id:
        raise GroupNotFoundError(f"Group {group_id} not found for shop {shop_id}")

    group.permissions = list(permissions)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise GroupStoreUnavailableError(f"Group update failed: {e}") from e

    db.refresh(group)
    logger.debug(f"Updated permissions of group {group.id}")

    await bus.publish(
        GroupEvent.GROUP_UPDATED,
        {
            "group": GroupSchema.model_validate(group),
            "updated_fields": ["permissions"],
        },
        source="group_service",
    )
    return group
