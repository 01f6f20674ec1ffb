# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role registry: the durable set of known permission identifiers."""

import logging
from collections.abc import Iterable

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models import Role

logger = logging.getLogger(__name__)

# Dialects with a native "insert ... on conflict do nothing"
UPSERT_DIALECTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class RoleRegistryError(Exception):
    """Base exception for role registry errors."""


class RoleRegistryUnavailableError(RoleRegistryError):
    """The role registry could not be read or written."""


def ensure_roles(db: Session, permissions: Iterable[str]) -> list[str]:
    """Register every permission identifier that is not yet a role.

    This function is idempotent. Inserts skip names that already exist, so
    concurrent calls with overlapping names never create duplicates.

    @param db: SQLAlchemy Session object
    @param permissions: permission identifiers, duplicates allowed
    @return: names registered by this call, in order of first appearance
    """
    names = list(dict.fromkeys(permissions))
    if not names:
        return []

    try:
        existing = _registered_names(db, names)
        missing = [name for name in names if name not in existing]
        if not missing:
            return []

        insert = UPSERT_DIALECTS.get(db.get_bind().dialect.name)
        if insert is not None:
            statement = (
                insert(Role)
                .values([{"name": name} for name in missing])
                .on_conflict_do_nothing(index_elements=["name"])
                .returning(Role.name)
            )
            inserted = set(db.scalars(statement).all())
            created = [name for name in missing if name in inserted]
        else:
            created = _insert_with_savepoints(db, missing)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Role registry unavailable: {e}")
        raise RoleRegistryUnavailableError(f"Role registry unavailable: {e}") from e

    if created:
        logger.info(f"Registered {len(created)} new roles: {', '.join(created)}")
    return created


def _registered_names(db: Session, names: list[str]) -> set[str]:
    return {
        name for (name,) in db.query(Role.name).filter(Role.name.in_(names)).all()
    }


def _insert_with_savepoints(db: Session, names: list[str]) -> list[str]:
    """Insert roles one by one, skipping names another writer created first."""
    created = []
    for name in names:
        try:
            with db.begin_nested():
                db.add(Role(name=name))
        except IntegrityError:
            logger.debug(f"Role {name} was registered concurrently")
            continue
        created.append(name)
    return created


def list_roles(db: Session) -> list[Role]:
    """Get all registered roles ordered by name."""
    try:
        return db.query(Role).order_by(Role.name).all()
    except SQLAlchemyError as e:
        logger.error(f"Role registry unavailable: {e}")
        raise RoleRegistryUnavailableError(f"Role registry unavailable: {e}") from e
