# src/schemas/rbac.py
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field


class RoleSchema(BaseModel):
    """Schema representing a registered role."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    created_at: datetime.datetime


class GroupSchema(BaseModel):
    """Snapshot of a group carried in group event payloads."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    shop_id: uuid.UUID | None = None
    permissions: list[str] = Field(default_factory=list)
