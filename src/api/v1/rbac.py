# src/api/v1/rbac.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db
from src.schemas.rbac import RoleSchema
from src.services import role_registry_service

router = APIRouter()


@router.get("/roles", response_model=list[RoleSchema], summary="List all registered roles")
def list_roles(db: Session = Depends(get_db)):
    """Retrieve every permission identifier known to the role registry.

    The registry contains the built-in defaults plus every permission that
    has ever been assigned to a group.
    """
    try:
        return role_registry_service.list_roles(db)
    except role_registry_service.RoleRegistryUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Role registry unavailable",
        ) from e
