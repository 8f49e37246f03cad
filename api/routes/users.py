"""
Employee directory and self-service profile endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.users import EmployeeUpdate, ProfileUpdate, UserFilters, UserResponse
from api.services import users as user_service
from api.services.activity import record_activity
from database.engine import get_db
from database.models import User, UserRole

router = APIRouter(tags=["employees"])


@router.get("/employees", response_model=list[UserResponse], summary="List Employees")
async def list_employees(
    role: Optional[UserRole] = Query(None, description="Filter by role"),
    department: Optional[str] = Query(None, description="Filter by department"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = UserFilters(role=role, department=department, is_active=is_active)
    return await user_service.list_users(db, filters)


@router.put("/employees/{user_id}", response_model=UserResponse, summary="Update Employee")
async def update_employee(
    payload: EmployeeUpdate,
    user_id: int = Path(..., description="User ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    """Users are deactivated with ``isActive: false``; there is no delete."""
    changes = payload.changes()
    employee = await user_service.update_user(db, user_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_employee",
        entity_type="user",
        entity_id=employee.id,
        description=f"Updated employee: {employee.full_name}",
        metadata={"fields": sorted(changes)},
    )
    return employee


@router.get("/profile", response_model=UserResponse, summary="Get Profile")
async def get_profile(current_user: User = Depends(require_active_user)):
    return current_user


@router.put("/profile", response_model=UserResponse, summary="Update Profile")
async def update_profile(
    payload: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    changes = payload.changes()
    user = await user_service.update_user(db, current_user.id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_profile",
        entity_type="user",
        entity_id=user.id,
        description="Updated profile",
        metadata={"fields": sorted(changes)},
    )
    return user
