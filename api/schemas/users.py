"""User, auth and profile schemas."""

from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field, field_validator

from api.schemas.common import CamelModel, FilterModel, UpdateModel
from database.models import UserRole


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=100)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, v):
        """Strip whitespace from name fields."""
        if isinstance(v, str):
            return v.strip()
        return v


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class SignupResponse(CamelModel):
    message: str
    user_id: int


class SessionUser(CamelModel):
    """The subset of the user returned on login."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole


class LoginResponse(CamelModel):
    message: str
    user: SessionUser


class UserResponse(CamelModel):
    """Public view of a user. Never includes the password hash."""

    id: int
    email: str
    first_name: str
    last_name: str
    profile_image_url: Optional[str] = None
    role: UserRole
    department: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(UpdateModel):
    """Self-service profile changes. Role and activation are admin-only fields."""

    non_nullable = ("email", "first_name", "last_name")

    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    department: Optional[str] = Field(None, max_length=100)


class EmployeeUpdate(ProfileUpdate):
    non_nullable = ("email", "first_name", "last_name", "role", "is_active")

    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class UserFilters(FilterModel):
    role: Optional[UserRole] = None
    department: Optional[str] = None
    is_active: Optional[bool] = None
