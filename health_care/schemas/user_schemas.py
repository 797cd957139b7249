# health_care/schemas/user_schemas.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from health_care.models.users import UserRole, UserStatus

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72

class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with API clients."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class AdminCreate(CamelModel):
    """Admin profile fields accepted when registering an admin."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    email: str
    contact_number: Optional[str] = None
    profile_photo: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Validates the address but keeps it exactly as the client sent it."""
        _, normalized = validate_email(value)
        if normalized.lower() != value.lower():
            raise ValueError("value must be a bare email address")
        return value

class CreateAdminPayload(CamelModel):
    """Schema for the admin registration request body."""
    model_config = ConfigDict(extra="forbid")

    password: str = Field(min_length=1)
    admin: AdminCreate

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        return value

class UserResponse(CamelModel):
    """User response model; the password hash is never exposed."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: UserRole
    need_password_change: bool
    status: UserStatus
    created_at: datetime
    updated_at: datetime

class AdminResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    profile_photo: Optional[str] = None
    contact_number: Optional[str] = None
    is_deleted: bool
    user_id: int
    created_at: datetime
    updated_at: datetime

class AdminCreateResult(CamelModel):
    created_user_data: UserResponse
    created_admin_data: AdminResponse
