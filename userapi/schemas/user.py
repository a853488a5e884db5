"""User Schemas — Pydantic models used as ParameterSet schemas and response shapes.

Invariants:
    - Wire names are camelCase (aliases); unknown keys are rejected
    - UserCreate.password matches \\w{6,128} somewhere in the value
    - Schemas only validate: cleaning is done by ParameterSet.apply() beforehand

Design Decisions:
    - Email checked by pattern, not EmailStr: no email-validator dependency
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PROPER_NAME_PATTERN = r"^[A-Za-z0-9]+$"


class UserCreate(BaseModel):
    """POST /users parameters."""
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(
        alias="firstName", max_length=30, pattern=PROPER_NAME_PATTERN,
    )
    last_name: str = Field(
        alias="lastName", max_length=30, pattern=PROPER_NAME_PATTERN,
    )
    email: str = Field(max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(max_length=128, pattern=r"\w{6,128}")


class UserLogin(BaseModel):
    """POST /auth/login parameters."""
    model_config = ConfigDict(extra="forbid")

    email: str = Field(max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=128)


class UserLookup(BaseModel):
    """GET /users/{userId} parameters."""
    user_id: UUID = Field(alias="userId")


class UserOut(BaseModel):
    """Public user shape. Never carries the password hash."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    email: str
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
