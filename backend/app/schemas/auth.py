# app/schemas/auth.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _EmailIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        local, _, domain = value.partition("@")
        if not local or "." not in domain:
            raise ValueError("invalid email")
        return value


class RegisterIn(_EmailIn):
    password: str = Field(..., min_length=8)
    name: str = Field(..., min_length=1)
    phone: Optional[str] = None


class LoginIn(_EmailIn):
    password: str


class VerifyEmailIn(_EmailIn):
    code: str = Field(..., min_length=6, max_length=6)


class ResendIn(_EmailIn):
    pass


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    phone: Optional[str] = None
    is_email_verified: bool
    created_at: Optional[datetime] = None


class RegisterOut(BaseModel):
    user: UserOut
    email_sent: bool


class AdminLoginIn(BaseModel):
    password: str


class AdminStatus(BaseModel):
    is_admin: bool
