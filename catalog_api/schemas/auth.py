from pydantic import BaseModel, field_validator
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "ADMIN"


class LoginRequest(BaseModel):
    username: str
    password: str

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, value: str, info) -> str:
        if not value.strip():
            raise ValueError(f"{info.field_name.capitalize()} is required")
        return value


class LoginResponse(BaseModel):
    token: str
    username: str
    role: UserRole
