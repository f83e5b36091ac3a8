from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .forms import validate_email_field


class RegisterRequestDTO(BaseModel):
    email: str = Field(max_length=254)
    password: str = Field(min_length=6, max_length=128)  # Bounds hashing work per request

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return validate_email_field(value)


class LoginRequestDTO(BaseModel):
    email: str = Field(max_length=254)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return validate_email_field(value)


class TokenDTO(BaseModel):
    token: str
    expires_at: str
