from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

from creative_hub.shared.utils.validators import escape_html, is_valid_email, normalize_email

# Length bounds are checked on the trimmed, unescaped text.
PersonName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=2, max_length=50),
    AfterValidator(escape_html),
]
LongText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=5, max_length=1000),
    AfterValidator(escape_html),
]
ServiceName = Annotated[
    str,
    StringConstraints(min_length=2, max_length=50),
    AfterValidator(escape_html),
]


def validate_email_field(value: str) -> str:
    candidate = value.strip()
    if not is_valid_email(candidate):
        raise PydanticCustomError(
            "email_invalid",
            "Please provide a valid email address",
            {},
        )
    return normalize_email(candidate)


class ContactRequestDTO(BaseModel):
    name: PersonName
    email: str
    message: LongText

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return validate_email_field(value)


class ServiceRequestDTO(BaseModel):
    name: PersonName
    email: str
    service: ServiceName
    details: LongText

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return validate_email_field(value)
