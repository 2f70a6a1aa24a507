# travel_api/models/clients.py

import re

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

# optional leading "+", then digits with the usual separators
_PHONE_CHARS = re.compile(r"^\+?[0-9 ().\-]+$")
_PHONE_MIN_DIGITS = 7
_PHONE_MAX_DIGITS = 15


class ClientCreate(BaseModel):
    """
    Payload for creating a client. Accepts snake_case or camelCase keys.
    """
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    email: EmailStr
    telephone: str
    pesel: str = Field(pattern=r"^[0-9]{11}$", description="11-digit national ID")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("first_name", "last_name")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("telephone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        if not _PHONE_CHARS.match(v):
            raise ValueError("telephone may only contain digits, spaces, '+', '-', '.', '(' and ')'")
        n_digits = sum(ch.isdigit() for ch in v)
        if not _PHONE_MIN_DIGITS <= n_digits <= _PHONE_MAX_DIGITS:
            raise ValueError(
                f"telephone must contain between {_PHONE_MIN_DIGITS} and {_PHONE_MAX_DIGITS} digits"
            )
        return v


class ClientCreated(BaseModel):
    id: int
