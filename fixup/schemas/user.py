# fixup/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

PHONE = r"^[1-9]?[0-9]{7,14}$"
PASSWORD = r"^[\x21-\x7E]{8,36}$"
EMAIL_MAX_LENGTH = 40


def check_email_length(value):
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
    return value


def check_alpha_unicode(value):
    if value is not None and not value.isalpha():
        raise ValueError("must contain only letters")
    return value


class UserResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    phone_number: str
    email: str
    picture_url: Optional[str] = None
    role: str
    user_status: bool
    created_at: datetime


class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, pattern=PHONE)
    first_name: Optional[str] = Field(None, min_length=2, max_length=50)
    last_name: Optional[str] = Field(None, min_length=2, max_length=50)

    email_length = field_validator("email")(check_email_length)
    names_letters_only = field_validator("first_name", "last_name")(check_alpha_unicode)


class PersonalInfoResponse(BaseModel):
    first_name: str
    last_name: str
    phone_number: str
    email: str

    class Config:
        from_attributes = True


class PasswordChange(BaseModel):
    old_password: str = Field(..., pattern=PASSWORD)
    new_password: str = Field(..., pattern=PASSWORD)
