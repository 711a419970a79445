# fixup/schemas/auth.py
from pydantic import BaseModel, EmailStr, Field, field_validator

from fixup.schemas.user import PASSWORD, PHONE, check_alpha_unicode, check_email_length


class RegisterUser(BaseModel):
    email: EmailStr
    phone_number: str = Field(..., pattern=PHONE)
    first_name: str = Field(..., min_length=2, max_length=30)
    last_name: str = Field(..., min_length=2, max_length=30)
    password: str = Field(..., pattern=PASSWORD)

    email_length = field_validator("email")(check_email_length)
    names_letters_only = field_validator("first_name", "last_name")(check_alpha_unicode)


class RegisterProvider(RegisterUser):
    # the last five digits are stored in clear as a preview
    personal_id_number: str = Field(..., pattern=r"^[0-9]{5,}$")


class Login(BaseModel):
    email: EmailStr
    password: str = Field(..., pattern=PASSWORD)

    email_length = field_validator("email")(check_email_length)


class EmailInput(BaseModel):
    email: EmailStr

    email_length = field_validator("email")(check_email_length)
