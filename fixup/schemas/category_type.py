# fixup/schemas/category_type.py
from pydantic import BaseModel, Field, field_serializer

ALPHA = r"^[A-Za-z]+$"
INT32_MAX = 2**31 - 1


class CategoryTypeInfo(BaseModel):
    name: str = Field(..., min_length=2, max_length=30, pattern=ALPHA)


class CategoryTypeResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

    # ids go over the wire as strings
    @field_serializer("id")
    def id_as_string(self, value: int) -> str:
        return str(value)
