# fixup/schemas/category.py
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from fixup.schemas.category_type import ALPHA, INT32_MAX


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=30, pattern=ALPHA)
    type_id: int = Field(..., ge=1, le=INT32_MAX)


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=30, pattern=ALPHA)
    type_id: Optional[int] = Field(None, ge=1, le=INT32_MAX)


class CategoryResponse(BaseModel):
    id: int
    type_id: int
    name: str

    class Config:
        from_attributes = True

    @field_serializer("id", "type_id")
    def ids_as_strings(self, value: int) -> str:
        return str(value)
