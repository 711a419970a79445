# fixup/schemas/subcategory.py
from typing import Optional

from pydantic import BaseModel, Field

from fixup.schemas.category_type import ALPHA, INT32_MAX


class SubcategoryCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100, pattern=ALPHA)
    category_id: int = Field(..., ge=1, le=INT32_MAX)


class SubcategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100, pattern=ALPHA)
    category_id: Optional[int] = Field(None, ge=1, le=INT32_MAX)


class SubcategoryResponse(BaseModel):
    id: int
    category_id: int
    name: str

    class Config:
        from_attributes = True
