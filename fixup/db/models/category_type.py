# fixup/db/models/category_type.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from fixup.db.base import Base

class CategoryType(Base):
    __tablename__ = "category_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(30), nullable=False, unique=True)

    categories = relationship(
        "Category",
        back_populates="category_type",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
