# fixup/db/models/category.py
from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from fixup.db.base import Base

class Category(Base):
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("type_id", "name", name="uq_categories_type_id_name"),)

    id = Column(Integer, primary_key=True, index=True)
    type_id = Column(Integer, ForeignKey("category_types.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(30), nullable=False)

    category_type = relationship("CategoryType", back_populates="categories")

    subcategories = relationship(
        "Subcategory",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
