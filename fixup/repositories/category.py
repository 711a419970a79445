# fixup/repositories/category.py
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fixup.db.models.category import Category


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, type_id: int, name: str) -> Category:
        category = Category(type_id=type_id, name=name)
        try:
            self.db.add(category)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(category)
        return category

    def get(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def list(self, limit: int, offset: int) -> List[Category]:
        return (
            self.db.query(Category)
            .order_by(Category.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def list_by_type_id(self, type_id: int, limit: int, offset: int) -> List[Category]:
        return (
            self.db.query(Category)
            .filter(Category.type_id == type_id)
            .order_by(Category.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def update(self, category_id: int, fields: dict) -> Optional[Category]:
        category = self.get(category_id)
        if not category:
            return None

        for field, value in fields.items():
            setattr(category, field, value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(category)
        return category

    def delete(self, category_id: int) -> bool:
        try:
            deleted = self.db.query(Category).filter(Category.id == category_id).delete()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return deleted > 0
