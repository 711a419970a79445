# fixup/repositories/subcategory.py
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fixup.db.models.category import Category
from fixup.db.models.subcategory import Subcategory


class SubcategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, category_id: int, name: str) -> Subcategory:
        subcategory = Subcategory(category_id=category_id, name=name)
        try:
            self.db.add(subcategory)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(subcategory)
        return subcategory

    def get(self, subcategory_id: int) -> Optional[Subcategory]:
        return self.db.query(Subcategory).filter(Subcategory.id == subcategory_id).first()

    def list(self, limit: int, offset: int) -> List[Subcategory]:
        return self.db.query(Subcategory).order_by(Subcategory.id).limit(limit).offset(offset).all()

    def list_by_category_id(self, category_id: int, limit: int, offset: int) -> List[Subcategory]:
        return (
            self.db.query(Subcategory)
            .filter(Subcategory.category_id == category_id)
            .order_by(Subcategory.id)
            .limit(limit)
            .offset(offset)
            .all()
        )

    def list_by_type_id(self, type_id: int, limit: int, offset: int) -> List[Subcategory]:
        return (
            self.db.query(Subcategory)
            .join(Category, Subcategory.category_id == Category.id)
            .filter(Category.type_id == type_id)
            .order_by(Subcategory.id)
            .limit(limit)
            .offset(offset)
            .all()
        )

    def update(self, subcategory_id: int, fields: dict) -> Optional[Subcategory]:
        subcategory = self.get(subcategory_id)
        if not subcategory:
            return None

        for field, value in fields.items():
            setattr(subcategory, field, value)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(subcategory)
        return subcategory

    def delete(self, subcategory_id: int) -> bool:
        try:
            deleted = self.db.query(Subcategory).filter(Subcategory.id == subcategory_id).delete()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return deleted > 0
