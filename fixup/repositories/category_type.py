# fixup/repositories/category_type.py
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fixup.db.models.category_type import CategoryType


class CategoryTypeRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str) -> CategoryType:
        category_type = CategoryType(name=name)
        try:
            self.db.add(category_type)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(category_type)
        return category_type

    def get(self, type_id: int) -> Optional[CategoryType]:
        return self.db.query(CategoryType).filter(CategoryType.id == type_id).first()

    def list(self, limit: int, offset: int) -> List[CategoryType]:
        return (
            self.db.query(CategoryType)
            .order_by(CategoryType.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def update(self, type_id: int, name: str) -> Optional[CategoryType]:
        category_type = self.get(type_id)
        if not category_type:
            return None

        category_type.name = name
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(category_type)
        return category_type

    def delete(self, type_id: int) -> bool:
        try:
            deleted = self.db.query(CategoryType).filter(CategoryType.id == type_id).delete()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return deleted > 0
