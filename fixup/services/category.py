# fixup/services/category.py
from typing import List

from sqlalchemy.exc import DBAPIError

from fixup.db.errors import is_foreign_key_violation, is_raise_exception, is_unique_violation
from fixup.repositories.category import CategoryRepository
from fixup.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from fixup.services.errors import NameTakenError, NotFoundError

MSG_NOT_FOUND = "Category not found"
MSG_TYPE_NOT_FOUND = "Category type not found"
MSG_NAME_TAKEN = "Category name is taken"


def _translate(e: DBAPIError):
    # the (type_id, name) pair may be guarded by a trigger instead of an index
    if is_unique_violation(e) or is_raise_exception(e):
        return NameTakenError(MSG_NAME_TAKEN)
    if is_foreign_key_violation(e):
        return NotFoundError(MSG_TYPE_NOT_FOUND)
    return None


class CategoryService:
    def __init__(self, repository: CategoryRepository):
        self.repository = repository

    def create(self, info: CategoryCreate) -> CategoryResponse:
        try:
            category = self.repository.create(info.type_id, info.name)
        except DBAPIError as e:
            err = _translate(e)
            if err:
                raise err from e
            raise
        return CategoryResponse.model_validate(category)

    def get(self, category_id: int) -> CategoryResponse:
        category = self.repository.get(category_id)
        if not category:
            raise NotFoundError(MSG_NOT_FOUND)
        return CategoryResponse.model_validate(category)

    def list(self, limit: int, offset: int) -> List[CategoryResponse]:
        return [CategoryResponse.model_validate(c) for c in self.repository.list(limit, offset)]

    def list_by_type_id(self, type_id: int, limit: int, offset: int) -> List[CategoryResponse]:
        return [
            CategoryResponse.model_validate(c)
            for c in self.repository.list_by_type_id(type_id, limit, offset)
        ]

    def update(self, category_id: int, info: CategoryUpdate) -> CategoryResponse:
        try:
            category = self.repository.update(category_id, info.model_dump(exclude_unset=True, exclude_none=True))
        except DBAPIError as e:
            err = _translate(e)
            if err:
                raise err from e
            raise
        if not category:
            raise NotFoundError(MSG_NOT_FOUND)
        return CategoryResponse.model_validate(category)

    def delete(self, category_id: int) -> None:
        if not self.repository.delete(category_id):
            raise NotFoundError(MSG_NOT_FOUND)
