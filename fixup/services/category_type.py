# fixup/services/category_type.py
from typing import List

from sqlalchemy.exc import DBAPIError

from fixup.db.errors import is_unique_violation
from fixup.repositories.category_type import CategoryTypeRepository
from fixup.schemas.category_type import CategoryTypeResponse
from fixup.services.errors import NameTakenError, NotFoundError

MSG_NOT_FOUND = "Category type not found"
MSG_NAME_TAKEN = "Category type name is taken"


class CategoryTypeService:
    def __init__(self, repository: CategoryTypeRepository):
        self.repository = repository

    def create(self, name: str) -> CategoryTypeResponse:
        try:
            category_type = self.repository.create(name)
        except DBAPIError as e:
            if is_unique_violation(e):
                raise NameTakenError(MSG_NAME_TAKEN) from e
            raise
        return CategoryTypeResponse.model_validate(category_type)

    def get(self, type_id: int) -> CategoryTypeResponse:
        category_type = self.repository.get(type_id)
        if not category_type:
            raise NotFoundError(MSG_NOT_FOUND)
        return CategoryTypeResponse.model_validate(category_type)

    def list(self, limit: int, offset: int) -> List[CategoryTypeResponse]:
        return [CategoryTypeResponse.model_validate(ct) for ct in self.repository.list(limit, offset)]

    def update(self, type_id: int, name: str) -> CategoryTypeResponse:
        try:
            category_type = self.repository.update(type_id, name)
        except DBAPIError as e:
            if is_unique_violation(e):
                raise NameTakenError(MSG_NAME_TAKEN) from e
            raise
        if not category_type:
            raise NotFoundError(MSG_NOT_FOUND)
        return CategoryTypeResponse.model_validate(category_type)

    def delete(self, type_id: int) -> None:
        if not self.repository.delete(type_id):
            raise NotFoundError(MSG_NOT_FOUND)
