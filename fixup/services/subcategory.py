# fixup/services/subcategory.py
from typing import List

from sqlalchemy.exc import DBAPIError

from fixup.db.errors import is_foreign_key_violation, is_raise_exception, is_unique_violation
from fixup.repositories.subcategory import SubcategoryRepository
from fixup.schemas.subcategory import SubcategoryCreate, SubcategoryResponse, SubcategoryUpdate
from fixup.services.errors import NameTakenError, NotFoundError

MSG_NOT_FOUND = "Subcategory not found"
MSG_CATEGORY_NOT_FOUND = "Category not found"
MSG_NAME_TAKEN = "Subcategory name is taken"


def _translate(e: DBAPIError):
    if is_unique_violation(e) or is_raise_exception(e):
        return NameTakenError(MSG_NAME_TAKEN)
    if is_foreign_key_violation(e):
        return NotFoundError(MSG_CATEGORY_NOT_FOUND)
    return None


def _to_dtos(subcategories) -> List[SubcategoryResponse]:
    return [SubcategoryResponse.model_validate(s) for s in subcategories]


class SubcategoryService:
    def __init__(self, repository: SubcategoryRepository):
        self.repository = repository

    def create(self, info: SubcategoryCreate) -> SubcategoryResponse:
        try:
            subcategory = self.repository.create(info.category_id, info.name)
        except DBAPIError as e:
            err = _translate(e)
            if err:
                raise err from e
            raise
        return SubcategoryResponse.model_validate(subcategory)

    def get(self, subcategory_id: int) -> SubcategoryResponse:
        subcategory = self.repository.get(subcategory_id)
        if not subcategory:
            raise NotFoundError(MSG_NOT_FOUND)
        return SubcategoryResponse.model_validate(subcategory)

    def list(self, limit: int, offset: int) -> List[SubcategoryResponse]:
        return _to_dtos(self.repository.list(limit, offset))

    def list_by_category_id(self, category_id: int, limit: int, offset: int) -> List[SubcategoryResponse]:
        return _to_dtos(self.repository.list_by_category_id(category_id, limit, offset))

    def list_by_type_id(self, type_id: int, limit: int, offset: int) -> List[SubcategoryResponse]:
        return _to_dtos(self.repository.list_by_type_id(type_id, limit, offset))

    def update(self, subcategory_id: int, info: SubcategoryUpdate) -> SubcategoryResponse:
        try:
            subcategory = self.repository.update(subcategory_id, info.model_dump(exclude_unset=True, exclude_none=True))
        except DBAPIError as e:
            err = _translate(e)
            if err:
                raise err from e
            raise
        if not subcategory:
            raise NotFoundError(MSG_NOT_FOUND)
        return SubcategoryResponse.model_validate(subcategory)

    def delete(self, subcategory_id: int) -> None:
        if not self.repository.delete(subcategory_id):
            raise NotFoundError(MSG_NOT_FOUND)
