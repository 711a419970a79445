# fixup/api/routes/categories.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from fixup.api.deps import CatalogId, get_category_service, get_subcategory_service
from fixup.core.pagination import Pagination, get_pagination
from fixup.core.responses import DataResponse
from fixup.core.security import require_admin
from fixup.core.tokens import UserData
from fixup.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from fixup.schemas.subcategory import SubcategoryResponse
from fixup.services.category import CategoryService
from fixup.services.errors import NameTakenError, NotFoundError
from fixup.services.subcategory import SubcategoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

MSG_NO_CHANGES = "No changes"


@router.post("", response_model=DataResponse[CategoryResponse], status_code=201)
def create_category(
    info: CategoryCreate,
    current_user: UserData = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    try:
        category = service.create(info)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Create category: %s, ID: %d", category.name, category.id)
    return {"data": category}


@router.get("", response_model=DataResponse[List[CategoryResponse]])
def list_categories(
    pagination: Pagination = Depends(get_pagination),
    service: CategoryService = Depends(get_category_service),
):
    categories = service.list(pagination.limit, pagination.offset)
    logger.info("Fetch categories - %d", len(categories))
    return {"data": categories}


@router.get("/{category_id}", response_model=DataResponse[CategoryResponse])
def get_category(category_id: CatalogId, service: CategoryService = Depends(get_category_service)):
    try:
        category = service.get(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Fetch category: %s, ID: %d", category.name, category.id)
    return {"data": category}


@router.patch("/{category_id}", response_model=DataResponse[CategoryResponse])
def update_category(
    category_id: CatalogId,
    info: CategoryUpdate,
    current_user: UserData = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    if not info.model_dump(exclude_unset=True, exclude_none=True):
        raise HTTPException(status_code=400, detail=MSG_NO_CHANGES)

    try:
        category = service.update(category_id, info)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Update category: %s, ID: %d", category.name, category.id)
    return {"data": category}


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: CatalogId,
    current_user: UserData = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    try:
        service.delete(category_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Delete category: %d", category_id)
    return Response(status_code=204)


@router.get("/{category_id}/subcategories", response_model=DataResponse[List[SubcategoryResponse]])
def list_subcategories_by_category(
    category_id: CatalogId,
    pagination: Pagination = Depends(get_pagination),
    service: SubcategoryService = Depends(get_subcategory_service),
):
    subcategories = service.list_by_category_id(category_id, pagination.limit, pagination.offset)
    logger.info("Fetch subcategories of category %d - %d", category_id, len(subcategories))
    return {"data": subcategories}
