# fixup/api/routes/category_types.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from fixup.api.deps import CatalogId, get_category_service, get_category_type_service, get_subcategory_service
from fixup.core.pagination import Pagination, get_pagination
from fixup.core.responses import DataResponse
from fixup.core.security import require_admin
from fixup.core.tokens import UserData
from fixup.schemas.category import CategoryResponse
from fixup.schemas.category_type import CategoryTypeInfo, CategoryTypeResponse
from fixup.schemas.subcategory import SubcategoryResponse
from fixup.services.category import CategoryService
from fixup.services.category_type import CategoryTypeService
from fixup.services.errors import NameTakenError, NotFoundError
from fixup.services.subcategory import SubcategoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/category-types", tags=["category-types"])


# Admin creates category type

@router.post("", response_model=DataResponse[CategoryTypeResponse], status_code=201)
def create_category_type(
    info: CategoryTypeInfo,
    current_user: UserData = Depends(require_admin),
    service: CategoryTypeService = Depends(get_category_type_service),
):
    try:
        category_type = service.create(info.name)
    except NameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Create category type: %s, ID: %d", category_type.name, category_type.id)
    return {"data": category_type}


@router.get("", response_model=DataResponse[List[CategoryTypeResponse]])
def list_category_types(
    pagination: Pagination = Depends(get_pagination),
    service: CategoryTypeService = Depends(get_category_type_service),
):
    category_types = service.list(pagination.limit, pagination.offset)
    logger.info("Fetch category types - %d", len(category_types))
    return {"data": category_types}


@router.get("/{type_id}", response_model=DataResponse[CategoryTypeResponse])
def get_category_type(type_id: CatalogId, service: CategoryTypeService = Depends(get_category_type_service)):
    try:
        category_type = service.get(type_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Fetch category type: %s, ID: %d", category_type.name, category_type.id)
    return {"data": category_type}


@router.patch("/{type_id}", response_model=DataResponse[CategoryTypeResponse])
def update_category_type(
    type_id: CatalogId,
    info: CategoryTypeInfo,
    current_user: UserData = Depends(require_admin),
    service: CategoryTypeService = Depends(get_category_type_service),
):
    try:
        category_type = service.update(type_id, info.name)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Update category type: %s, ID: %d", category_type.name, category_type.id)
    return {"data": category_type}


@router.delete("/{type_id}", status_code=204)
def delete_category_type(
    type_id: CatalogId,
    current_user: UserData = Depends(require_admin),
    service: CategoryTypeService = Depends(get_category_type_service),
):
    try:
        service.delete(type_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Delete category type: %d", type_id)
    return Response(status_code=204)


# -------------------------
# Children of a category type
# -------------------------

@router.get("/{type_id}/categories", response_model=DataResponse[List[CategoryResponse]])
def list_categories_by_type(
    type_id: CatalogId,
    pagination: Pagination = Depends(get_pagination),
    service: CategoryService = Depends(get_category_service),
):
    categories = service.list_by_type_id(type_id, pagination.limit, pagination.offset)
    logger.info("Fetch categories of type %d - %d", type_id, len(categories))
    return {"data": categories}


@router.get("/{type_id}/subcategories", response_model=DataResponse[List[SubcategoryResponse]])
def list_subcategories_by_type(
    type_id: CatalogId,
    pagination: Pagination = Depends(get_pagination),
    service: SubcategoryService = Depends(get_subcategory_service),
):
    subcategories = service.list_by_type_id(type_id, pagination.limit, pagination.offset)
    logger.info("Fetch subcategories of type %d - %d", type_id, len(subcategories))
    return {"data": subcategories}
