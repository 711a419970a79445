# fixup/api/routes/subcategories.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from fixup.api.deps import CatalogId, get_subcategory_service
from fixup.core.pagination import Pagination, get_pagination
from fixup.core.responses import DataResponse
from fixup.core.security import require_admin
from fixup.core.tokens import UserData
from fixup.schemas.subcategory import SubcategoryCreate, SubcategoryResponse, SubcategoryUpdate
from fixup.services.errors import NameTakenError, NotFoundError
from fixup.services.subcategory import SubcategoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subcategories", tags=["subcategories"])

MSG_NO_CHANGES = "No changes"


@router.post("", response_model=DataResponse[SubcategoryResponse], status_code=201)
def create_subcategory(
    info: SubcategoryCreate,
    current_user: UserData = Depends(require_admin),
    service: SubcategoryService = Depends(get_subcategory_service),
):
    try:
        subcategory = service.create(info)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Create subcategory: %s, ID: %d", subcategory.name, subcategory.id)
    return {"data": subcategory}


@router.get("", response_model=DataResponse[List[SubcategoryResponse]])
def list_subcategories(
    pagination: Pagination = Depends(get_pagination),
    service: SubcategoryService = Depends(get_subcategory_service),
):
    subcategories = service.list(pagination.limit, pagination.offset)
    logger.info("Fetch subcategories - %d", len(subcategories))
    return {"data": subcategories}


@router.get("/{subcategory_id}", response_model=DataResponse[SubcategoryResponse])
def get_subcategory(subcategory_id: CatalogId, service: SubcategoryService = Depends(get_subcategory_service)):
    try:
        subcategory = service.get(subcategory_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Fetch subcategory: %s, ID: %d", subcategory.name, subcategory.id)
    return {"data": subcategory}


@router.patch("/{subcategory_id}", response_model=DataResponse[SubcategoryResponse])
def update_subcategory(
    subcategory_id: CatalogId,
    info: SubcategoryUpdate,
    current_user: UserData = Depends(require_admin),
    service: SubcategoryService = Depends(get_subcategory_service),
):
    if not info.model_dump(exclude_unset=True, exclude_none=True):
        raise HTTPException(status_code=400, detail=MSG_NO_CHANGES)

    try:
        subcategory = service.update(subcategory_id, info)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NameTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Update subcategory: %s, ID: %d", subcategory.name, subcategory.id)
    return {"data": subcategory}


@router.delete("/{subcategory_id}", status_code=204)
def delete_subcategory(
    subcategory_id: CatalogId,
    current_user: UserData = Depends(require_admin),
    service: SubcategoryService = Depends(get_subcategory_service),
):
    try:
        service.delete(subcategory_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Delete subcategory: %d", subcategory_id)
    return Response(status_code=204)
