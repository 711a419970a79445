# fixup/api/routes/users.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from fixup.api.deps import get_user_service
from fixup.core.responses import DataResponse
from fixup.core.security import self_or_admin, verified_self, verified_self_or_admin
from fixup.schemas.user import PasswordChange, PersonalInfoResponse, UserResponse, UserUpdate
from fixup.services.errors import EmailTakenError, IncorrectPasswordError, NotFoundError
from fixup.services.user import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

MSG_NO_CHANGES = "No changes"
MSG_NO_FILE = "No file provided"
ALLOWED_PICTURE_TYPES = ("image/jpeg", "image/png")


@router.get("/{user_id}", response_model=DataResponse[UserResponse])
def get_user(target_id: int = Depends(self_or_admin), service: UserService = Depends(get_user_service)):
    try:
        user = service.get(target_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Fetch user: %s", user.id)
    return {"data": user}


@router.patch("/{user_id}", response_model=DataResponse[PersonalInfoResponse])
def update_user(
    dto: UserUpdate,
    target_id: int = Depends(verified_self_or_admin),
    service: UserService = Depends(get_user_service),
):
    if not dto.model_dump(exclude_unset=True, exclude_none=True):
        raise HTTPException(status_code=400, detail=MSG_NO_CHANGES)

    try:
        info = service.update_personal_info(target_id, dto)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except EmailTakenError as e:
        raise HTTPException(status_code=409, detail=str(e))

    logger.info("Update user: %d", target_id)
    return {"data": info}


@router.patch("/{user_id}/pfp", status_code=204)
def upload_profile_picture(
    image: Optional[UploadFile] = File(None),
    target_id: int = Depends(verified_self_or_admin),
    service: UserService = Depends(get_user_service),
):
    if image is None:
        raise HTTPException(status_code=400, detail=MSG_NO_FILE)

    if image.content_type not in ALLOWED_PICTURE_TYPES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type: {image.content_type}, for file: {image.filename}",
        )

    try:
        service.update_picture(target_id, image.file, image.content_type)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Update profile picture of user: %d", target_id)
    return Response(status_code=204)


@router.patch("/{user_id}/change-password", status_code=204)
def change_password(
    dto: PasswordChange,
    target_id: int = Depends(verified_self),
    service: UserService = Depends(get_user_service),
):
    try:
        service.update_password(target_id, dto)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IncorrectPasswordError as e:
        raise HTTPException(status_code=401, detail=str(e))

    logger.info("Change password of user: %d", target_id)
    return Response(status_code=204)


@router.delete("/{user_id}", status_code=204)
def delete_user(target_id: int = Depends(self_or_admin), service: UserService = Depends(get_user_service)):
    try:
        service.delete(target_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Delete user: %d", target_id)
    return Response(status_code=204)
