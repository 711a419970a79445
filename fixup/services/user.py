# fixup/services/user.py
import logging
from typing import BinaryIO

from sqlalchemy.exc import DBAPIError

from fixup.core.hasher import Argon2Hasher, PasswordMismatchError
from fixup.db.errors import is_unique_violation
from fixup.repositories.user import UserRepository
from fixup.schemas.user import PasswordChange, PersonalInfoResponse, UserResponse, UserUpdate
from fixup.services.errors import EmailTakenError, IncorrectPasswordError, NotFoundError
from fixup.services.mapper import map_user_to_dto

logger = logging.getLogger(__name__)

MSG_USER_NOT_FOUND = "User not found"
PICTURE_DIRECTORY = "pfp/"


class UserService:
    def __init__(self, repository: UserRepository, storage, invalidator, url_signer, hasher: Argon2Hasher):
        self.repository = repository
        self.storage = storage
        self.invalidator = invalidator
        self.url_signer = url_signer
        self.hasher = hasher

    def _get_entity(self, user_id: int):
        user = self.repository.get(user_id)
        if not user:
            raise NotFoundError(MSG_USER_NOT_FOUND)
        return user

    def get(self, user_id: int) -> UserResponse:
        return map_user_to_dto(self._get_entity(user_id), self.url_signer)

    def update_personal_info(self, user_id: int, dto: UserUpdate) -> PersonalInfoResponse:
        try:
            user = self.repository.update(user_id, dto.model_dump(exclude_unset=True, exclude_none=True))
        except DBAPIError as e:
            if is_unique_violation(e):
                raise EmailTakenError() from e
            raise
        if not user:
            raise NotFoundError(MSG_USER_NOT_FOUND)
        return PersonalInfoResponse.model_validate(user)

    def update_picture(self, user_id: int, file: BinaryIO, content_type: str) -> None:
        """Store a new profile picture and drop the previous one from S3 and the CDN."""
        user = self._get_entity(user_id)
        old_picture = user.picture

        key = self.storage.put_object(file, PICTURE_DIRECTORY, content_type)
        if not self.repository.update_picture(user_id, key):
            raise NotFoundError(MSG_USER_NOT_FOUND)

        if not old_picture:
            return

        self.storage.delete_object(old_picture)
        self.invalidator.invalidate_file(old_picture)

    def update_password(self, user_id: int, dto: PasswordChange) -> None:
        user = self._get_entity(user_id)
        try:
            self.hasher.verify_password(dto.old_password, user.hash)
        except PasswordMismatchError as e:
            raise IncorrectPasswordError() from e

        self.repository.update_hash(user_id, self.hasher.hash_password(dto.new_password))

    def delete(self, user_id: int) -> None:
        user = self._get_entity(user_id)
        if user.picture:
            self.storage.delete_object(user.picture)
            self.invalidator.invalidate_file(user.picture)

        if not self.repository.delete(user_id):
            raise NotFoundError(MSG_USER_NOT_FOUND)
        logger.info("Deleted user %s", user_id)
