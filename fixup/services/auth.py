# fixup/services/auth.py
import logging
from typing import Tuple

from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session

from fixup.core.hasher import Argon2Hasher, PasswordMismatchError
from fixup.core.roles import UserRole
from fixup.db.errors import is_unique_violation
from fixup.db.models.user import User
from fixup.repositories.provider import ProviderRepository
from fixup.repositories.user import UserRepository
from fixup.repositories.verification import VerificationRepository
from fixup.schemas.auth import Login, RegisterProvider, RegisterUser
from fixup.schemas.user import UserResponse
from fixup.services.errors import (
    IncorrectCredentialsError,
    NotFoundError,
    TokenAlreadyUsedError,
    UserAlreadyExistsError,
)
from fixup.services.mapper import map_user_to_dto

logger = logging.getLogger(__name__)

MSG_USER_NOT_FOUND = "User not found"
PREVIEW_LENGTH = 5


class AuthService:
    def __init__(
        self,
        db: Session,
        user_repository: UserRepository,
        provider_repository: ProviderRepository,
        verification_repository: VerificationRepository,
        hasher: Argon2Hasher,
        encryptor,
        mailer,
        url_signer,
        email_address: str,
        verify_url: str,
        templates: dict,
    ):
        self.db = db
        self.user_repository = user_repository
        self.provider_repository = provider_repository
        self.verification_repository = verification_repository
        self.hasher = hasher
        self.encryptor = encryptor
        self.mailer = mailer
        self.url_signer = url_signer
        self.email_address = email_address
        self.verify_url = verify_url
        self.templates = templates

    def _create_user(self, dto: RegisterUser, role: UserRole, commit: bool) -> User:
        return self.user_repository.create(
            first_name=dto.first_name,
            last_name=dto.last_name,
            phone_number=dto.phone_number,
            email=dto.email,
            hash=self.hasher.hash_password(dto.password),
            role=role,
            commit=commit,
        )

    def register_customer(self, dto: RegisterUser) -> UserResponse:
        try:
            user = self._create_user(dto, UserRole.CUSTOMER, commit=True)
        except DBAPIError as e:
            if is_unique_violation(e):
                raise UserAlreadyExistsError() from e
            raise
        return map_user_to_dto(user, self.url_signer)

    def register_provider(self, dto: RegisterProvider) -> UserResponse:
        """Create the user and its provider row in one transaction."""
        try:
            user = self._create_user(dto, UserRole.PROVIDER, commit=False)
            self.provider_repository.create(
                user_id=user.id,
                personal_id_number=self.encryptor.encrypt(dto.personal_id_number.encode()),
                personal_id_preview=dto.personal_id_number[-PREVIEW_LENGTH:],
                commit=False,
            )
            self.db.commit()
        except DBAPIError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise UserAlreadyExistsError() from e
            raise
        except Exception:
            self.db.rollback()
            raise

        return map_user_to_dto(user, self.url_signer)

    def authenticate(self, dto: Login) -> User:
        user = self.user_repository.get_by_email(dto.email)
        if not user:
            raise IncorrectCredentialsError()

        try:
            self.hasher.verify_password(dto.password, user.hash)
        except PasswordMismatchError as e:
            raise IncorrectCredentialsError() from e
        return user

    def get_confirmation_details(self, email: str) -> User:
        user = self.user_repository.get_by_email(email)
        if not user:
            raise NotFoundError(MSG_USER_NOT_FOUND)
        return user

    def get_role_and_status(self, user_id: int) -> Tuple[UserRole, bool]:
        user = self.user_repository.get(user_id)
        if not user:
            raise NotFoundError(MSG_USER_NOT_FOUND)
        return UserRole(user.role), bool(user.verified)

    def verify_user(self, token: str, user_id: int) -> UserResponse:
        """Consume ``token`` and mark the user verified."""
        if not self.verification_repository.mark_token_used(token):
            raise TokenAlreadyUsedError()

        user = self.user_repository.update(user_id, {"verified": True})
        if not user:
            raise NotFoundError(MSG_USER_NOT_FOUND)

        logger.info("User %s verified", user_id)
        return map_user_to_dto(user, self.url_signer)

    def send_confirmation_letter(self, token: str, email: str, name: str) -> None:
        if self.verification_repository.is_token_used(token):
            raise TokenAlreadyUsedError()

        self.mailer.send_html(
            self.email_address,
            email,
            "Account Confirmation",
            self.templates["confirmation"],
            {"name": name, "link": self.verify_url.format(token=token)},
        )

    def send_verified_letter(self, email: str, name: str) -> None:
        self.mailer.send_html(
            self.email_address,
            email,
            "Verification Success",
            self.templates["verified"],
            {"name": name},
        )
