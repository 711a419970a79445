# fixup/api/deps.py
from functools import lru_cache
from typing import Annotated

import redis
from fastapi import Depends, Path
from sqlalchemy.orm import Session

from fixup.core.cdn import CloudFrontInvalidator, CloudFrontURLSigner
from fixup.core.config import settings
from fixup.core.encryption import AesEncryptor
from fixup.core.hasher import Argon2Hasher
from fixup.core.mailer import load_template, new_mailer
from fixup.core.snowflake import SnowflakeNode
from fixup.core.storage import S3Storage
from fixup.db.base import get_db
from fixup.db.redis import get_redis
from fixup.repositories.category import CategoryRepository
from fixup.repositories.category_type import CategoryTypeRepository
from fixup.repositories.provider import ProviderRepository
from fixup.repositories.subcategory import SubcategoryRepository
from fixup.repositories.user import UserRepository
from fixup.repositories.verification import VerificationRepository
from fixup.schemas.category_type import INT32_MAX
from fixup.services.auth import AuthService
from fixup.services.category import CategoryService
from fixup.services.category_type import CategoryTypeService
from fixup.services.subcategory import SubcategoryService
from fixup.services.user import UserService


# -------------------------
# Shared components
# -------------------------

@lru_cache
def get_snowflake() -> SnowflakeNode:
    return SnowflakeNode(settings.server.node_id)


@lru_cache
def get_hasher() -> Argon2Hasher:
    return Argon2Hasher(settings.argon2)


@lru_cache
def get_encryptor() -> AesEncryptor:
    return AesEncryptor(settings.aes.key)


@lru_cache
def get_mailer():
    return new_mailer(settings.mailer, settings.is_production)


@lru_cache
def get_templates() -> dict:
    return {
        "confirmation": load_template(settings.templates.confirmation),
        "verified": load_template(settings.templates.verified),
    }


@lru_cache
def get_url_signer() -> CloudFrontURLSigner:
    return CloudFrontURLSigner(settings.aws.cdn)


@lru_cache
def get_storage() -> S3Storage:
    return S3Storage(settings.aws)


@lru_cache
def get_invalidator() -> CloudFrontInvalidator:
    return CloudFrontInvalidator(settings.aws)


# -------------------------
# Catalog
# -------------------------

# catalog tables use 32-bit serial ids
CatalogId = Annotated[int, Path(ge=-INT32_MAX - 1, le=INT32_MAX)]


def get_category_type_service(db: Session = Depends(get_db)) -> CategoryTypeService:
    return CategoryTypeService(CategoryTypeRepository(db))


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


def get_subcategory_service(db: Session = Depends(get_db)) -> SubcategoryService:
    return SubcategoryService(SubcategoryRepository(db))


# -------------------------
# Users
# -------------------------

def get_auth_service(
    db: Session = Depends(get_db),
    redis_client: redis.Redis = Depends(get_redis),
) -> AuthService:
    return AuthService(
        db=db,
        user_repository=UserRepository(db, get_snowflake()),
        provider_repository=ProviderRepository(db),
        verification_repository=VerificationRepository(redis_client, settings.jwt.verification_ttl),
        hasher=get_hasher(),
        encryptor=get_encryptor(),
        mailer=get_mailer(),
        url_signer=get_url_signer(),
        email_address=settings.server.email,
        verify_url=settings.server.verify_url,
        templates=get_templates(),
    )


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(
        repository=UserRepository(db, get_snowflake()),
        storage=get_storage(),
        invalidator=get_invalidator(),
        url_signer=get_url_signer(),
        hasher=get_hasher(),
    )
