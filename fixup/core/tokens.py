# fixup/core/tokens.py
from datetime import datetime, timedelta, timezone
from functools import lru_cache

import jwt
from pydantic import BaseModel, ValidationError

from fixup.core.config import settings
from fixup.core.roles import UserRole

ALGORITHM = "HS256"


class InvalidTokenError(Exception):
    pass


class UserData(BaseModel):
    id: str
    role: UserRole
    verified: bool


class RefreshData(BaseModel):
    id: str


class VerifyData(BaseModel):
    id: str
    email: str


class JWTManager:
    """HS256 token issuer/verifier bound to one secret and lifetime."""

    claims_model = BaseModel

    def __init__(self, secret_key: str, ttl: int):
        self.secret_key = secret_key
        self.ttl = ttl

    def _encode(self, data: dict) -> str:
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + timedelta(seconds=self.ttl)
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.secret_key, algorithm=ALGORITHM)

    def verify(self, token: str):
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
            return self.claims_model(**payload)
        except (jwt.PyJWTError, ValidationError, TypeError) as e:
            raise InvalidTokenError(str(e)) from e


class AccessJWTManager(JWTManager):
    claims_model = UserData

    def generate(self, user_id, role: UserRole, verified: bool) -> str:
        return self._encode({"id": str(user_id), "role": UserRole(role).value, "verified": verified})


class RefreshJWTManager(JWTManager):
    claims_model = RefreshData

    def generate(self, user_id) -> str:
        return self._encode({"id": str(user_id)})


class VerificationJWTManager(JWTManager):
    claims_model = VerifyData

    def generate(self, user_id, email: str) -> str:
        return self._encode({"id": str(user_id), "email": email})


@lru_cache
def get_access_jwt_manager() -> AccessJWTManager:
    return AccessJWTManager(settings.jwt.access_secret, settings.jwt.access_ttl)


@lru_cache
def get_refresh_jwt_manager() -> RefreshJWTManager:
    return RefreshJWTManager(settings.jwt.refresh_secret, settings.jwt.refresh_ttl)


@lru_cache
def get_verification_jwt_manager() -> VerificationJWTManager:
    return VerificationJWTManager(settings.jwt.verification_secret, settings.jwt.verification_ttl)
