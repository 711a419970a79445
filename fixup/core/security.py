# fixup/core/security.py
from fastapi import Depends, HTTPException, Request

from fixup.core.pagination import parse_int64
from fixup.core.roles import UserRole
from fixup.core.tokens import (
    AccessJWTManager,
    InvalidTokenError,
    RefreshData,
    RefreshJWTManager,
    UserData,
    get_access_jwt_manager,
    get_refresh_jwt_manager,
)

ACCESS_COOKIE = "access_token"
REFRESH_COOKIE = "refresh_token"

MSG_MISSING_AUTHORIZATION_HEADER = "Authorization header is missing"
MSG_MISSING_BEARER_TOKEN = "Bearer token is missing"
MSG_INVALID_TOKEN = "Invalid token"
MSG_INSUFFICIENT_RIGHTS = "Insufficient rights"
MSG_USER_NOT_VERIFIED = "User is not verified"
MSG_INVALID_ID = "Invalid id parameter"

SELF_ALIAS = "me"


def extract_token(request: Request, cookie_name: str) -> str:
    """Bearer token from the Authorization header, else the named cookie."""
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        cookie = request.cookies.get(cookie_name)
        if cookie:
            return cookie
        raise HTTPException(status_code=401, detail=MSG_MISSING_AUTHORIZATION_HEADER)

    scheme, _, token = auth_header.partition(" ")
    if scheme != "Bearer" or not token:
        raise HTTPException(status_code=401, detail=MSG_MISSING_BEARER_TOKEN)
    return token


def get_current_user(
    request: Request,
    manager: AccessJWTManager = Depends(get_access_jwt_manager),
) -> UserData:
    token = extract_token(request, ACCESS_COOKIE)
    try:
        return manager.verify(token)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail=MSG_INVALID_TOKEN)


def get_refresh_claims(
    request: Request,
    manager: RefreshJWTManager = Depends(get_refresh_jwt_manager),
) -> RefreshData:
    token = extract_token(request, REFRESH_COOKIE)
    try:
        return manager.verify(token)
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail=MSG_INVALID_TOKEN)


def require_verified(current_user: UserData = Depends(get_current_user)) -> UserData:
    if not current_user.verified:
        raise HTTPException(status_code=403, detail=MSG_USER_NOT_VERIFIED)
    return current_user


def require_roles(*roles: UserRole):
    def checker(current_user: UserData = Depends(require_verified)) -> UserData:
        if current_user.role not in roles:
            raise HTTPException(status_code=403, detail=MSG_INSUFFICIENT_RIGHTS)
        return current_user

    return checker


require_admin = require_roles(UserRole.ADMIN)


def _parse_id(value: str) -> int:
    user_id = parse_int64(value)
    if user_id is None:
        raise HTTPException(status_code=400, detail=MSG_INVALID_ID)
    return user_id


def resolve_user_id(user_id: str, current_user: UserData, *roles: UserRole) -> int:
    """Map the ``{user_id}`` path segment to a numeric id.

    ``me`` always resolves to the caller. Any other id is allowed only for the
    caller itself or for one of ``roles``.
    """
    if user_id == SELF_ALIAS or user_id == current_user.id:
        return _parse_id(current_user.id)

    if current_user.role in roles:
        return _parse_id(user_id)

    raise HTTPException(status_code=403, detail=MSG_INSUFFICIENT_RIGHTS)


def self_or_admin(user_id: str, current_user: UserData = Depends(get_current_user)) -> int:
    return resolve_user_id(user_id, current_user, UserRole.ADMIN)


def verified_self_or_admin(user_id: str, current_user: UserData = Depends(require_verified)) -> int:
    return resolve_user_id(user_id, current_user, UserRole.ADMIN)


def verified_self(user_id: str, current_user: UserData = Depends(require_verified)) -> int:
    return resolve_user_id(user_id, current_user)
