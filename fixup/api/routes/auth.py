# fixup/api/routes/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Response

from fixup.api.deps import get_auth_service
from fixup.core.responses import DataResponse
from fixup.core.security import (
    ACCESS_COOKIE,
    MSG_INVALID_TOKEN,
    REFRESH_COOKIE,
    get_current_user,
    get_refresh_claims,
)
from fixup.core.tokens import (
    AccessJWTManager,
    InvalidTokenError,
    RefreshData,
    RefreshJWTManager,
    UserData,
    VerificationJWTManager,
    get_access_jwt_manager,
    get_refresh_jwt_manager,
    get_verification_jwt_manager,
)
from fixup.schemas.auth import EmailInput, Login, RegisterProvider, RegisterUser
from fixup.schemas.user import UserResponse
from fixup.services.auth import AuthService
from fixup.services.errors import (
    IncorrectCredentialsError,
    NotFoundError,
    TokenAlreadyUsedError,
    UserAlreadyExistsError,
    UserAlreadyVerifiedError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def send_letter(send, *args):
    """Background wrapper: a failed letter never reaches the client."""
    try:
        send(*args)
    except Exception:
        logger.exception("Failed to send letter via %s", getattr(send, "__name__", send))


def set_token_cookie(response: Response, key: str, token: str, ttl: int):
    response.set_cookie(key=key, value=token, max_age=ttl, httponly=True, secure=True)


def queue_confirmation(
    background_tasks: BackgroundTasks,
    service: AuthService,
    manager: VerificationJWTManager,
    user_id,
    email: str,
    name: str,
):
    token = manager.generate(user_id, email)
    background_tasks.add_task(send_letter, service.send_confirmation_letter, token, email, name)


# -------------------------
# Registration
# -------------------------

@router.post("/register/customer", response_model=DataResponse[UserResponse], status_code=201)
def register_customer(
    dto: RegisterUser,
    background_tasks: BackgroundTasks,
    service: AuthService = Depends(get_auth_service),
    verification_manager: VerificationJWTManager = Depends(get_verification_jwt_manager),
):
    try:
        user = service.register_customer(dto)
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    queue_confirmation(background_tasks, service, verification_manager, user.id, user.email, user.first_name)
    logger.info("Registered customer: %s", user.id)
    return {"data": user}


@router.post("/register/provider", response_model=DataResponse[UserResponse], status_code=201)
def register_provider(
    dto: RegisterProvider,
    background_tasks: BackgroundTasks,
    service: AuthService = Depends(get_auth_service),
    verification_manager: VerificationJWTManager = Depends(get_verification_jwt_manager),
):
    try:
        user = service.register_provider(dto)
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    queue_confirmation(background_tasks, service, verification_manager, user.id, user.email, user.first_name)
    logger.info("Registered provider: %s", user.id)
    return {"data": user}


@router.post("/resend-confirmation", status_code=204)
def resend_confirmation_letter(
    dto: EmailInput,
    background_tasks: BackgroundTasks,
    service: AuthService = Depends(get_auth_service),
    verification_manager: VerificationJWTManager = Depends(get_verification_jwt_manager),
):
    try:
        user = service.get_confirmation_details(dto.email)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if user.verified:
        raise HTTPException(status_code=409, detail=UserAlreadyVerifiedError.message)

    queue_confirmation(background_tasks, service, verification_manager, user.id, user.email, user.first_name)
    logger.info("Resent confirmation letter to user: %s", user.id)
    return Response(status_code=204)


# -------------------------
# Session
# -------------------------

@router.post("/login", response_model=DataResponse[UserData])
def login(
    dto: Login,
    response: Response,
    service: AuthService = Depends(get_auth_service),
    access_manager: AccessJWTManager = Depends(get_access_jwt_manager),
    refresh_manager: RefreshJWTManager = Depends(get_refresh_jwt_manager),
):
    try:
        user = service.authenticate(dto)
    except IncorrectCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))

    identity = UserData(id=str(user.id), role=user.role, verified=bool(user.verified))
    set_token_cookie(
        response,
        ACCESS_COOKIE,
        access_manager.generate(identity.id, identity.role, identity.verified),
        access_manager.ttl,
    )
    set_token_cookie(response, REFRESH_COOKIE, refresh_manager.generate(identity.id), refresh_manager.ttl)

    logger.info("User logged in: %s", identity.id)
    return {"data": identity}


@router.post("/logout")
def logout(current_user: UserData = Depends(get_current_user)):
    response = Response(status_code=200)
    response.delete_cookie(ACCESS_COOKIE, httponly=True, secure=True)
    response.delete_cookie(REFRESH_COOKIE, httponly=True, secure=True)
    return response


@router.post("/refresh", response_model=DataResponse[UserData])
def refresh(
    response: Response,
    claims: RefreshData = Depends(get_refresh_claims),
    service: AuthService = Depends(get_auth_service),
    access_manager: AccessJWTManager = Depends(get_access_jwt_manager),
):
    try:
        user_id = int(claims.id)
    except ValueError:
        raise HTTPException(status_code=401, detail=MSG_INVALID_TOKEN)

    try:
        role, verified = service.get_role_and_status(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    identity = UserData(id=claims.id, role=role, verified=verified)
    set_token_cookie(
        response,
        ACCESS_COOKIE,
        access_manager.generate(identity.id, identity.role, identity.verified),
        access_manager.ttl,
    )
    return {"data": identity}


# -------------------------
# Email verification
# -------------------------

@router.get("/verify", response_model=DataResponse[UserResponse])
def verify_email(
    background_tasks: BackgroundTasks,
    token: Optional[str] = Query(None),
    service: AuthService = Depends(get_auth_service),
    verification_manager: VerificationJWTManager = Depends(get_verification_jwt_manager),
):
    if not token:
        raise HTTPException(status_code=401, detail=MSG_INVALID_TOKEN)

    try:
        claims = verification_manager.verify(token)
        user_id = int(claims.id)
    except (InvalidTokenError, ValueError):
        raise HTTPException(status_code=401, detail=MSG_INVALID_TOKEN)

    try:
        user = service.verify_user(token, user_id)
    except TokenAlreadyUsedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    background_tasks.add_task(send_letter, service.send_verified_letter, user.email, user.first_name)
    return {"data": user}
