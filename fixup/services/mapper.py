# fixup/services/mapper.py
from fixup.db.models.user import User
from fixup.schemas.user import UserResponse


def map_user_to_dto(user: User, url_signer) -> UserResponse:
    picture_url = None
    if user.picture:
        picture_url = url_signer.sign_url(user.picture)

    return UserResponse(
        id=str(user.id),
        first_name=user.first_name,
        last_name=user.last_name,
        phone_number=user.phone_number,
        email=user.email,
        picture_url=picture_url,
        role=getattr(user.role, "value", user.role),
        user_status=bool(user.verified),
        created_at=user.created_at,
    )
