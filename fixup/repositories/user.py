# fixup/repositories/user.py
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fixup.core.roles import UserRole
from fixup.core.snowflake import SnowflakeNode
from fixup.db.models.user import User


class UserRepository:
    def __init__(self, db: Session, snowflake: SnowflakeNode):
        self.db = db
        self.snowflake = snowflake

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def create(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        email: str,
        hash: str,
        role: UserRole,
        commit: bool = True,
    ) -> User:
        """Insert a user with a fresh snowflake id.

        With ``commit=False`` the row is only flushed so the caller can finish
        a larger transaction.
        """
        user = User(
            id=self.snowflake.generate(),
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            email=email,
            hash=hash,
            role=role,
        )
        self.db.add(user)
        if commit:
            self._commit()
            self.db.refresh(user)
        else:
            self.db.flush()
        return user

    def get(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def update(self, user_id: int, fields: dict) -> Optional[User]:
        user = self.get(user_id)
        if not user:
            return None

        for field, value in fields.items():
            setattr(user, field, value)
        self._commit()
        self.db.refresh(user)
        return user

    def _update_column(self, user_id: int, values: dict) -> bool:
        try:
            updated = self.db.query(User).filter(User.id == user_id).update(values)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return updated > 0

    def update_picture(self, user_id: int, picture: str) -> bool:
        return self._update_column(user_id, {User.picture: picture})

    def update_hash(self, user_id: int, hash: str) -> bool:
        return self._update_column(user_id, {User.hash: hash})

    def update_verification(self, user_id: int, verified: bool) -> bool:
        return self._update_column(user_id, {User.verified: verified})

    def delete(self, user_id: int) -> bool:
        try:
            deleted = self.db.query(User).filter(User.id == user_id).delete()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return deleted > 0
