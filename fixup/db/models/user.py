# fixup/db/models/user.py
from sqlalchemy import BigInteger, Boolean, Column, DateTime, Enum, String, func
from sqlalchemy.orm import relationship
from fixup.core.roles import UserRole
from fixup.db.base import Base

class User(Base):
    __tablename__ = "users"

    # snowflake ids are assigned by the repository
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    phone_number = Column(String(20), nullable=False)
    email = Column(String(40), unique=True, index=True, nullable=False)
    picture = Column(String, nullable=True)
    hash = Column(String, nullable=False)
    role = Column(Enum(UserRole, name="user_role"), nullable=False, default=UserRole.CUSTOMER)
    verified = Column(Boolean, nullable=False, default=False, server_default="false")
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    provider = relationship(
        "Provider",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
