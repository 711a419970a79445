# fixup/db/models/provider.py
from sqlalchemy import BigInteger, Column, ForeignKey, LargeBinary, String
from sqlalchemy.orm import relationship
from fixup.db.base import Base

class Provider(Base):
    __tablename__ = "providers"

    user_id = Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    personal_id_number = Column(LargeBinary, nullable=False)
    personal_id_preview = Column(String(5), nullable=False)

    user = relationship("User", back_populates="provider")
