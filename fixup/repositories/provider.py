# fixup/repositories/provider.py
from sqlalchemy.orm import Session

from fixup.db.models.provider import Provider


class ProviderRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int, personal_id_number: bytes, personal_id_preview: str, commit: bool = True) -> Provider:
        provider = Provider(
            user_id=user_id,
            personal_id_number=personal_id_number,
            personal_id_preview=personal_id_preview,
        )
        self.db.add(provider)
        if commit:
            self.db.commit()
        else:
            self.db.flush()
        return provider
