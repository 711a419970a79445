# fixup/core/hasher.py
import base64
import hmac
import math
import os

from argon2.low_level import Type, hash_secret_raw

from fixup.core.config import Argon2Config


class PasswordMismatchError(Exception):
    pass


def _encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode().rstrip("=")


def _decode(value: str) -> bytes:
    return base64.b64decode(value + "=" * (-len(value) % 4))


class Argon2Hasher:
    """Argon2i password hasher.

    The stored form is ``b64(key) + b64(salt)`` (unpadded standard base64), so
    the salt starts at a fixed offset derived from the configured key length.
    """

    def __init__(self, cfg: Argon2Config):
        self.cfg = cfg
        self.breakpoint = math.ceil(cfg.key_len * 4 / 3)

    def _derive(self, password: str, salt: bytes) -> bytes:
        return hash_secret_raw(
            secret=password.encode(),
            salt=salt,
            time_cost=self.cfg.time,
            memory_cost=self.cfg.memory,
            parallelism=self.cfg.threads,
            hash_len=self.cfg.key_len,
            type=Type.I,
        )

    def hash_password(self, password: str) -> str:
        salt = os.urandom(self.cfg.salt_len)
        return _encode(self._derive(password, salt)) + _encode(salt)

    def hash_password_with_salt(self, password: str, salt: str) -> str:
        return _encode(self._derive(password, _decode(salt))) + salt

    def verify_password(self, password: str, hashed: str) -> None:
        salt = hashed[self.breakpoint:]
        if not salt:
            raise PasswordMismatchError("password does not match")

        try:
            new_hash = self.hash_password_with_salt(password, salt)
        except ValueError as e:
            raise PasswordMismatchError("malformed hash") from e

        if not hmac.compare_digest(new_hash, hashed):
            raise PasswordMismatchError("password does not match")
