# fixup/core/roles.py
import enum


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    MODERATOR = "MODERATOR"
    PROVIDER = "PROVIDER"
    CUSTOMER = "CUSTOMER"
