"""User roles within a tenant."""

from enum import StrEnum


class Role(StrEnum):
    """Role a user holds inside their tenant."""

    ADMIN = "admin"
    MEMBER = "member"
