"""Factories for login payloads."""

from uuid import uuid4

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from tenantnotes.modules.users.schemas import LoginRequest


class LoginRequestFactory(ModelFactory[LoginRequest]):
    """Factory for generating LoginRequest payloads.

    Defaults to an address that no seeded user has.
    """

    __model__ = LoginRequest

    email = Use(lambda: f"user-{uuid4().hex[:8]}@example.test")
    password = Use(lambda: uuid4().hex)
