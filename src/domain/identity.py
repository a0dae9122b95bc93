"""
Caller Identity

Resolved from the session token by the access-control dependencies and
handed to route handlers.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict


class AuthenticatedIdentity(BaseModel):
    """Caller presented a valid session token"""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    email: str

    @property
    def is_authenticated(self) -> bool:
        return True


class AnonymousIdentity(BaseModel):
    """Caller presented no token, or one that failed verification"""

    model_config = ConfigDict(frozen=True)

    @property
    def is_authenticated(self) -> bool:
        return False


ANONYMOUS = AnonymousIdentity()

Identity = Union[AuthenticatedIdentity, AnonymousIdentity]
