"""Caller identity resolution."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from homebite.domain.errors import UnauthenticatedError


class IdentityResolver(Protocol):
    """Interface for resolving access tokens to user ids."""

    def resolve(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, else None."""


@dataclass
class IdentityService:
    """Service that turns bearer tokens into user ids."""

    resolver: IdentityResolver

    def require_user(self, authorization: str | None) -> UUID:
        """Return the caller's user id or raise UnauthenticatedError."""
        token = parse_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError()
        user_id = self.resolver.resolve(token)
        if user_id is None:
            raise UnauthenticatedError()
        return user_id


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
