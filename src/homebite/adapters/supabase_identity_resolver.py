"""Supabase auth token resolution."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from homebite.services.identity import IdentityResolver

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityResolver(IdentityResolver):
    """Resolve access tokens through Supabase auth."""

    client: Client

    def resolve(self, access_token: str) -> UUID | None:
        """Return the user id behind an access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
