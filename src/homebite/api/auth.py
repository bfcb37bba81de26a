"""Bearer-token identity dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, Request

if TYPE_CHECKING:
    from homebite.containers import AppContainer


async def current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the caller's user id; raises UnauthenticatedError."""
    container: AppContainer = request.app.state.container
    return container.identity_service.require_user(authorization)
