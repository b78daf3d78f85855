"""
Request interceptors: bearer-token authentication and role gating.

Each interceptor either returns (continue) or raises an ApiError, which the
app's exception handlers turn into the response (short-circuit). Routes
compose them once at import time with InterceptorChain and attach the chain
as a FastAPI dependency:

    dependencies=[Depends(InterceptorChain(BearerAuth(), RoleGate("admin")))]
"""

import logging
from typing import Annotated

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPBearer

from app.core.errors import ForbiddenError, InvalidTokenError, UnauthenticatedError
from app.core.security import TokenCodec
from app.models.user import ROLE_ADMIN
from app.schemas.auth import Identity

logger = logging.getLogger(__name__)


class RequestInterceptor:
    """One stage of a route's interceptor chain."""

    async def intercept(self, request: Request) -> None:
        raise NotImplementedError


class BearerAuth(RequestInterceptor):
    """
    Verify "Authorization: Bearer <token>" and attach the Identity to
    request.state.identity. Missing token: 401. Invalid, tampered or expired
    token: 403, with the reason logged but not returned.
    """

    def __init__(self) -> None:
        self._scheme = HTTPBearer(auto_error=False)

    async def intercept(self, request: Request) -> None:
        credentials = await self._scheme(request)
        if credentials is None or not credentials.credentials.strip():
            raise UnauthenticatedError("Access denied, token not found.")
        codec: TokenCodec = request.app.state.token_codec
        try:
            identity = codec.decode(credentials.credentials.strip())
        except jwt.PyJWTError as e:
            logger.warning("JWT verify error: %s", e)
            raise InvalidTokenError("Token is invalid or expired.") from e
        request.state.identity = identity


class RoleGate(RequestInterceptor):
    """Allow only identities whose role equals required_role exactly. Must follow BearerAuth."""

    def __init__(self, required_role: str) -> None:
        self.required_role = required_role

    async def intercept(self, request: Request) -> None:
        identity = getattr(request.state, "identity", None)
        if identity is None or identity.role != self.required_role:
            raise ForbiddenError("Access forbidden: insufficient role.")


class InterceptorChain:
    """Ordered interceptors run as a single route dependency."""

    def __init__(self, *interceptors: RequestInterceptor) -> None:
        self.interceptors = interceptors

    async def __call__(self, request: Request) -> None:
        for interceptor in self.interceptors:
            await interceptor.intercept(request)


def current_identity(request: Request) -> Identity:
    """Dependency: identity attached by BearerAuth earlier in the chain."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise UnauthenticatedError("Access denied, token not found.")
    return identity


CurrentIdentity = Annotated[Identity, Depends(current_identity)]

admin_only = InterceptorChain(BearerAuth(), RoleGate(ROLE_ADMIN))
