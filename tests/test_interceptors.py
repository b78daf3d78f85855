"""Unit tests for app.api.interceptors: BearerAuth, RoleGate and InterceptorChain."""

import asyncio
import unittest
from types import SimpleNamespace
from unittest.mock import patch

from starlette.requests import Request

from app.api import interceptors
from app.api.interceptors import BearerAuth, InterceptorChain, RequestInterceptor, RoleGate
from app.core.errors import ForbiddenError, InvalidTokenError, UnauthenticatedError
from app.core.security import TokenCodec
from app.schemas.auth import Identity

SECRET = "interceptor-test-secret"
CODEC = TokenCodec(SECRET)
ADMIN = Identity(id=1, username="root", role="admin")
USER = Identity(id=2, username="bob", role="user")


def _request(authorization: str | None = None) -> Request:
    """Build a bare Starlette request whose app carries the token codec."""
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": headers,
        "app": SimpleNamespace(state=SimpleNamespace(token_codec=CODEC)),
    }
    return Request(scope)


def _run(interceptor: RequestInterceptor, request: Request) -> None:
    asyncio.run(interceptor.intercept(request))


class TestBearerAuth(unittest.TestCase):
    """BearerAuth attaches the identity or short-circuits with 401/403."""

    def test_valid_token_attaches_identity(self) -> None:
        request = _request(f"Bearer {CODEC.encode(USER)}")
        _run(BearerAuth(), request)
        self.assertEqual(request.state.identity, USER)

    def test_scheme_is_case_insensitive(self) -> None:
        request = _request(f"bearer {CODEC.encode(USER)}")
        _run(BearerAuth(), request)
        self.assertEqual(request.state.identity, USER)

    def test_idempotent(self) -> None:
        token = CODEC.encode(ADMIN)
        request = _request(f"Bearer {token}")
        auth = BearerAuth()
        _run(auth, request)
        first = request.state.identity
        _run(auth, request)
        self.assertEqual(request.state.identity, first)

    def test_missing_header(self) -> None:
        with self.assertRaises(UnauthenticatedError) as ctx:
            _run(BearerAuth(), _request())
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertIn("token not found", ctx.exception.message)

    def test_scheme_without_token(self) -> None:
        with self.assertRaises(UnauthenticatedError):
            _run(BearerAuth(), _request("Bearer"))

    def test_wrong_scheme(self) -> None:
        with self.assertRaises(UnauthenticatedError):
            _run(BearerAuth(), _request(f"Basic {CODEC.encode(USER)}"))

    def test_invalid_token_is_403_and_logged(self) -> None:
        request = _request("Bearer garbage")
        with self.assertLogs("app.api.interceptors", level="WARNING") as logs:
            with self.assertRaises(InvalidTokenError) as ctx:
                _run(BearerAuth(), request)
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertNotIn("garbage", ctx.exception.message)
        self.assertTrue(any("JWT verify error" in line for line in logs.output))
        self.assertIsNone(getattr(request.state, "identity", None))

    def test_expired_token(self) -> None:
        expired = TokenCodec(SECRET, expire_minutes=-1).encode(USER)
        with self.assertRaises(InvalidTokenError):
            _run(BearerAuth(), _request(f"Bearer {expired}"))

    def test_foreign_signature(self) -> None:
        forged = TokenCodec("attacker-secret").encode(ADMIN)
        with self.assertRaises(InvalidTokenError):
            _run(BearerAuth(), _request(f"Bearer {forged}"))


class TestRoleGate(unittest.TestCase):
    """RoleGate is an exact-match predicate on the attached identity."""

    def _with_identity(self, identity: Identity | None) -> Request:
        request = _request()
        if identity is not None:
            request.state.identity = identity
        return request

    def test_matching_role_passes_unchanged(self) -> None:
        request = self._with_identity(ADMIN)
        _run(RoleGate("admin"), request)
        self.assertIs(request.state.identity, ADMIN)

    def test_wrong_role(self) -> None:
        with self.assertRaises(ForbiddenError) as ctx:
            _run(RoleGate("admin"), self._with_identity(USER))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_no_hierarchy(self) -> None:
        with self.assertRaises(ForbiddenError):
            _run(RoleGate("user"), self._with_identity(ADMIN))

    def test_missing_identity(self) -> None:
        with self.assertRaises(ForbiddenError):
            _run(RoleGate("admin"), self._with_identity(None))


class TestInterceptorChain(unittest.TestCase):
    def test_runs_in_order_and_passes(self) -> None:
        request = _request(f"Bearer {CODEC.encode(ADMIN)}")
        asyncio.run(InterceptorChain(BearerAuth(), RoleGate("admin"))(request))
        self.assertEqual(request.state.identity, ADMIN)

    def test_short_circuits_on_first_failure(self) -> None:
        gate = RoleGate("admin")
        with patch.object(gate, "intercept", wraps=gate.intercept) as spy:
            with self.assertRaises(UnauthenticatedError):
                asyncio.run(InterceptorChain(BearerAuth(), gate)(_request()))
        spy.assert_not_called()

    def test_wrong_role_after_valid_token(self) -> None:
        request = _request(f"Bearer {CODEC.encode(USER)}")
        with self.assertRaises(ForbiddenError):
            asyncio.run(InterceptorChain(BearerAuth(), RoleGate("admin"))(request))

    def test_module_exposes_only_admin_chain(self) -> None:
        chains = [
            name for name, value in vars(interceptors).items() if isinstance(value, InterceptorChain)
        ]
        self.assertEqual(chains, ["admin_only"])

    def test_misordered_chain_is_forbidden(self) -> None:
        request = _request(f"Bearer {CODEC.encode(ADMIN)}")
        with self.assertRaises(ForbiddenError):
            asyncio.run(InterceptorChain(RoleGate("admin"), BearerAuth())(request))


if __name__ == "__main__":
    unittest.main()
