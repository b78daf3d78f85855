"""Dependencies exposing app.state objects, plus JSON body parsing for guarded routes."""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from app.core.config import Settings
from app.core.errors import BadRequestError
from app.core.security import TokenCodec

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Dependency that reads and validates the JSON body as model.

    FastAPI decodes declared body parameters before any dependency runs, so a
    malformed body would be rejected ahead of the interceptor chain. Route
    dependencies resolve before endpoint parameters, which puts this parse
    after authentication and role checks.
    """

    async def parse(request: Request) -> ModelT:
        try:
            data = await request.json()
        except ValueError as e:
            raise BadRequestError("Request body must be valid JSON.") from e
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    return parse


def json_body_openapi(model: type[BaseModel]) -> dict[str, Any]:
    """openapi_extra entry documenting a body read through json_body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema(by_alias=True)}},
        }
    }
