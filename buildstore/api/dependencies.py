"""
FastAPI dependencies - request body parsing and service injection.
"""

import json
from typing import Annotated, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from buildstore.db.repositories import CategoryRepository, ItemRepository, UserRepository
from buildstore.db.session import DbSession
from buildstore.services.auth_service import AuthService
from buildstore.services.catalog_service import CatalogService

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def parsed_body(model: type[ModelT]):
    """Dependency parsing a JSON or URL-encoded form body into `model`.

    An empty body parses as an empty object, so every field takes its default.
    Bodies that cannot be parsed surface as RequestValidationError (answered with 500).
    """

    async def dependency(request: Request) -> ModelT:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(FORM_CONTENT_TYPES):
            data = dict(await request.form())
        else:
            raw = await request.body()
            try:
                data = json.loads(raw) if raw else {}
            except ValueError as exc:
                raise RequestValidationError(
                    [{"loc": ("body",), "msg": f"Invalid JSON: {exc.msg}", "type": "json_invalid"}]
                ) from exc
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors()) from exc

    return dependency


def get_catalog_service(session: DbSession) -> CatalogService:
    """Factory for the catalog service with repository injection."""
    return CatalogService(CategoryRepository(session), ItemRepository(session))


def get_auth_service(session: DbSession) -> AuthService:
    return AuthService(UserRepository(session))


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
