"""Fashion product endpoints. Reads are public; writes require an admin token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import json_body, json_body_openapi
from app.api.interceptors import CurrentIdentity, admin_only
from app.core.database import get_db
from app.schemas.products import ProductCreate, ProductRead, ProductUpdate
from app.services import products as product_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[ProductRead])
def list_products(db: Annotated[Session, Depends(get_db)]) -> list[ProductRead]:
    """All products ordered by sku."""
    return product_service.list_products(db)


@router.get("/{sku}", response_model=ProductRead)
def get_product(sku: str, db: Annotated[Session, Depends(get_db)]) -> ProductRead:
    return product_service.get_product(db, sku)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(admin_only)],
    openapi_extra=json_body_openapi(ProductCreate),
)
def create_product(
    body: Annotated[ProductCreate, Depends(json_body(ProductCreate))],
    db: Annotated[Session, Depends(get_db)],
    identity: CurrentIdentity,
) -> ProductRead:
    """
    Create a product. sku is stored uppercased; price must be an integer and
    isAvailable a boolean. Duplicate sku returns 409.
    """
    logger.info("Create product requested by user id=%s", identity.id)
    return product_service.create_product(db, body)


@router.put(
    "/{sku}",
    response_model=ProductRead,
    dependencies=[Depends(admin_only)],
    openapi_extra=json_body_openapi(ProductUpdate),
)
def update_product(
    sku: str,
    body: Annotated[ProductUpdate, Depends(json_body(ProductUpdate))],
    db: Annotated[Session, Depends(get_db)],
    identity: CurrentIdentity,
) -> ProductRead:
    """Update any non-empty subset of productName, price and isAvailable; other fields keep their values."""
    logger.info("Update product %s requested by user id=%s", sku, identity.id)
    return product_service.update_product(db, sku, body.changes())


@router.delete("/{sku}", response_model=ProductRead, dependencies=[Depends(admin_only)])
def delete_product(
    sku: str,
    db: Annotated[Session, Depends(get_db)],
    identity: CurrentIdentity,
) -> ProductRead:
    """Delete a product and return it as it was before deletion."""
    logger.info("Delete product %s requested by user id=%s", sku, identity.id)
    return product_service.delete_product(db, sku)
