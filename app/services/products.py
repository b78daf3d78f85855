"""Product repository: CRUD over the fashion table with canonical sku handling."""

import logging

from sqlalchemy import delete, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.models import Product
from app.schemas.products import ProductCreate, ProductRead
from app.services.update_builder import build_update_statement

logger = logging.getLogger(__name__)

# Fixed assignment order for partial updates: (JSON field name, column).
PRODUCT_UPDATE_FIELDS: tuple[tuple[str, str], ...] = (
    ("productName", "product_name"),
    ("price", "price"),
    ("isAvailable", "is_available"),
)

_PRODUCT_COLUMNS = tuple(Product.__table__.columns)


def normalize_sku(sku: str) -> str:
    """Canonical sku form used for every write and lookup."""
    return sku.strip().upper()


def list_products(db: Session) -> list[ProductRead]:
    """Return every product ordered by sku ascending."""
    rows = db.query(Product).order_by(Product.sku.asc()).all()
    return [ProductRead.model_validate(row) for row in rows]


def get_product(db: Session, sku: str) -> ProductRead:
    product = db.query(Product).filter(Product.sku == normalize_sku(sku)).first()
    if product is None:
        raise NotFoundError("Product not found.")
    return ProductRead.model_validate(product)


def create_product(db: Session, data: ProductCreate) -> ProductRead:
    """
    Insert a product. The unique index on sku is the only duplicate check;
    a violation is rolled back and reported as ConflictError.
    """
    product = Product(
        sku=normalize_sku(data.sku),
        product_name=data.product_name,
        price=data.price,
        is_available=data.is_available,
    )
    db.add(product)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Product create rejected: sku=%s already exists", product.sku)
        raise ConflictError("Product SKU already in use.") from e
    db.refresh(product)
    logger.info("Product created: sku=%s id=%s", product.sku, product.id)
    return ProductRead.model_validate(product)


def update_product(db: Session, sku: str, changes: dict[str, object]) -> ProductRead:
    """
    Apply a partial update; changes is keyed by JSON field name and only those
    columns are assigned. Raises BadRequestError when changes is empty and
    NotFoundError when no row has this sku.
    """
    canonical = normalize_sku(sku)
    statement = build_update_statement(
        table=Product.__tablename__,
        fields=PRODUCT_UPDATE_FIELDS,
        changes=changes,
        key_column="sku",
        key=canonical,
        returning=[c.name for c in _PRODUCT_COLUMNS],
    )
    query = text(statement.sql).columns(*_PRODUCT_COLUMNS)
    row = db.execute(query, statement.bind_params()).mappings().first()
    if row is None:
        db.rollback()
        raise NotFoundError("Product not found for update.")
    db.commit()
    logger.info("Product updated: sku=%s fields=%s", canonical, sorted(changes))
    return ProductRead.model_validate(dict(row))


def delete_product(db: Session, sku: str) -> ProductRead:
    """Delete by sku in one statement and return the row as it was before deletion."""
    canonical = normalize_sku(sku)
    row = (
        db.execute(
            delete(Product.__table__)
            .where(Product.__table__.c.sku == canonical)
            .returning(*_PRODUCT_COLUMNS)
        )
        .mappings()
        .first()
    )
    if row is None:
        db.rollback()
        raise NotFoundError("Product not found for deletion.")
    db.commit()
    logger.info("Product deleted: sku=%s", canonical)
    return ProductRead.model_validate(dict(row))
