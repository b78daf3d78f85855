"""Request/response schemas for the fashion product resource."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StringConstraints, model_validator

# PostgreSQL INTEGER (int4) upper bound for the price column.
PRICE_MAX = 2_147_483_647

# Whitespace is stripped before the length checks, so "   " is rejected as empty.
Sku = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=64)]
ProductName = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=255)]
Price = Annotated[StrictInt, Field(ge=0, le=PRICE_MAX)]


class ProductBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ProductCreate(ProductBase):
    """All four fields are required; price must be an integer and isAvailable a JSON boolean."""

    sku: Sku
    product_name: ProductName = Field(..., alias="productName")
    price: Price
    is_available: StrictBool = Field(..., alias="isAvailable")


class ProductUpdate(ProductBase):
    """
    Partial update. Only fields present in the request body are applied;
    presence is read from model_fields_set, so omitted fields stay untouched.
    """

    product_name: ProductName | None = Field(default=None, alias="productName")
    price: Price | None = None
    is_available: StrictBool | None = Field(default=None, alias="isAvailable")

    @model_validator(mode="after")
    def reject_explicit_null(self) -> "ProductUpdate":
        nulls = [
            type(self).model_fields[name].alias or name
            for name in self.model_fields_set
            if getattr(self, name) is None
        ]
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(sorted(nulls))}")
        return self

    def changes(self) -> dict[str, object]:
        """Supplied fields keyed by their JSON name (productName, price, isAvailable)."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ProductRead(ProductBase):
    """Product row as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    sku: str
    product_name: str = Field(..., alias="productName")
    price: int
    is_available: bool = Field(..., alias="isAvailable")
