"""
Ecommerce Application DTOs

Validated product data shared by the create and update use cases.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gooddeal.core.domain import ValidationException

CENTS = Decimal("0.01")
# Largest values the price (NUMERIC(10,2)) and integer columns can hold
MAX_PRICE = Decimal("99999999.99")
MAX_INT = 2**31 - 1


class ProductData(BaseModel):
    """Complete, validated set of product fields"""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, le=MAX_PRICE)
    original_price: Decimal | None = Field(None, ge=0, le=MAX_PRICE)
    category: str = Field(..., min_length=1, max_length=100)
    subcategory: str | None = Field(None, max_length=100)
    brand: str | None = Field(None, max_length=100)
    images: list[str] = Field(default_factory=list)
    stock: int = Field(..., ge=0, le=MAX_INT)
    specifications: dict[str, str] = Field(default_factory=dict)
    features: list[str] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("price", "original_price")
    @classmethod
    def round_to_cents(cls, value: Decimal | None) -> Decimal | None:
        if value is None:
            return value
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)

    @field_validator("images", "features", mode="before")
    @classmethod
    def none_as_empty_list(cls, value):
        return [] if value is None else value

    @field_validator("specifications", mode="before")
    @classmethod
    def none_as_empty_dict(cls, value):
        return {} if value is None else value


def validate_product_data(data: dict[str, Any]) -> ProductData:
    """
    Validate raw product fields.

    Raises:
        ValidationException: With one entry per invalid field in details["errors"]
    """
    try:
        return ProductData.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in e.errors()
        ]
        first_field = errors[0]["field"] if errors else None
        raise ValidationException(
            "Invalid product data",
            field=first_field,
            details={"errors": errors},
        ) from e


__all__ = ["MAX_INT", "MAX_PRICE", "ProductData", "validate_product_data"]
