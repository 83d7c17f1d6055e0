"""Pydantic schemas for products."""

from typing import Optional

from pydantic import Field

from .record import CamelModel, NonEmptyStr, PositiveFloat, RecordBase, Text


class ProductBase(CamelModel):
    name: NonEmptyStr = Field(..., examples=["Ledger stand"])
    price: PositiveFloat = Field(..., examples=[19.99])
    description: Optional[Text] = Field(None, examples=["Oak, fits most hardware wallets"])


class ProductCreate(ProductBase):
    """Schema for creating a product."""


class ProductUpdate(CamelModel):
    """Schema for updating a product.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[NonEmptyStr] = None
    price: Optional[PositiveFloat] = None
    description: Optional[Text] = None


class Product(ProductBase, RecordBase):
    """Stored product."""
