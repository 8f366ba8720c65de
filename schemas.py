# schemas.py
from __future__ import annotations

from pydantic import BaseModel, Field, ConfigDict, field_validator

# =========================
# Base model configurations
# =========================

class ORMBase(BaseModel):
    """Base for models mapped to SQLAlchemy objects."""
    model_config = ConfigDict(from_attributes=True)

# ======================================================
# Product schemas (request bodies and API responses)
# ======================================================

# Matches the NUMERIC(10, 2) price column.
MAX_PRICE = 99999999.99
MAX_NAME_LENGTH = 255

class ProductBase(BaseModel):
    name: str
    price: float = Field(..., gt=0, le=MAX_PRICE, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        if len(value) > MAX_NAME_LENGTH:
            raise ValueError(f"name must be at most {MAX_NAME_LENGTH} characters")
        return value

    @field_validator("price")
    @classmethod
    def _price_to_cents(cls, value: float) -> float:
        if round(value, 2) <= 0:
            raise ValueError("price must be at least 0.01")
        return round(value, 2)

class ProductCreate(ProductBase):
    pass

class ProductUpdate(ProductBase):
    pass

class Product(ORMBase):
    id: int
    name: str
    price: float
