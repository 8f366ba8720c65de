# services/ui_state.py
"""
Client-side state for the product screen.

State values are immutable; every user action maps to one function that
takes the current UIState and returns the next one. Nothing here touches
the network.
"""
import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Tuple, Union

from services.product_client import ProductPayload, ProductRecord

INVALID_NAME_MESSAGE = "Please enter a valid product name."
INVALID_PRICE_MESSAGE = "Please enter a valid product price."

# Prices are kept in cents up to this value.
MAX_PRICE = 99999999.99

DRAFT_FIELDS = ("name", "price")


class DraftValidationError(ValueError):
    """Raised when form fields would not make a valid product."""


@dataclass(frozen=True)
class Draft:
    """Form fields exactly as typed by the user."""
    name: str = ""
    price: str = ""


@dataclass(frozen=True)
class NoEdit:
    pass


@dataclass(frozen=True)
class Editing:
    product_id: int
    draft: Draft


EditMode = Union[NoEdit, Editing]


@dataclass(frozen=True)
class UIState:
    products: Tuple[ProductRecord, ...] = ()
    draft: Draft = field(default_factory=Draft)
    edit: EditMode = field(default_factory=NoEdit)

    @property
    def editing_id(self) -> Optional[int]:
        return self.edit.product_id if isinstance(self.edit, Editing) else None


# -------------------- validation --------------------

def validate_draft(draft: Draft) -> ProductPayload:
    name = draft.name.strip()
    if not name:
        raise DraftValidationError(INVALID_NAME_MESSAGE)
    try:
        price = float(str(draft.price).strip())
    except ValueError:
        raise DraftValidationError(INVALID_PRICE_MESSAGE) from None
    if not math.isfinite(price) or round(price, 2) <= 0 or price > MAX_PRICE:
        raise DraftValidationError(INVALID_PRICE_MESSAGE)
    return ProductPayload(name=name, price=price)


# -------------------- transitions --------------------

def _with_field(draft: Draft, field_name: str, value: str) -> Draft:
    if field_name not in DRAFT_FIELDS:
        raise KeyError(f"Unknown draft field '{field_name}'")
    return replace(draft, **{field_name: value})

def products_loaded(state: UIState, products: Iterable[ProductRecord]) -> UIState:
    return replace(state, products=tuple(products))

def draft_field_changed(state: UIState, field_name: str, value: str) -> UIState:
    return replace(state, draft=_with_field(state.draft, field_name, value))

def draft_cleared(state: UIState) -> UIState:
    return replace(state, draft=Draft())

def edit_begun(state: UIState, product: ProductRecord) -> UIState:
    """Starts editing `product`, dropping any unsaved edit of another row."""
    draft = Draft(name=product.name, price=_format_price(product.price))
    return replace(state, edit=Editing(product_id=product.id, draft=draft))

def edit_field_changed(state: UIState, field_name: str, value: str) -> UIState:
    if not isinstance(state.edit, Editing):
        return state
    edit = replace(state.edit, draft=_with_field(state.edit.draft, field_name, value))
    return replace(state, edit=edit)

def edit_finished(state: UIState) -> UIState:
    return replace(state, edit=NoEdit())

def _format_price(price: float) -> str:
    # 10.0 -> "10", 9.5 -> "9.5"
    price = float(price)
    return str(int(price)) if price.is_integer() else repr(price)
