# services/product_ui.py

from typing import Callable, Optional, Tuple

from services import ui_state
from services.product_client import ProductAPIError, ProductClient, ProductRecord
from services.ui_state import DraftValidationError, Editing, UIState
from utils import get_logger

logger = get_logger("product_ui")


def _log_alert(message: str) -> None:
    logger.warning("ALERT: %s", message)


class ProductUI:
    """
    Drives the product screen: holds the UIState, calls the API and
    re-fetches the whole list after every successful mutation.

    Every action returns True on success and False otherwise. Client
    errors are logged here and never propagate to the caller; the state
    is left as it was before the action.
    """
    def __init__(self, client: ProductClient, alert: Optional[Callable[[str], None]] = None):
        self.client = client
        self.alert = alert or _log_alert
        self.state = UIState()

    @property
    def products(self) -> Tuple[ProductRecord, ...]:
        return self.state.products

    @property
    def editing_id(self) -> Optional[int]:
        return self.state.editing_id

    # -------------------- reconciliation --------------------
    def load(self) -> bool:
        """Initial mount; identical to refresh."""
        return self.refresh()

    def refresh(self) -> bool:
        try:
            products = self.client.list_products()
        except ProductAPIError as e:
            logger.error("Error fetching products: %s", e)
            return False
        self.state = ui_state.products_loaded(self.state, products)
        return True

    # -------------------- create --------------------
    def set_draft_field(self, field_name: str, value: str) -> None:
        self.state = ui_state.draft_field_changed(self.state, field_name, value)

    def submit_create(self) -> bool:
        try:
            payload = ui_state.validate_draft(self.state.draft)
        except DraftValidationError as e:
            self.alert(str(e))
            return False
        try:
            self.client.create_product(payload)
        except ProductAPIError as e:
            logger.error("Error creating product: %s", e)
            return False
        self.state = ui_state.draft_cleared(self.state)
        self.refresh()
        return True

    # -------------------- edit --------------------
    def begin_edit(self, product: ProductRecord) -> None:
        self.state = ui_state.edit_begun(self.state, product)

    def change_edit_field(self, field_name: str, value: str) -> None:
        self.state = ui_state.edit_field_changed(self.state, field_name, value)

    def save_edit(self) -> bool:
        edit = self.state.edit
        if not isinstance(edit, Editing):
            return False
        try:
            payload = ui_state.validate_draft(edit.draft)
        except DraftValidationError as e:
            self.alert(str(e))
            return False
        try:
            self.client.update_product(edit.product_id, payload)
        except ProductAPIError as e:
            logger.error("Error updating product %s: %s", edit.product_id, e)
            return False
        self.state = ui_state.edit_finished(self.state)
        self.refresh()
        return True

    def cancel_edit(self) -> None:
        self.state = ui_state.edit_finished(self.state)

    # -------------------- delete --------------------
    def delete(self, product_id: int) -> bool:
        try:
            self.client.delete_product(product_id)
        except ProductAPIError as e:
            logger.error("Error deleting product %s: %s", product_id, e)
            return False
        self.refresh()
        return True
