# services/product_client.py

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from config import settings


@dataclass(frozen=True)
class ProductRecord:
    id: int
    name: str
    price: float

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ProductRecord":
        return cls(id=int(data["id"]), name=data["name"], price=float(data["price"]))


@dataclass(frozen=True)
class ProductPayload:
    """Fields a client may send; never carries an id."""
    name: str
    price: float

    def to_json(self) -> Dict[str, Any]:
        return {"name": self.name, "price": self.price}


# -------------------- errors --------------------

class ProductAPIError(Exception):
    """Base error for every failed call against the products API."""
    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

class NotFoundError(ProductAPIError):
    pass

class ValidationError(ProductAPIError):
    pass

class TransportError(ProductAPIError):
    """The server could not be reached or the connection broke."""


class ProductClient:
    """
    Thin HTTP client for the /api/products endpoints.

    `session` may be any object with a requests-style `request()` method;
    a fresh `requests.Session` is used when none is given.
    """
    def __init__(self, base_url: Optional[str] = None, session: Any = None, timeout: Optional[float] = None):
        base_url = base_url or settings.api_base_url
        self.endpoint = f"{base_url.rstrip('/')}/api/products"
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout or settings.request_timeout
        self.headers = {"Accept": "application/json"}

    # -------------------- internal helpers --------------------
    def _request(self, method: str, url: str, payload: Optional[ProductPayload] = None):
        headers = dict(self.headers)
        kwargs: Dict[str, Any] = {}
        if payload is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = payload.to_json()
        try:
            resp = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if 200 <= resp.status_code < 300:
            return resp

        try:
            detail = resp.json().get("detail")
        except (ValueError, AttributeError):
            detail = None
        message = f"{method} {url} returned {resp.status_code}"
        if resp.status_code == 404:
            raise NotFoundError(message, resp.status_code, detail)
        if resp.status_code in (400, 422):
            raise ValidationError(message, resp.status_code, detail)
        raise ProductAPIError(message, resp.status_code, detail)

    def _decode(self, method: str, url: str, resp) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ProductAPIError(f"{method} {url} returned a non-JSON body", resp.status_code) from e

    def _fetch_one(self, method: str, url: str, payload: Optional[ProductPayload] = None) -> ProductRecord:
        resp = self._request(method, url, payload)
        data = self._decode(method, url, resp)
        try:
            return ProductRecord.from_json(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ProductAPIError(f"{method} {url} returned a malformed product: {e}", resp.status_code) from e

    # -------------------- operations --------------------
    def list_products(self) -> List[ProductRecord]:
        resp = self._request("GET", self.endpoint)
        data = self._decode("GET", self.endpoint, resp)
        try:
            return [ProductRecord.from_json(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise ProductAPIError(f"GET {self.endpoint} returned a malformed product list: {e}", resp.status_code) from e

    def get_product(self, product_id: int) -> ProductRecord:
        return self._fetch_one("GET", f"{self.endpoint}/{product_id}")

    def create_product(self, payload: ProductPayload) -> ProductRecord:
        return self._fetch_one("POST", self.endpoint, payload)

    def update_product(self, product_id: int, payload: ProductPayload) -> ProductRecord:
        return self._fetch_one("PUT", f"{self.endpoint}/{product_id}", payload)

    def delete_product(self, product_id: int) -> None:
        self._request("DELETE", f"{self.endpoint}/{product_id}")
