from __future__ import annotations

from typing import Any, Optional


class PaymentProviderError(Exception):
    """Base class for errors reported by the card-payment provider."""


class OpenPayError(PaymentProviderError):
    def __init__(
        self,
        description: str,
        error_code: Optional[int] = None,
        category: str = "",
        http_code: Optional[int] = None,
        request_id: str = "",
    ) -> None:
        super().__init__(description)
        self.description = description
        self.error_code = error_code
        self.category = category
        self.http_code = http_code
        self.request_id = request_id

    @classmethod
    def from_response(cls, response: Any) -> "OpenPayError":
        try:
            body = response.json() or {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(
            description=body.get("description") or response.text or f"HTTP {response.status_code}",
            error_code=body.get("error_code"),
            category=body.get("category", ""),
            http_code=body.get("http_code", response.status_code),
            request_id=body.get("request_id", ""),
        )


class PaymentMethodNotFound(RuntimeError):
    """The payment method created earlier in the same payment attempt has disappeared."""
