"""
Thin OpenPay client used by the payment flow.

Only the three calls the flow needs are exposed: customer creation, card
tokenization and charge creation. Each call is a single blocking HTTP request;
failures are logged and re-raised unchanged (no retries, no translation of
transport errors).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.dateparse import parse_datetime

from .exceptions import OpenPayError

logger = logging.getLogger(__name__)

SANDBOX_API_URL = "https://sandbox-api.openpay.mx/v1"
PRODUCTION_API_URL = "https://api.openpay.mx/v1"


def _parse_date(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return parse_datetime(str(value))


def _parse_amount(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    return Decimal(str(value))


@dataclass
class ExternalCustomer:
    name: str
    email: str
    requires_account: bool = False
    id: Optional[str] = None
    creation_date: Optional[datetime] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "requires_account": self.requires_account,
        }
        if self.id:
            payload["id"] = self.id
        return payload

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "ExternalCustomer":
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            requires_account=bool(data.get("requires_account", False)),
            id=data.get("id"),
            creation_date=_parse_date(data.get("creation_date")),
        )


@dataclass
class ExternalCard:
    card_number: str
    holder_name: str
    expiration_year: str
    expiration_month: str
    cvv2: str
    device_session_id: str = ""
    id: Optional[str] = None
    creation_date: Optional[datetime] = None
    brand: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "card_number": self.card_number,
            "holder_name": self.holder_name,
            "expiration_year": self.expiration_year,
            "expiration_month": self.expiration_month,
            "cvv2": self.cvv2,
            "device_session_id": self.device_session_id,
        }

    @classmethod
    def from_payload(cls, data: Dict[str, Any], device_session_id: str = "") -> "ExternalCard":
        # The provider echoes the card back masked; never the CVV.
        return cls(
            card_number=data.get("card_number") or "",
            holder_name=data.get("holder_name") or "",
            expiration_year=data.get("expiration_year") or "",
            expiration_month=data.get("expiration_month") or "",
            cvv2="",
            device_session_id=device_session_id,
            id=data.get("id"),
            creation_date=_parse_date(data.get("creation_date")),
            brand=data.get("brand"),
        )


@dataclass
class ChargeRequest:
    method: str
    source_id: str
    amount: Decimal
    currency: str
    description: str
    device_session_id: str
    order_id: str
    use_3d_secure: bool
    redirect_url: str
    customer: ExternalCustomer

    def to_payload(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "source_id": self.source_id,
            "amount": float(self.amount),
            "currency": self.currency,
            "description": self.description,
            "device_session_id": self.device_session_id,
            "order_id": self.order_id,
            "use_3d_secure": self.use_3d_secure,
            "redirect_url": self.redirect_url,
            "customer": self.customer.to_payload(),
        }


@dataclass
class Charge:
    id: str
    status: Optional[str] = None
    amount: Optional[Decimal] = None
    authorization: Optional[str] = None
    creation_date: Optional[datetime] = None
    error_message: Optional[str] = None
    order_id: Optional[str] = None
    payment_method_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Charge":
        payment_method = data.get("payment_method") or {}
        return cls(
            id=data.get("id") or "",
            status=data.get("status"),
            amount=_parse_amount(data.get("amount")),
            authorization=data.get("authorization"),
            creation_date=_parse_date(data.get("creation_date")),
            error_message=data.get("error_message"),
            order_id=data.get("order_id"),
            payment_method_url=payment_method.get("url"),
            raw=data,
        )


class OpenPayAdapter:
    def __init__(
        self,
        merchant_id: str,
        private_key: str,
        is_production: bool = False,
        timeout: int = 20,
    ) -> None:
        self.merchant_id = merchant_id
        self.private_key = private_key
        self.is_production = is_production
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "OpenPayAdapter":
        merchant_id = getattr(settings, "OPENPAY_MERCHANT_ID", "")
        private_key = getattr(settings, "OPENPAY_PRIVATE_KEY", "")
        if not merchant_id or not private_key:
            raise ImproperlyConfigured("OPENPAY_MERCHANT_ID and OPENPAY_PRIVATE_KEY must be configured")
        return cls(
            merchant_id=merchant_id,
            private_key=private_key,
            is_production=bool(getattr(settings, "OPENPAY_IS_PRODUCTION", False)),
            timeout=int(getattr(settings, "OPENPAY_TIMEOUT", 20)),
        )

    @property
    def base_url(self) -> str:
        root = PRODUCTION_API_URL if self.is_production else SANDBOX_API_URL
        return f"{root}/{self.merchant_id}"

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        resp = requests.post(
            f"{self.base_url}/{path}",
            auth=(self.private_key, ""),
            headers={"Content-Type": "application/json"},
            json=payload,
            timeout=self.timeout,
        )
        if resp.status_code not in (200, 201):
            raise OpenPayError.from_response(resp)
        return resp.json()

    def create_customer(self, customer: ExternalCustomer) -> ExternalCustomer:
        logger.info("Creating customer with email: %s", customer.email)
        try:
            created = ExternalCustomer.from_payload(self._post("customers", customer.to_payload()))
        except Exception:
            logger.exception("Failed to create customer with email: %s", customer.email)
            raise
        logger.info("Successfully created customer with ID: %s", created.id)
        return created

    def create_card_token(self, card: ExternalCard) -> ExternalCard:
        logger.info("Creating card token for holder: %s", card.holder_name)
        try:
            data = self._post("cards", card.to_payload())
            token = ExternalCard.from_payload(data, device_session_id=card.device_session_id)
        except Exception:
            logger.exception("Failed to create card token for holder: %s", card.holder_name)
            raise
        logger.info("Successfully created card token with ID: %s", token.id)
        return token

    def create_charge(self, request: ChargeRequest) -> Charge:
        logger.info("Creating charge for amount: %s %s", request.amount, request.currency)
        try:
            charge = Charge.from_payload(self._post("charges", request.to_payload()))
        except Exception:
            logger.exception("Failed to create charge for amount: %s %s", request.amount, request.currency)
            raise
        logger.info("Successfully created charge with ID: %s", charge.id)
        return charge
