from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone

from . import repository
from .constants import (
    DEFAULT_CHARGE_AMOUNT,
    DEFAULT_COUNTRY_CODE,
    DEFAULT_CURRENCY_CODE,
    OPENPAY_PROVIDER_NAME,
    OpenPayTransactionStatus,
    PayInType,
    PaymentMethodType,
    PaymentStatus,
    TransactionType,
    describe,
    payment_status_code,
)
from .exceptions import PaymentMethodNotFound
from .master_data import AppMasterData, get_master_data
from .models import PaymentMethod
from .openpay import Charge, ChargeRequest, ExternalCard, ExternalCustomer, OpenPayAdapter

logger = logging.getLogger(__name__)

# PayinLog.card_owner_name column width
CARD_OWNER_NAME_MAX_LENGTH = 100


@dataclass
class PaymentRequest:
    name: str
    email: str
    card_number: str
    expiration_year: str
    expiration_month: str
    cvv2: str
    order_id: str
    device_session_id: str = ""


@dataclass
class PaymentResult:
    id: str
    order_id: str
    customer_id: str
    amount: Decimal
    currency: str
    status: str
    created_at: datetime
    transaction_id: Optional[str] = None
    three_d_secure_url: Optional[str] = None
    error_message: Optional[str] = None


def mask_card_number(card_number: str) -> str:
    digits = card_number.replace(" ", "")
    if len(digits) <= 4:
        return digits
    return "*" * (len(digits) - 4) + digits[-4:]


def mask_cvv(cvv2: str) -> str:
    return "*" * min(len(cvv2), 4)


class PaymentService:
    """
    Runs one card payment attempt against OpenPay.

    Steps, strictly in order and each committed on its own:
        1. local payment method (correlation token)
        2. billing customer, reused by exact name + email or created remotely
        3. payment method stamped with the billing customer id
        4. card tokenization + tokenization transaction
        5. charge + payin log + charge transaction

    Any failure aborts the remaining steps and is re-raised as-is; rows written
    by earlier steps are left in place.
    """

    def __init__(
        self,
        adapter: Optional[OpenPayAdapter] = None,
        master_data: Optional[AppMasterData] = None,
        redirect_url: Optional[str] = None,
        default_device_session_id: Optional[str] = None,
    ) -> None:
        if redirect_url is None:
            redirect_url = getattr(settings, "OPENPAY_REDIRECT_URL", "")
        if not redirect_url:
            raise ImproperlyConfigured("OPENPAY_REDIRECT_URL is not configured")

        if default_device_session_id is None:
            default_device_session_id = getattr(settings, "OPENPAY_DEVICE_SESSION_ID", "")
        if not default_device_session_id:
            raise ImproperlyConfigured("OPENPAY_DEVICE_SESSION_ID is not configured")

        self.redirect_url = redirect_url
        self.default_device_session_id = default_device_session_id
        self.master_data = master_data or get_master_data()

        provider = self.master_data.get_provider_by_name(OPENPAY_PROVIDER_NAME)
        if provider is None:
            raise ImproperlyConfigured(f"{OPENPAY_PROVIDER_NAME} provider not found in master data")
        self.provider = provider
        self.adapter = adapter or OpenPayAdapter.from_settings()

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        logger.info("Starting combined customer, card, and payment process for order %s", request.order_id)
        try:
            if not request.device_session_id or not request.device_session_id.strip():
                request = replace(request, device_session_id=self.default_device_session_id)

            expiration = self._parse_expiration(request)
            payment_method = self._create_payment_method()
            customer, billing_customer_id = self._resolve_customer(request, payment_method)
            self._attach_billing_customer(payment_method.id, billing_customer_id)
            card = self._create_card_token(request, expiration, customer, billing_customer_id)
            charge = self._create_charge(
                request, expiration, customer, card.id or "", payment_method, billing_customer_id
            )
        except Exception:
            logger.exception("Error in combined payment process for order %s", request.order_id)
            raise

        return PaymentResult(
            id=charge.id,
            order_id=request.order_id,
            customer_id=customer.id or "",
            amount=DEFAULT_CHARGE_AMOUNT,
            currency=DEFAULT_CURRENCY_CODE,
            status=charge.status or describe(PaymentStatus.UNKNOWN),
            created_at=charge.creation_date or timezone.now(),
            transaction_id=charge.authorization,
            three_d_secure_url=charge.payment_method_url,
            error_message=charge.error_message,
        )

    def _parse_expiration(self, request: PaymentRequest) -> Tuple[int, int]:
        # Must run before any remote call.
        return int(request.expiration_year), int(request.expiration_month)

    def _create_payment_method(self) -> PaymentMethod:
        logger.info("Creating PaymentMethod...")
        try:
            payment_method = repository.create_payment_method(self.provider, uuid.uuid4().hex)
        except Exception:
            logger.exception("Error creating PaymentMethod")
            raise
        logger.info("PaymentMethod created with ID: %s", payment_method.id)
        return payment_method

    def _resolve_customer(
        self, request: PaymentRequest, payment_method: PaymentMethod
    ) -> Tuple[ExternalCustomer, int]:
        logger.info("Resolving OpenPay customer for %s", request.email)
        try:
            existing = repository.find_billing_customer(request.name, request.email)
            if existing is not None:
                logger.info("Reusing customer with ID: %s", existing.api_customer_id)
                return (
                    ExternalCustomer(
                        name=existing.name,
                        email=existing.email,
                        requires_account=False,
                        id=existing.api_customer_id,
                    ),
                    existing.id,
                )

            customer = self.adapter.create_customer(
                ExternalCustomer(name=request.name, email=request.email, requires_account=False)
            )
            billing_customer = repository.create_billing_customer(
                name=request.name,
                email=request.email,
                api_customer_id=customer.id or "",
                payment_method=payment_method,
                two_letter_iso_code=DEFAULT_COUNTRY_CODE,
            )
        except Exception:
            logger.exception("Error creating customer in OpenPay for %s", request.email)
            raise
        logger.info("Customer created with ID: %s", customer.id)
        return customer, billing_customer.id

    def _attach_billing_customer(self, payment_method_id: int, billing_customer_id: int) -> None:
        logger.info("Updating PaymentMethod for BillingCustomerId: %s", billing_customer_id)
        try:
            payment_method = repository.update_payment_method_owner(payment_method_id, billing_customer_id)
            if payment_method is None:
                logger.warning("PaymentMethod with ID: %s not found", payment_method_id)
                raise PaymentMethodNotFound(f"PaymentMethod with ID: {payment_method_id} not found")
        except Exception:
            logger.exception("Error updating PaymentMethod for BillingCustomerId: %s", billing_customer_id)
            raise
        logger.info("PaymentMethod updated for BillingCustomerId: %s", billing_customer_id)

    def _create_card_token(
        self,
        request: PaymentRequest,
        expiration: Tuple[int, int],
        customer: ExternalCustomer,
        billing_customer_id: int,
    ) -> ExternalCard:
        logger.info("Creating card token in OpenPay...")
        try:
            card = self.adapter.create_card_token(
                ExternalCard(
                    card_number=request.card_number,
                    holder_name=request.name,
                    expiration_year=request.expiration_year,
                    expiration_month=request.expiration_month,
                    cvv2=request.cvv2,
                    device_session_id=request.device_session_id,
                )
            )
            logger.info("Card created with ID: %s", card.id)

            repository.add_card_transaction(
                customer_id=billing_customer_id,
                transaction_customer_id=customer.id or "",
                transaction_id=card.id or "",
                payment_method=describe(PaymentMethodType.CARD),
                transaction_type=describe(TransactionType.TOKENIZATION),
                order_id=request.order_id,
                transaction_status=describe(OpenPayTransactionStatus.COMPLETED),
                transaction_date=card.creation_date,
                currency_code=DEFAULT_CURRENCY_CODE,
                amount=DEFAULT_CHARGE_AMOUNT,
                credit_card_owner_name=request.name,
                credit_card_expire_year=expiration[0],
                credit_card_expire_month=expiration[1],
                credit_card_number=mask_card_number(request.card_number),
                credit_card_cvv2=mask_cvv(request.cvv2),
                transaction_message=f"Card created with ID: {card.id}",
                is_transaction_success=True,
                created_by=billing_customer_id,
                notes="Card tokenization successful",
            )
        except Exception:
            logger.exception("Error creating card token in OpenPay for holder %s", request.name)
            raise
        return card

    def _create_charge(
        self,
        request: PaymentRequest,
        expiration: Tuple[int, int],
        customer: ExternalCustomer,
        source_id: str,
        payment_method: PaymentMethod,
        billing_customer_id: int,
    ) -> Charge:
        logger.info("Creating charge in OpenPay...")
        charge_request = ChargeRequest(
            method=describe(PaymentMethodType.CARD),
            source_id=source_id,
            amount=DEFAULT_CHARGE_AMOUNT,
            currency=DEFAULT_CURRENCY_CODE,
            description=f"Order: {request.order_id}",
            device_session_id=request.device_session_id,
            order_id=request.order_id,
            use_3d_secure=True,
            redirect_url=self.redirect_url,
            customer=customer,
        )
        try:
            charge = self.adapter.create_charge(charge_request)
            logger.info("Charge created with ID: %s", charge.id)

            repository.add_payin_log(
                reference_no=charge_request.order_id,
                payment_method=payment_method,
                payment_method_name=self.provider.name,
                payin_type=PayInType.CHARGE,
                api_no1=charge.id,
                amount=charge_request.amount,
                amount_from_api=charge.amount,
                card_owner_name=request.name[:CARD_OWNER_NAME_MAX_LENGTH],
                last_four_card_nbr=request.card_number[-4:],
                currency=DEFAULT_CURRENCY_CODE,
                result=payment_status_code(charge.status),
                created_by=billing_customer_id,
                post_info=charge_request.to_payload(),
                resp_info=charge.raw,
            )

            status = charge.status or describe(PaymentStatus.UNKNOWN)
            repository.add_card_transaction(
                customer_id=billing_customer_id,
                transaction_customer_id=customer.id or "",
                transaction_id=charge.id,
                payment_method=describe(PaymentMethodType.CARD),
                transaction_type=describe(TransactionType.CHARGE),
                order_id=charge_request.order_id,
                transaction_status=status,
                transaction_date=charge.creation_date,
                amount=charge.amount if charge.amount is not None else charge_request.amount,
                currency_code=DEFAULT_CURRENCY_CODE,
                is_transaction_success=status.lower() == describe(PaymentStatus.SUCCESS),
                redirect_url=charge.payment_method_url,
                credit_card_owner_name=request.name,
                credit_card_expire_year=expiration[0],
                credit_card_expire_month=expiration[1],
                credit_card_number=mask_card_number(request.card_number),
                credit_card_cvv2=mask_cvv(request.cvv2),
                transaction_message=charge.error_message,
                created_by=billing_customer_id,
                notes=charge.error_message,
            )
        except Exception:
            logger.exception(
                "Error creating charge in OpenPay for amount %s %s",
                charge_request.amount,
                charge_request.currency,
            )
            raise
        return charge
