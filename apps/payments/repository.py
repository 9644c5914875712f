from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from .constants import CREATION_DATE_KEY
from .models import (
    BillingCustomer,
    BillingCustomerKeyInfo,
    CardTransaction,
    PayinLog,
    PayinLogDetails,
    PaymentMethod,
    PaymentProvider,
    TransactionStatusHistory,
)


def list_payment_providers() -> List[PaymentProvider]:
    return list(PaymentProvider.objects.order_by("id"))


def create_payment_method(provider: PaymentProvider, token: str) -> PaymentMethod:
    with transaction.atomic():
        return PaymentMethod.objects.create(
            payment_provider=provider,
            token=token,
            status=True,
            created_date=timezone.now(),
        )


def get_payment_method(payment_method_id: int) -> Optional[PaymentMethod]:
    return PaymentMethod.objects.filter(id=payment_method_id).first()


def update_payment_method_owner(payment_method_id: int, billing_customer_id: int) -> Optional[PaymentMethod]:
    with transaction.atomic():
        payment_method = PaymentMethod.objects.select_for_update().filter(id=payment_method_id).first()
        if payment_method is None:
            return None
        payment_method.created_by = billing_customer_id
        payment_method.updated_by = billing_customer_id
        payment_method.updated_date = timezone.now()
        payment_method.save(update_fields=["created_by", "updated_by", "updated_date"])
    return payment_method


def find_billing_customer(name: str, email: str) -> Optional[BillingCustomer]:
    candidates = BillingCustomer.objects.filter(name=name, email=email).order_by("id")
    # Some backends collate case-insensitively; the match must be exact.
    for customer in candidates:
        if customer.name == name and customer.email == email:
            return customer
    return None


def create_billing_customer(
    *,
    name: str,
    email: str,
    api_customer_id: str,
    payment_method: PaymentMethod,
    two_letter_iso_code: str,
    phone_number: str = "",
) -> BillingCustomer:
    created_date = timezone.now()
    with transaction.atomic():
        customer = BillingCustomer.objects.create(
            name=name,
            email=email,
            phone_number=phone_number,
            api_customer_id=api_customer_id,
            payment_method=payment_method,
            two_letter_iso_code=two_letter_iso_code,
            created_date=created_date,
        )
        BillingCustomerKeyInfo.objects.create(
            billing_customer=customer,
            key_name=CREATION_DATE_KEY,
            key_value=created_date.isoformat(),
            created_date=created_date,
        )
    return customer


def add_card_transaction(*, notes: Optional[str] = None, **fields: Any) -> CardTransaction:
    """Persist a card transaction together with the status-history row mirroring its status."""
    now = timezone.now()
    fields.setdefault("created_date", now)
    with transaction.atomic():
        card_transaction = CardTransaction.objects.create(**fields)
        TransactionStatusHistory.objects.create(
            transaction=card_transaction,
            status=card_transaction.transaction_status,
            notes=notes[:255] if notes else notes,
            created_by=card_transaction.created_by,
            created_date=now,
        )
    return card_transaction


def add_payin_log(
    *,
    post_info: Optional[Dict[str, Any]],
    resp_info: Optional[Dict[str, Any]],
    **fields: Any,
) -> PayinLog:
    now = timezone.now()
    fields.setdefault("created_date", now)
    with transaction.atomic():
        payin_log = PayinLog.objects.create(**fields)
        PayinLogDetails.objects.create(
            payin_log=payin_log,
            post_info=post_info,
            resp_info=resp_info,
            created_by=payin_log.created_by,
            created_date=now,
        )
    return payin_log


def get_billing_customer_with_history(billing_customer_id: int) -> BillingCustomer:
    return (
        BillingCustomer.objects.select_related("payment_method", "payment_method__payment_provider")
        .prefetch_related("key_infos", "card_transactions__status_history")
        .get(id=billing_customer_id)
    )


def list_card_transactions(
    order_id: Optional[str] = None,
    customer_id: Optional[int] = None,
    transaction_types: Optional[Iterable[str]] = None,
) -> QuerySet[CardTransaction]:
    qs = CardTransaction.objects.select_related("customer").prefetch_related("status_history").order_by("id")
    if order_id is not None:
        qs = qs.filter(order_id=order_id)
    if customer_id is not None:
        qs = qs.filter(customer_id=customer_id)
    if transaction_types is not None:
        qs = qs.filter(transaction_type__in=list(transaction_types))
    return qs
