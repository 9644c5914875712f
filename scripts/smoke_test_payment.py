from __future__ import annotations

import json

from apps.payments import repository
from apps.payments.master_data import refresh_master_data
from apps.payments.serializers import (
    BillingCustomerSerializer,
    PaymentRequestSerializer,
    PaymentResultSerializer,
)
from apps.payments.services import PaymentService


def _print(title: str, data) -> None:
    print(f"\n=== {title} ===")
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)


def run() -> None:
    """
    Manual smoke test running one payment against the OpenPay sandbox.

    Needs OPENPAY_MERCHANT_ID, OPENPAY_PRIVATE_KEY and OPENPAY_DEVICE_SESSION_ID in the
    environment. Run with:
      python manage.py shell --settings=config.settings.development -c "from scripts.smoke_test_payment import run; run()"
    """
    count = refresh_master_data()
    _print("Payment providers loaded", count)

    # OpenPay sandbox test card
    serializer = PaymentRequestSerializer(
        data={
            "name": "Smoke Test",
            "email": "smoke-test@example.com",
            "card_number": "4111111111111111",
            "expiration_year": "29",
            "expiration_month": "12",
            "cvv2": "110",
            "order_id": "SMOKE-0001",
        }
    )
    serializer.is_valid(raise_exception=True)

    result = PaymentService().process_payment(serializer.to_payment_request())
    _print("Payment result", PaymentResultSerializer(result).data)

    transactions = repository.list_card_transactions(order_id=result.order_id)
    customer_id = transactions.last().customer_id if transactions else None
    if customer_id is not None:
        customer = repository.get_billing_customer_with_history(customer_id)
        _print("Billing customer", BillingCustomerSerializer(customer).data)
