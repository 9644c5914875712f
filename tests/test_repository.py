"""
Tests for the payment persistence helpers.
"""
from decimal import Decimal
from typing import Any, Dict

import pytest

from apps.payments import repository
from apps.payments.models import (
    BillingCustomer,
    BillingCustomerKeyInfo,
    PaymentMethod,
    PaymentProvider,
    TransactionStatusHistory,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def payment_method(openpay_provider: PaymentProvider) -> PaymentMethod:
    return repository.create_payment_method(openpay_provider, "6b1f0c3e2a9d4e4f8a7c5b3d2e1f0a9b")


@pytest.fixture
def billing_customer(payment_method: PaymentMethod) -> BillingCustomer:
    return repository.create_billing_customer(
        name="Jane Doe",
        email="jane@x.com",
        api_customer_id="cus_1",
        payment_method=payment_method,
        two_letter_iso_code="MX",
    )


def _transaction_fields(customer: BillingCustomer, **overrides: Any) -> Dict[str, Any]:
    fields = {
        "customer_id": customer.id,
        "transaction_customer_id": customer.api_customer_id,
        "transaction_id": "tok_1",
        "payment_method": "card",
        "transaction_type": "tokenization",
        "order_id": "ORD-1001",
        "transaction_status": "completed",
        "currency_code": "MXN",
        "amount": Decimal("100.00"),
        "credit_card_owner_name": "Jane Doe",
        "credit_card_expire_year": 29,
        "credit_card_expire_month": 12,
        "credit_card_number": "************1111",
        "credit_card_cvv2": "***",
        "is_transaction_success": True,
        "created_by": customer.id,
    }
    fields.update(overrides)
    return fields


class TestPaymentMethods:
    def test_create_payment_method(self, payment_method: PaymentMethod, openpay_provider: PaymentProvider) -> None:
        assert payment_method.pk is not None
        assert payment_method.status is True
        assert payment_method.payment_provider == openpay_provider
        assert payment_method.created_date is not None
        assert repository.get_payment_method(payment_method.id) == payment_method

    def test_update_owner(self, payment_method: PaymentMethod) -> None:
        updated = repository.update_payment_method_owner(payment_method.id, 42)

        assert updated is not None
        payment_method.refresh_from_db()
        assert payment_method.created_by == 42
        assert payment_method.updated_by == 42
        assert payment_method.updated_date is not None

    def test_update_owner_of_missing_method(self) -> None:
        assert repository.update_payment_method_owner(999999, 42) is None
        assert repository.get_payment_method(999999) is None


class TestBillingCustomers:
    def test_create_writes_creation_date_key_info(self, billing_customer: BillingCustomer) -> None:
        key_info = BillingCustomerKeyInfo.objects.get(billing_customer=billing_customer)

        assert key_info.key_name == "CreationDate"
        assert key_info.key_value == billing_customer.created_date.isoformat()

    def test_find_exact_match(self, billing_customer: BillingCustomer) -> None:
        assert repository.find_billing_customer("Jane Doe", "jane@x.com") == billing_customer

    @pytest.mark.parametrize(
        "name, email",
        [
            ("jane doe", "jane@x.com"),
            ("Jane Doe", "Jane@x.com"),
            ("Jane Doe", "jane@y.com"),
        ],
    )
    def test_find_requires_exact_name_and_email(
        self, billing_customer: BillingCustomer, name: str, email: str
    ) -> None:
        assert repository.find_billing_customer(name, email) is None

    def test_duplicates_are_not_prevented(self, billing_customer: BillingCustomer, payment_method: PaymentMethod) -> None:
        duplicate = repository.create_billing_customer(
            name="Jane Doe",
            email="jane@x.com",
            api_customer_id="cus_2",
            payment_method=payment_method,
            two_letter_iso_code="MX",
        )

        # The oldest row wins the lookup
        assert repository.find_billing_customer("Jane Doe", "jane@x.com") == billing_customer
        assert duplicate.id != billing_customer.id

    def test_load_with_history(self, billing_customer: BillingCustomer) -> None:
        repository.add_card_transaction(notes="Card tokenization successful", **_transaction_fields(billing_customer))
        repository.add_card_transaction(
            notes=None,
            **_transaction_fields(billing_customer, transaction_id="ch_1", transaction_type="charge"),
        )

        loaded = repository.get_billing_customer_with_history(billing_customer.id)

        assert [k.key_name for k in loaded.key_infos.all()] == ["CreationDate"]
        transactions = list(loaded.card_transactions.order_by("id"))
        assert [t.transaction_type for t in transactions] == ["tokenization", "charge"]
        assert all(t.status_history.count() == 1 for t in transactions)

    def test_load_missing_customer(self) -> None:
        with pytest.raises(BillingCustomer.DoesNotExist):
            repository.get_billing_customer_with_history(999999)


class TestTransactionsAndLogs:
    def test_add_card_transaction_mirrors_status(self, billing_customer: BillingCustomer) -> None:
        card_transaction = repository.add_card_transaction(
            notes="x" * 300,
            **_transaction_fields(billing_customer, transaction_status="charge_pending"),
        )

        history = TransactionStatusHistory.objects.get(transaction=card_transaction)
        assert history.status == "charge_pending"
        assert history.created_by == billing_customer.id
        assert len(history.notes) == 255

    def test_list_card_transactions_filters(self, billing_customer: BillingCustomer) -> None:
        repository.add_card_transaction(**_transaction_fields(billing_customer))
        repository.add_card_transaction(
            **_transaction_fields(billing_customer, transaction_id="ch_1", transaction_type="charge")
        )
        repository.add_card_transaction(**_transaction_fields(billing_customer, order_id="ORD-2"))

        assert repository.list_card_transactions(order_id="ORD-1001").count() == 2
        charges = repository.list_card_transactions(customer_id=billing_customer.id, transaction_types=["charge"])
        assert [t.transaction_id for t in charges] == ["ch_1"]

    def test_add_payin_log_with_details(self, billing_customer: BillingCustomer, payment_method: PaymentMethod) -> None:
        payin_log = repository.add_payin_log(
            reference_no="ORD-1001",
            payment_method=payment_method,
            payment_method_name="OpenPay",
            payin_type=1,
            api_no1="ch_1",
            amount=Decimal("100.00"),
            amount_from_api=Decimal("100.00"),
            currency="MXN",
            result=1,
            created_by=billing_customer.id,
            post_info={"amount": 100.0, "source_id": "tok_1"},
            resp_info={"id": "ch_1", "status": "completed"},
        )

        details = payin_log.details.get()
        assert details.post_info == {"amount": 100.0, "source_id": "tok_1"}
        assert details.resp_info["status"] == "completed"
        assert details.created_by == billing_customer.id
        assert payment_method.payin_logs.get() == payin_log
