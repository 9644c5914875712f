"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone
from typing import Any, Iterator
from unittest.mock import MagicMock

import pytest

from apps.payments.master_data import AppMasterData, reset_master_data
from apps.payments.models import PaymentProvider
from apps.payments.openpay import ExternalCard, ExternalCustomer, OpenPayAdapter
from apps.payments.services import PaymentRequest, PaymentService

from .factories import make_charge


@pytest.fixture(autouse=True)
def _fresh_master_data() -> Iterator[None]:
    """The master-data snapshot is process-wide; rebuild it per test."""
    reset_master_data()
    yield
    reset_master_data()


@pytest.fixture
def openpay_provider(db: Any) -> PaymentProvider:
    # Seeded by the 0002 data migration
    return PaymentProvider.objects.get(name="OpenPay")


@pytest.fixture
def payment_request() -> PaymentRequest:
    return PaymentRequest(
        name="Jane Doe",
        email="jane@x.com",
        card_number="4111111111111111",
        expiration_year="29",
        expiration_month="12",
        cvv2="123",
        order_id="ORD-1001",
        device_session_id="kR1MiQhz2otdIuUlQkbEyitIqVMiI16f",
    )


@pytest.fixture
def fake_adapter() -> MagicMock:
    adapter = MagicMock(spec=OpenPayAdapter)
    adapter.create_customer.side_effect = lambda customer: ExternalCustomer(
        name=customer.name,
        email=customer.email,
        requires_account=False,
        id="cus_1",
    )
    adapter.create_card_token.side_effect = lambda card: ExternalCard(
        card_number="411111XXXXXX1111",
        holder_name=card.holder_name,
        expiration_year=card.expiration_year,
        expiration_month=card.expiration_month,
        cvv2="",
        device_session_id=card.device_session_id,
        id="tok_1",
        creation_date=datetime(2026, 10, 18, 15, 59, tzinfo=timezone.utc),
        brand="visa",
    )
    adapter.create_charge.return_value = make_charge()
    return adapter


@pytest.fixture
def payment_service(openpay_provider: PaymentProvider, fake_adapter: MagicMock) -> PaymentService:
    return PaymentService(adapter=fake_adapter, master_data=AppMasterData())
