from __future__ import annotations

from decimal import Decimal
from typing import Optional, Type

from django.db import models


OPENPAY_PROVIDER_NAME = "OpenPay"

DEFAULT_CURRENCY_CODE = "MXN"
DEFAULT_COUNTRY_CODE = "MX"

# Charged for every attempt until the request carries its own amount.
DEFAULT_CHARGE_AMOUNT = Decimal("100.00")

CREATION_DATE_KEY = "CreationDate"


class PayInType(models.IntegerChoices):
    CHARGE = 1, "charge"
    REFUND = 2, "refund"


class PaymentMethodType(models.IntegerChoices):
    CARD = 1, "card"


class PaymentStatus(models.IntegerChoices):
    SUCCESS = 1, "completed"
    PENDING = 2, "charge_pending"
    FAILED = 3, "failed"
    UNKNOWN = 4, "unknown"


class TransactionType(models.IntegerChoices):
    PAY = 1, "pay"
    REFUND = 2, "refund"
    CHARGE = 3, "charge"
    TOKENIZATION = 4, "tokenization"
    UNKNOWN = 5, "unknown"


class OpenPayTransactionStatus(models.IntegerChoices):
    PENDING = 1, "pending"
    COMPLETED = 2, "completed"


def describe(value: models.IntegerChoices) -> str:
    """Wire/log string for a choice, e.g. ``TransactionType.CHARGE`` -> ``"charge"``."""
    return str(value.label)


def value_from_description(choices: Type[models.IntegerChoices], description: Optional[str]) -> Optional[int]:
    if description is None:
        return None
    wanted = description.lower()
    for member in choices:
        if str(member.label).lower() == wanted:
            return int(member.value)
    return None


def payment_status_code(status: Optional[str]) -> int:
    """Map a provider charge status onto ``PaymentStatus``; unmatched values become UNKNOWN."""
    code = value_from_description(PaymentStatus, status)
    if code is None:
        return int(PaymentStatus.UNKNOWN)
    return code
