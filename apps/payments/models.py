from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

from core.models import AuditableCreateModel, AuditableModel

from .constants import PayInType


class PaymentProvider(AuditableCreateModel):
    name = models.CharField(max_length=100, unique=True)
    api_url = models.CharField(max_length=255)
    is_production = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    def __str__(self) -> str:
        return self.name


class PaymentMethod(AuditableModel):
    payment_provider = models.ForeignKey(
        PaymentProvider,
        on_delete=models.PROTECT,
        related_name="payment_methods",
    )
    # Internal correlation token, one per payment attempt. Never sent to the provider.
    token = models.CharField(max_length=64, unique=True)
    status = models.BooleanField(default=True)

    def __str__(self) -> str:
        return self.token


class BillingCustomer(AuditableModel):
    two_letter_iso_code = models.CharField(max_length=2)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone_number = models.CharField(max_length=20, blank=True, default="")
    api_customer_id = models.CharField(max_length=100)
    payment_method = models.ForeignKey(
        PaymentMethod,
        on_delete=models.PROTECT,
        related_name="billing_customers",
    )

    class Meta:
        # (name, email) is matched by the payment flow; there is intentionally no unique constraint.
        indexes = [models.Index(fields=["name", "email"], name="billing_cust_name_email_idx")]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class BillingCustomerKeyInfo(AuditableModel):
    billing_customer = models.ForeignKey(
        BillingCustomer,
        on_delete=models.CASCADE,
        related_name="key_infos",
    )
    key_name = models.CharField(max_length=255)
    key_value = models.CharField(max_length=255)


class CardTransaction(AuditableModel):
    customer = models.ForeignKey(
        BillingCustomer,
        on_delete=models.CASCADE,
        related_name="card_transactions",
    )
    transaction_customer_id = models.CharField(max_length=100)
    transaction_id = models.CharField(max_length=100)
    payment_method = models.CharField(max_length=20)
    transaction_type = models.CharField(max_length=20)
    order_id = models.CharField(max_length=100, blank=True, null=True)
    transaction_status = models.CharField(max_length=50)
    transaction_reference_id = models.CharField(max_length=100, blank=True, null=True)
    transaction_date = models.DateTimeField(blank=True, null=True)
    currency_code = models.CharField(max_length=3)
    credit_card_owner_name = models.CharField(max_length=255)
    credit_card_expire_year = models.IntegerField()
    credit_card_expire_month = models.IntegerField()
    credit_card_number = models.CharField(max_length=25)
    credit_card_cvv2 = models.CharField(max_length=4)
    description = models.TextField(blank=True, null=True)
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    is_transaction_success = models.BooleanField(default=False)
    redirect_url = models.URLField(max_length=500, blank=True, null=True)
    transaction_message = models.TextField(blank=True, null=True)

    def __str__(self) -> str:
        return f"{self.transaction_type} {self.transaction_id}"


class TransactionStatusHistory(AuditableModel):
    transaction = models.ForeignKey(
        CardTransaction,
        on_delete=models.CASCADE,
        related_name="status_history",
    )
    status = models.CharField(max_length=50)
    notes = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        verbose_name_plural = "Transaction status histories"


class PayinLog(AuditableModel):
    reference_no = models.CharField(max_length=50, blank=True, null=True)
    payment_method = models.ForeignKey(
        PaymentMethod,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="payin_logs",
    )
    payment_method_name = models.CharField(max_length=50, blank=True, null=True)
    payin_type = models.IntegerField(choices=PayInType.choices, blank=True, null=True)
    api_no1 = models.CharField(max_length=50, blank=True, null=True)
    api_no2 = models.CharField(max_length=50, blank=True, null=True)
    amount = models.DecimalField(max_digits=18, decimal_places=4, blank=True, null=True)
    amount_from_api = models.DecimalField(max_digits=18, decimal_places=4, blank=True, null=True)
    last_four_card_nbr = models.CharField(max_length=4, blank=True, null=True)
    card_owner_name = models.CharField(max_length=100, blank=True, null=True)
    currency = models.CharField(max_length=50, blank=True, null=True)
    result = models.IntegerField(blank=True, null=True)


class PayinLogDetails(AuditableModel):
    payin_log = models.ForeignKey(
        PayinLog,
        on_delete=models.CASCADE,
        related_name="details",
    )
    # Raw provider request/response kept for audit/debugging
    post_info = models.JSONField(encoder=DjangoJSONEncoder, blank=True, null=True)
    resp_info = models.JSONField(encoder=DjangoJSONEncoder, blank=True, null=True)
    additional_info = models.TextField(blank=True, null=True)

    class Meta:
        verbose_name_plural = "Payin log details"
