from rest_framework import serializers

from .models import BillingCustomer, BillingCustomerKeyInfo, CardTransaction, TransactionStatusHistory
from .services import CARD_OWNER_NAME_MAX_LENGTH, PaymentRequest


class PaymentRequestSerializer(serializers.Serializer):
    """
    Inbound payload for a combined customer + card + charge payment.
    """

    name = serializers.CharField(max_length=CARD_OWNER_NAME_MAX_LENGTH)
    email = serializers.EmailField()
    device_session_id = serializers.CharField(required=False, allow_blank=True, default="")
    card_number = serializers.RegexField(r"^\d{12,19}$")
    expiration_year = serializers.RegexField(r"^\d{2}$")
    expiration_month = serializers.RegexField(r"^(0[1-9]|1[0-2])$")
    cvv2 = serializers.RegexField(r"^\d{3,4}$")
    order_id = serializers.CharField(max_length=50)

    def to_payment_request(self) -> PaymentRequest:
        return PaymentRequest(**self.validated_data)


class PaymentResultSerializer(serializers.Serializer):
    id = serializers.CharField()
    order_id = serializers.CharField()
    customer_id = serializers.CharField()
    amount = serializers.DecimalField(max_digits=18, decimal_places=2)
    currency = serializers.CharField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()
    transaction_id = serializers.CharField(allow_null=True)
    three_d_secure_url = serializers.CharField(allow_null=True)
    error_message = serializers.CharField(allow_null=True)


class TransactionStatusHistorySerializer(serializers.ModelSerializer):
    class Meta:
        model = TransactionStatusHistory
        fields = ["id", "status", "notes", "created_date"]


class CardTransactionSerializer(serializers.ModelSerializer):
    status_history = TransactionStatusHistorySerializer(many=True, read_only=True)

    class Meta:
        model = CardTransaction
        exclude = ["credit_card_cvv2"]


class BillingCustomerKeyInfoSerializer(serializers.ModelSerializer):
    class Meta:
        model = BillingCustomerKeyInfo
        fields = ["key_name", "key_value"]


class BillingCustomerSerializer(serializers.ModelSerializer):
    key_infos = BillingCustomerKeyInfoSerializer(many=True, read_only=True)
    card_transactions = CardTransactionSerializer(many=True, read_only=True)
    payment_provider = serializers.CharField(source="payment_method.payment_provider.name", read_only=True)

    class Meta:
        model = BillingCustomer
        fields = [
            "id",
            "name",
            "email",
            "phone_number",
            "two_letter_iso_code",
            "api_customer_id",
            "payment_method",
            "payment_provider",
            "created_date",
            "key_infos",
            "card_transactions",
        ]
