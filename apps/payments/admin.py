from django.contrib import admin

from .models import BillingCustomer, CardTransaction, PayinLog, PaymentProvider


@admin.register(PaymentProvider)
class PaymentProviderAdmin(admin.ModelAdmin):
    list_display = ("name", "api_url", "is_production", "is_active")


@admin.register(BillingCustomer)
class BillingCustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "api_customer_id", "payment_method", "created_date")
    search_fields = ("name", "email", "api_customer_id")


@admin.register(CardTransaction)
class CardTransactionAdmin(admin.ModelAdmin):
    list_display = ("transaction_id", "transaction_type", "order_id", "transaction_status", "is_transaction_success", "amount")
    search_fields = ("transaction_id", "order_id", "transaction_customer_id")
    list_filter = ("transaction_type", "transaction_status", "is_transaction_success")
    exclude = ("credit_card_cvv2",)


@admin.register(PayinLog)
class PayinLogAdmin(admin.ModelAdmin):
    list_display = ("reference_no", "api_no1", "payment_method_name", "amount", "currency", "result", "created_date")
    search_fields = ("reference_no", "api_no1")
