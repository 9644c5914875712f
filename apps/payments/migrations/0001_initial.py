import django.core.serializers.json
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PaymentProvider",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("name", models.CharField(max_length=100, unique=True)),
                ("api_url", models.CharField(max_length=255)),
                ("is_production", models.BooleanField(default=False)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="PaymentMethod",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                ("token", models.CharField(max_length=64, unique=True)),
                ("status", models.BooleanField(default=True)),
                (
                    "payment_provider",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="payment_methods",
                        to="payments.paymentprovider",
                    ),
                ),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="BillingCustomer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                ("two_letter_iso_code", models.CharField(max_length=2)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("phone_number", models.CharField(blank=True, default="", max_length=20)),
                ("api_customer_id", models.CharField(max_length=100)),
                (
                    "payment_method",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="billing_customers",
                        to="payments.paymentmethod",
                    ),
                ),
            ],
            options={
                "indexes": [models.Index(fields=["name", "email"], name="billing_cust_name_email_idx")],
            },
        ),
        migrations.CreateModel(
            name="BillingCustomerKeyInfo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                ("key_name", models.CharField(max_length=255)),
                ("key_value", models.CharField(max_length=255)),
                (
                    "billing_customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="key_infos",
                        to="payments.billingcustomer",
                    ),
                ),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="CardTransaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                ("transaction_customer_id", models.CharField(max_length=100)),
                ("transaction_id", models.CharField(max_length=100)),
                ("payment_method", models.CharField(max_length=20)),
                ("transaction_type", models.CharField(max_length=20)),
                ("order_id", models.CharField(blank=True, max_length=100, null=True)),
                ("transaction_status", models.CharField(max_length=50)),
                ("transaction_reference_id", models.CharField(blank=True, max_length=100, null=True)),
                ("transaction_date", models.DateTimeField(blank=True, null=True)),
                ("currency_code", models.CharField(max_length=3)),
                ("credit_card_owner_name", models.CharField(max_length=255)),
                ("credit_card_expire_year", models.IntegerField()),
                ("credit_card_expire_month", models.IntegerField()),
                ("credit_card_number", models.CharField(max_length=25)),
                ("credit_card_cvv2", models.CharField(max_length=4)),
                ("description", models.TextField(blank=True, null=True)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=18)),
                ("is_transaction_success", models.BooleanField(default=False)),
                ("redirect_url", models.URLField(blank=True, max_length=500, null=True)),
                ("transaction_message", models.TextField(blank=True, null=True)),
                (
                    "customer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="card_transactions",
                        to="payments.billingcustomer",
                    ),
                ),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="TransactionStatusHistory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                ("status", models.CharField(max_length=50)),
                ("notes", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "transaction",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="status_history",
                        to="payments.cardtransaction",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Transaction status histories",
            },
        ),
        migrations.CreateModel(
            name="PayinLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                ("reference_no", models.CharField(blank=True, max_length=50, null=True)),
                ("payment_method_name", models.CharField(blank=True, max_length=50, null=True)),
                (
                    "payin_type",
                    models.IntegerField(blank=True, choices=[(1, "charge"), (2, "refund")], null=True),
                ),
                ("api_no1", models.CharField(blank=True, max_length=50, null=True)),
                ("api_no2", models.CharField(blank=True, max_length=50, null=True)),
                ("amount", models.DecimalField(blank=True, decimal_places=4, max_digits=18, null=True)),
                ("amount_from_api", models.DecimalField(blank=True, decimal_places=4, max_digits=18, null=True)),
                ("last_four_card_nbr", models.CharField(blank=True, max_length=4, null=True)),
                ("card_owner_name", models.CharField(blank=True, max_length=100, null=True)),
                ("currency", models.CharField(blank=True, max_length=50, null=True)),
                ("result", models.IntegerField(blank=True, null=True)),
                (
                    "payment_method",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="payin_logs",
                        to="payments.paymentmethod",
                    ),
                ),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="PayinLogDetails",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_by", models.IntegerField(blank=True, null=True)),
                ("created_date", models.DateTimeField(blank=True, null=True)),
                ("updated_by", models.IntegerField(blank=True, null=True)),
                ("updated_date", models.DateTimeField(blank=True, null=True)),
                (
                    "post_info",
                    models.JSONField(blank=True, encoder=django.core.serializers.json.DjangoJSONEncoder, null=True),
                ),
                (
                    "resp_info",
                    models.JSONField(blank=True, encoder=django.core.serializers.json.DjangoJSONEncoder, null=True),
                ),
                ("additional_info", models.TextField(blank=True, null=True)),
                (
                    "payin_log",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="details",
                        to="payments.payinlog",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Payin log details",
            },
        ),
    ]
