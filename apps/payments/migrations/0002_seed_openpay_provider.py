from django.db import migrations
from django.utils import timezone


def create_openpay_provider(apps, schema_editor):
    PaymentProvider = apps.get_model("payments", "PaymentProvider")

    if PaymentProvider.objects.exists():
        return

    PaymentProvider.objects.create(
        name="OpenPay",
        api_url="https://sandbox-api.openpay.mx/v1",
        is_active=True,
        is_production=False,
        created_by=1,
        created_date=timezone.now(),
    )


class Migration(migrations.Migration):
    dependencies = [
        ("payments", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_openpay_provider, migrations.RunPython.noop),
    ]
