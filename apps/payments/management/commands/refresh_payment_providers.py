from django.core.management.base import BaseCommand

from apps.payments.master_data import get_master_data, refresh_master_data


class Command(BaseCommand):
    help = "Reload the cached payment-provider master data."

    def handle(self, *args, **options):
        count = refresh_master_data()
        names = ", ".join(provider.name for provider in get_master_data().payment_providers)
        self.stdout.write(self.style.SUCCESS(f"Loaded {count} payment providers: {names or '-'}"))
