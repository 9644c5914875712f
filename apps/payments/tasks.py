from celery import shared_task

from .master_data import refresh_master_data


@shared_task
def refresh_payment_providers() -> int:
    return refresh_master_data()
