from __future__ import annotations

import logging
from typing import Optional, Tuple

from .models import PaymentProvider
from .repository import list_payment_providers

logger = logging.getLogger(__name__)


class AppMasterData:
    """
    In-memory snapshot of payment-provider rows.

    Loaded once on construction and only reloaded by an explicit ``refresh()``.
    The snapshot is an immutable tuple swapped in by a single assignment, so
    readers always see either the previous or the new set of providers.
    """

    def __init__(self) -> None:
        self._payment_providers: Tuple[PaymentProvider, ...] = ()
        self.refresh()

    @property
    def payment_providers(self) -> Tuple[PaymentProvider, ...]:
        return self._payment_providers

    def get_provider_by_name(self, name: str) -> Optional[PaymentProvider]:
        wanted = name.casefold()
        for provider in self._payment_providers:
            if provider.name.casefold() == wanted:
                return provider
        return None

    def refresh(self) -> int:
        providers = tuple(list_payment_providers())
        self._payment_providers = providers
        logger.info("Loaded %d payment providers into master data", len(providers))
        return len(providers)


_master_data: Optional[AppMasterData] = None


def get_master_data() -> AppMasterData:
    global _master_data
    if _master_data is None:
        _master_data = AppMasterData()
    return _master_data


def refresh_master_data() -> int:
    """Reload the process-wide snapshot; builds it on first use."""
    global _master_data
    if _master_data is None:
        _master_data = AppMasterData()
        return len(_master_data.payment_providers)
    return _master_data.refresh()


def reset_master_data() -> None:
    global _master_data
    _master_data = None
