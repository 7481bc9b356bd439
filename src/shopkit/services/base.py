"""BaseService: shared foundation for shopkit services.

Every service receives the resolved :class:`ShopSettings` at construction
time and reads its rule thresholds from there, so domain functions stay
free of configuration lookups.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shopkit.config.settings import ShopSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RuleService(BaseService):
            def discount(self, price: float, code: str) -> ServiceResult:
                coupons = self._settings.coupons.catalog
                ...
    """

    def __init__(self, settings: ShopSettings) -> None:
        self._settings = settings
