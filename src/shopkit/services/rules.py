"""RuleService: configured business rules wrapped in ServiceResult."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from shopkit.domain.eligibility import can_drive, get_discount, is_online
from shopkit.domain.outcome import RuleError
from shopkit.domain.pricing import calculate_discount
from shopkit.domain.validation import is_valid_username, validate_user_input
from shopkit.services.base import BaseService
from shopkit.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RuleService(BaseService):
    """Evaluate domain rules with thresholds taken from settings."""

    def list_coupons(self) -> ServiceResult:
        items = [c.model_dump() for c in self._settings.coupons.catalog]
        return ServiceResult.success("list_coupons", count=len(items), items=items)

    def discount(self, price: Any, code: Any) -> ServiceResult:
        op = "calculate_discount"
        result = calculate_discount(price, code, coupons=self._settings.coupons.catalog)
        if isinstance(result, RuleError):
            logger.debug("Discount rejected: %s", result.message)
            return ServiceResult.failure(op, result)
        return ServiceResult.success(
            op,
            price=price,
            code=code,
            discounted_price=result,
            applied=result != price,
        )

    def check_username(self, username: Any) -> ServiceResult:
        cfg = self._settings.usernames
        valid = is_valid_username(username, min_length=cfg.min_length, max_length=cfg.max_length)
        if not valid:
            error = ServiceError(
                code="INVALID_USERNAME",
                message=(
                    f"Invalid username: must be {cfg.min_length}-{cfg.max_length} characters"
                ),
                detail={"field": "username"},
            )
            return ServiceResult.failure("check_username", error)
        return ServiceResult.success("check_username", username=username, valid=True)

    def validate_user(self, username: Any, age: Any) -> ServiceResult:
        op = "validate_user_input"
        cfg = self._settings.user_input
        outcome = validate_user_input(
            username,
            age,
            min_username=cfg.min_username,
            max_username=cfg.max_username,
            min_age=cfg.min_age,
            max_age=cfg.max_age,
        )
        if outcome.ok:
            return ServiceResult.success(op, message=outcome.message)
        error = ServiceError(
            code="INVALID_INPUT",
            message=outcome.message,
            detail={"fields": [e.field for e in outcome.errors]},
        )
        return ServiceResult.failure(op, error)

    def driving(self, age: int, country_code: str) -> ServiceResult:
        op = "can_drive"
        allowed = can_drive(age, country_code, legal_ages=self._settings.driving.legal_ages)
        if isinstance(allowed, RuleError):
            return ServiceResult.failure(op, allowed)
        return ServiceResult.success(op, age=age, country=country_code, allowed=allowed)

    def online(self, at: datetime) -> ServiceResult:
        cfg = self._settings.hours
        is_open = is_online(at, opens_at=cfg.opens_at, closes_at=cfg.closes_at)
        return ServiceResult.success(
            "is_online",
            at=at.isoformat(timespec="minutes"),
            online=is_open,
            opens_at=cfg.opens_at.strftime("%H:%M"),
            closes_at=cfg.closes_at.strftime("%H:%M"),
        )

    def seasonal(self, at: datetime) -> ServiceResult:
        cfg = self._settings.seasonal
        rate = get_discount(at, month=cfg.month, day=cfg.day, rate=cfg.rate)
        return ServiceResult.success("get_discount", date=at.date().isoformat(), discount=rate)
