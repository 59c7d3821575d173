"""Subscription entity."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Optional
from uuid import UUID, uuid4

from revcat.domain.shared.exceptions import ValidationError
from revcat.domain.shared.time import utc_now

# Billing attributes an analyst may correct by hand
CORRECTABLE_ATTRIBUTES: frozenset[str] = frozenset(
    {
        "termed",
        "evergreen",
        "has_cancellation",
        "has_ramps",
        "has_discounts",
        "billing_period",
        "currency",
        "status",
        "start_date",
        "end_date",
    },
)

_BOOLEAN_ATTRIBUTES = frozenset(
    {"termed", "evergreen", "has_cancellation", "has_ramps", "has_discounts"},
)
_DATE_ATTRIBUTES = frozenset({"start_date", "end_date"})


class Subscription:
    """
    Billing attributes inferred for one customer subscription.

    derivation_trace holds the structured justification for each inferred
    attribute. Subscriptions are corrected or audited, never deleted.
    """

    def __init__(  # noqa: PLR0913
        self,
        customer_id: UUID,
        subscription_id: str,
        billing_period: str,
        start_date: date,
        end_date: Optional[date] = None,
        termed: bool = False,
        evergreen: bool = False,
        has_cancellation: bool = False,
        has_ramps: bool = False,
        has_discounts: bool = False,
        currency: str = "USD",
        status: str = "active",
        confidence: Optional[float] = None,
        conflict_flags: Optional[Iterable[str]] = None,
        derivation_trace: Optional[dict[str, Any]] = None,
        audited: bool = False,
        audited_by: Optional[UUID] = None,
        audited_at: Optional[datetime] = None,
        # For reconstitution from persistence:
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._customer_id = customer_id
        self._subscription_id = subscription_id
        self._billing_period = billing_period
        self._start_date = start_date
        self._end_date = end_date
        self._termed = termed
        self._evergreen = evergreen
        self._has_cancellation = has_cancellation
        self._has_ramps = has_ramps
        self._has_discounts = has_discounts
        self._currency = currency
        self._status = status
        self._confidence = confidence
        self._conflict_flags = frozenset(conflict_flags or ())
        self._derivation_trace = dict(derivation_trace or {})
        self._audited = audited
        self._audited_by = audited_by
        self._audited_at = audited_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def customer_id(self) -> UUID:
        return self._customer_id

    @property
    def subscription_id(self) -> str:
        return self._subscription_id

    @property
    def billing_period(self) -> str:
        return self._billing_period

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def end_date(self) -> Optional[date]:
        return self._end_date

    @property
    def termed(self) -> bool:
        return self._termed

    @property
    def evergreen(self) -> bool:
        return self._evergreen

    @property
    def has_cancellation(self) -> bool:
        return self._has_cancellation

    @property
    def has_ramps(self) -> bool:
        return self._has_ramps

    @property
    def has_discounts(self) -> bool:
        return self._has_discounts

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def status(self) -> str:
        return self._status

    @property
    def confidence(self) -> Optional[float]:
        return self._confidence

    @property
    def conflict_flags(self) -> frozenset[str]:
        return self._conflict_flags

    @property
    def derivation_trace(self) -> dict[str, Any]:
        return dict(self._derivation_trace)

    @property
    def audited(self) -> bool:
        return self._audited

    @property
    def audited_by(self) -> Optional[UUID]:
        return self._audited_by

    @property
    def audited_at(self) -> Optional[datetime]:
        return self._audited_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def toggle_audited(self, auditor_id: UUID) -> bool:
        self._audited = not self._audited
        self._audited_by = auditor_id
        self._audited_at = utc_now()
        self._updated_at = self._audited_at
        return self._audited

    def attribute_values(self, names: Iterable[str]) -> dict[str, Any]:
        """Current values of the given correctable attributes, JSON friendly."""
        values: dict[str, Any] = {}
        for name in names:
            if name not in CORRECTABLE_ATTRIBUTES:
                continue
            value = getattr(self, f"_{name}")
            values[name] = value.isoformat() if isinstance(value, date) else value
        return values

    def apply_correction(self, attributes: dict[str, Any]) -> None:
        unknown = set(attributes) - CORRECTABLE_ATTRIBUTES
        if unknown:
            msg = f"Attributes cannot be corrected: {', '.join(sorted(unknown))}"
            raise ValidationError(msg, details={"attributes": sorted(unknown)})
        if not attributes:
            msg = "No attributes to correct"
            raise ValidationError(msg)

        for name, value in attributes.items():
            setattr(self, f"_{name}", self._coerce(name, value))
        self._updated_at = utc_now()

    @staticmethod
    def _coerce(name: str, value: Any) -> Any:
        if name in _BOOLEAN_ATTRIBUTES:
            if not isinstance(value, bool):
                msg = f"'{name}' must be true or false"
                raise ValidationError(msg)
            return value
        if name in _DATE_ATTRIBUTES:
            if value is None and name == "end_date":
                return None
            if isinstance(value, date):
                return value
            try:
                return date.fromisoformat(str(value))
            except ValueError as e:
                msg = f"'{name}' must be an ISO date"
                raise ValidationError(msg) from e
        if not isinstance(value, str) or not value.strip():
            msg = f"'{name}' cannot be empty"
            raise ValidationError(msg)
        return value.strip()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Subscription):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        flag = "audited" if self._audited else "unaudited"
        return f"Subscription[{flag}]: {self._subscription_id} ({self._billing_period})"
