"""Value Object LeaseTerms - condiciones de un registro de arriendo."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from app.domain.errors import InvalidLeaseAmountError, InvalidLeaseDatesError


@dataclass(frozen=True)
class LeaseTerms:
    """
    Value Object inmutable con las condiciones de un arriendo.

    Attributes:
        start_date: Fecha de inicio del arriendo.
        monthly_amount: Monto mensual, estrictamente positivo.
        end_date: Fecha de término opcional; nunca anterior a start_date.
    """

    start_date: date
    monthly_amount: Decimal
    end_date: date | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.monthly_amount, Decimal):
            try:
                object.__setattr__(self, "monthly_amount", Decimal(str(self.monthly_amount)))
            except InvalidOperation as exc:
                raise InvalidLeaseAmountError(self.monthly_amount) from exc

        if not self.monthly_amount.is_finite() or self.monthly_amount <= 0:
            raise InvalidLeaseAmountError(self.monthly_amount)

        if self.end_date is not None and self.end_date < self.start_date:
            raise InvalidLeaseDatesError(self.start_date, self.end_date)

