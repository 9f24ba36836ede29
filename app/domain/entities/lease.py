"""Entidad LeaseRecord (registro de arriendo)."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from app.domain.errors import LeaseAlreadyInactiveError
from app.domain.value_objects.lease_terms import LeaseTerms


@dataclass
class LeaseRecord:
    """
    Contrato materializado a partir de una solicitud aceptada.

    A lo más un registro activo por solicitud. Un registro cerrado no se
    reactiva.
    """

    application_id: int
    start_date: date
    monthly_amount: Decimal
    end_date: date | None = None
    active: bool = True
    id: int | None = None

    @classmethod
    def open(cls, application_id: int, terms: LeaseTerms) -> "LeaseRecord":
        return cls(
            application_id=application_id,
            start_date=terms.start_date,
            monthly_amount=terms.monthly_amount,
            end_date=terms.end_date,
            active=True,
        )

    def close(self) -> None:
        """Desactiva el registro. Cerrar dos veces es un error."""
        if not self.active:
            raise LeaseAlreadyInactiveError(self.id or 0)
        self.active = False
