"""Value Objects del dominio de solicitudes de arriendo."""

from app.domain.value_objects.lease_terms import LeaseTerms

__all__ = ["LeaseTerms"]
