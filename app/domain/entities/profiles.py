"""Proyecciones de solo lectura de entidades que pertenecen a otros servicios."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class UserRole(str, Enum):
    """Roles del sistema Rentify."""

    ADMIN = "ADMIN"
    OWNER = "OWNER"
    TENANT = "TENANT"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: Any) -> "UserRole":
        """
        Normaliza el rol recibido desde el User Service.

        Acepta los nombres canónicos, los nombres en español
        (PROPIETARIO, ARRIENDATARIO) y los ids numéricos de la tabla rol
        (1=ADMIN, 2=PROPIETARIO, 3=ARRIENDATARIO).
        """
        if raw is None or isinstance(raw, bool):
            return cls.UNKNOWN
        if isinstance(raw, int):
            return _ROLE_IDS.get(raw, cls.UNKNOWN)
        text = str(raw).strip().upper()
        if text.isdigit():
            return _ROLE_IDS.get(int(text), cls.UNKNOWN)
        return _ROLE_ALIASES.get(text, cls.UNKNOWN)

    @property
    def can_create_application(self) -> bool:
        return self in (UserRole.TENANT, UserRole.ADMIN)

    @property
    def can_resolve_application(self) -> bool:
        return self in (UserRole.OWNER, UserRole.ADMIN)


_ROLE_IDS = {1: UserRole.ADMIN, 2: UserRole.OWNER, 3: UserRole.TENANT}

_ROLE_ALIASES = {
    "ADMIN": UserRole.ADMIN,
    "OWNER": UserRole.OWNER,
    "PROPIETARIO": UserRole.OWNER,
    "TENANT": UserRole.TENANT,
    "ARRIENDATARIO": UserRole.TENANT,
    "ARRENDATARIO": UserRole.TENANT,
}


@dataclass(frozen=True)
class UserProfile:
    id: int
    role: UserRole
    active: bool = True
    documents_approved: bool = False
    name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class PropertyProfile:
    id: int
    available: bool
    owner_id: int | None = None
    title: str | None = None
    monthly_price: Decimal | None = None
