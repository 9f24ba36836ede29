"""Resultado tipado de una consulta a otro microservicio."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupStatus(str, Enum):
    FOUND = "FOUND"
    ABSENT = "ABSENT"  # el servicio respondió que la entidad no existe
    UNAVAILABLE = "UNAVAILABLE"  # no se pudo preguntar (timeout, red, 5xx, body inválido)


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    status: LookupStatus
    value: T | None = None
    error: str | None = None

    @classmethod
    def found(cls, value: T) -> "LookupResult[T]":
        return cls(status=LookupStatus.FOUND, value=value)

    @classmethod
    def absent(cls) -> "LookupResult[T]":
        return cls(status=LookupStatus.ABSENT)

    @classmethod
    def unavailable(cls, error: str) -> "LookupResult[T]":
        return cls(status=LookupStatus.UNAVAILABLE, error=error)

    @property
    def is_found(self) -> bool:
        return self.status == LookupStatus.FOUND

    @property
    def is_unavailable(self) -> bool:
        return self.status == LookupStatus.UNAVAILABLE
