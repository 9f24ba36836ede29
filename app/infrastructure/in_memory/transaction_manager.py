from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    """
    Sin rollback: lo escrito antes de un error queda en memoria.

    Cuenta las unidades de trabajo abiertas (las anidadas no suman) y expone
    la profundidad actual; depth > 0 significa "dentro de una transacción".
    """

    def __init__(self) -> None:
        self.started = 0
        self.depth = 0

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        if self.depth == 0:
            self.started += 1
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
