from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Unit of work spanning the gate checks and the writes of a use case."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
