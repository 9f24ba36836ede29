from abc import ABC, abstractmethod

from app.application.interfaces.remote_lookup import LookupResult
from app.domain.entities.profiles import PropertyProfile


class PropertyGateway(ABC):
    @abstractmethod
    async def lookup_property(self, property_id: int) -> LookupResult[PropertyProfile]:
        """
        Fetches the property profile from the Property Service.

        Never raises on transport failures: they come back as UNAVAILABLE.
        """
        pass

    async def fetch_property(self, property_id: int) -> PropertyProfile | None:
        result = await self.lookup_property(property_id)
        return result.value if result.is_found else None

    async def is_property_available(self, property_id: int) -> bool:
        prop = await self.fetch_property(property_id)
        return prop is not None and prop.available
