from abc import ABC, abstractmethod

from app.application.interfaces.remote_lookup import LookupResult
from app.domain.entities.profiles import UserProfile, UserRole


class UserGateway(ABC):
    @abstractmethod
    async def lookup_user(self, user_id: int) -> LookupResult[UserProfile]:
        """
        Fetches the user profile from the User Service.

        Never raises on transport failures: they come back as UNAVAILABLE.
        """
        pass

    async def fetch_user(self, user_id: int) -> UserProfile | None:
        result = await self.lookup_user(user_id)
        return result.value if result.is_found else None

    async def user_has_role(self, user_id: int, role: UserRole) -> bool:
        user = await self.fetch_user(user_id)
        return user is not None and user.role == role

    async def is_user_active(self, user_id: int) -> bool:
        user = await self.fetch_user(user_id)
        return user is not None and user.active
