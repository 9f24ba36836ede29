"""Gateways remotos en memoria para desarrollo local y testing."""

from app.application.interfaces.document_gateway import DocumentGateway
from app.application.interfaces.property_gateway import PropertyGateway
from app.application.interfaces.remote_lookup import LookupResult
from app.application.interfaces.user_gateway import UserGateway
from app.domain.entities.profiles import PropertyProfile, UserProfile


class StubUserGateway(UserGateway):
    def __init__(self, users: list[UserProfile] | None = None) -> None:
        self.users: dict[int, UserProfile] = {u.id: u for u in users or []}
        self.unavailable = False
        self.calls: list[int] = []

    def add(self, user: UserProfile) -> None:
        self.users[user.id] = user

    async def lookup_user(self, user_id: int) -> LookupResult[UserProfile]:
        self.calls.append(user_id)
        if self.unavailable:
            return LookupResult.unavailable("User Service unavailable")
        user = self.users.get(user_id)
        return LookupResult.found(user) if user else LookupResult.absent()


class StubPropertyGateway(PropertyGateway):
    def __init__(self, properties: list[PropertyProfile] | None = None) -> None:
        self.properties: dict[int, PropertyProfile] = {p.id: p for p in properties or []}
        self.unavailable = False
        self.calls: list[int] = []

    def add(self, prop: PropertyProfile) -> None:
        self.properties[prop.id] = prop

    async def lookup_property(self, property_id: int) -> LookupResult[PropertyProfile]:
        self.calls.append(property_id)
        if self.unavailable:
            return LookupResult.unavailable("Property Service unavailable")
        prop = self.properties.get(property_id)
        return LookupResult.found(prop) if prop else LookupResult.absent()


class StubDocumentGateway(DocumentGateway):
    """Sin configuración explícita, usa el flag documents_approved del perfil de usuario."""

    def __init__(self, user_gateway: StubUserGateway | None = None) -> None:
        self._user_gateway = user_gateway
        self.approved: dict[int, bool] = {}

    async def has_approved_documents(self, user_id: int) -> bool:
        if user_id in self.approved:
            return self.approved[user_id]
        if self._user_gateway is not None:
            user = self._user_gateway.users.get(user_id)
            return bool(user and user.documents_approved)
        return False
