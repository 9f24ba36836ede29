import logging
from typing import Any

from app.application.interfaces.remote_lookup import LookupResult
from app.application.interfaces.user_gateway import UserGateway
from app.domain.constants import DEFAULT_REMOTE_TIMEOUT_SECONDS
from app.domain.entities.profiles import UserProfile, UserRole
from app.infrastructure.gateways.http_lookup import HttpLookupClient

logger = logging.getLogger(__name__)


def _parse_active(body: dict[str, Any]) -> bool:
    if "active" in body:
        return bool(body["active"])
    if "activo" in body:
        return bool(body["activo"])
    estado = body.get("estado")
    if isinstance(estado, str):
        return estado.strip().upper() == "ACTIVO"
    return True


def parse_user_profile(body: Any) -> UserProfile:
    """Convierte la respuesta del User Service; admite los nombres de campo en español."""
    if not isinstance(body, dict) or body.get("id") is None:
        raise ValueError("user payload without id")
    return UserProfile(
        id=int(body["id"]),
        role=UserRole.parse(body.get("role", body.get("rol"))),
        active=_parse_active(body),
        documents_approved=bool(body.get("documentsApproved", False)),
        name=body.get("name") or body.get("nombre"),
        email=body.get("email"),
    )


class UserServiceHTTP(UserGateway):
    def __init__(self, base_url: str, timeout_seconds: float = DEFAULT_REMOTE_TIMEOUT_SECONDS) -> None:
        self._client = HttpLookupClient(base_url, "User Service", timeout_seconds)

    async def lookup_user(self, user_id: int) -> LookupResult[UserProfile]:
        result = await self._client.get_json(f"/users/{user_id}", {"user_id": user_id})
        if not result.is_found:
            return result
        try:
            return LookupResult.found(parse_user_profile(result.value))
        except (TypeError, ValueError) as exc:
            logger.error("Malformed user payload", extra={"user_id": user_id, "error": str(exc)})
            return LookupResult.unavailable(f"malformed user payload: {exc}")
