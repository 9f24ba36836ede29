import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from app.application.interfaces.property_gateway import PropertyGateway
from app.application.interfaces.remote_lookup import LookupResult
from app.domain.constants import DEFAULT_REMOTE_TIMEOUT_SECONDS
from app.domain.entities.profiles import PropertyProfile
from app.infrastructure.gateways.http_lookup import HttpLookupClient

logger = logging.getLogger(__name__)


def _first(body: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if body.get(key) is not None:
            return body[key]
    return None


def parse_property_profile(body: Any) -> PropertyProfile:
    if not isinstance(body, dict) or body.get("id") is None:
        raise ValueError("property payload without id")

    available = _first(body, "available", "disponible")
    owner_id = _first(body, "ownerId", "owner_id", "propietarioId")
    price = _first(body, "monthlyPrice", "precioMensual")
    try:
        monthly_price = Decimal(str(price)) if price is not None else None
    except InvalidOperation as exc:
        raise ValueError(f"invalid monthly price: {price}") from exc

    return PropertyProfile(
        id=int(body["id"]),
        # sin flag de disponibilidad, una propiedad existente se considera disponible
        available=True if available is None else bool(available),
        owner_id=int(owner_id) if owner_id is not None else None,
        title=_first(body, "title", "titulo"),
        monthly_price=monthly_price,
    )


class PropertyServiceHTTP(PropertyGateway):
    def __init__(self, base_url: str, timeout_seconds: float = DEFAULT_REMOTE_TIMEOUT_SECONDS) -> None:
        self._client = HttpLookupClient(base_url, "Property Service", timeout_seconds)

    async def lookup_property(self, property_id: int) -> LookupResult[PropertyProfile]:
        result = await self._client.get_json(
            f"/properties/{property_id}", {"property_id": property_id}
        )
        if not result.is_found:
            return result
        try:
            return LookupResult.found(parse_property_profile(result.value))
        except (TypeError, ValueError) as exc:
            logger.error(
                "Malformed property payload",
                extra={"property_id": property_id, "error": str(exc)},
            )
            return LookupResult.unavailable(f"malformed property payload: {exc}")
