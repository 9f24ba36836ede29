import logging
from typing import Any

import httpx

from app.application.interfaces.remote_lookup import LookupResult
from app.domain.constants import DEFAULT_REMOTE_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class HttpLookupClient:
    def __init__(
        self,
        base_url: str,
        service_name: str,
        timeout_seconds: float = DEFAULT_REMOTE_TIMEOUT_SECONDS,
    ) -> None:
        """
        Single GET with a fixed timeout against a sibling microservice.

        Args:
            base_url: Base URL of the remote service
            service_name: Name used in logs and error messages
            timeout_seconds: Request timeout in seconds (default: 5.0)
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout_seconds

    async def get_json(self, path: str, log_extra: dict[str, Any] | None = None) -> LookupResult[Any]:
        """
        GET {base_url}{path} without retries.

        Returns:
            FOUND with the decoded body on 2xx, ABSENT on 404 and UNAVAILABLE on
            timeout, network error, any other status or an undecodable body.
        """
        url = f"{self._base_url}{path}"
        extra = {"service": self._service_name, "url": url, **(log_extra or {})}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
        except httpx.TimeoutException as exc:
            logger.error("Remote lookup timeout", extra={**extra, "timeout": self._timeout})
            return LookupResult.unavailable(f"timeout: {exc}")
        except httpx.HTTPError as exc:
            logger.error("Remote lookup HTTP error", exc_info=exc, extra=extra)
            return LookupResult.unavailable(str(exc))

        if response.status_code == 404:
            logger.info("Remote entity not found", extra=extra)
            return LookupResult.absent()

        if not 200 <= response.status_code < 300:
            logger.error(
                "Remote lookup returned non-2xx",
                extra={**extra, "http_status": response.status_code},
            )
            return LookupResult.unavailable(f"HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Remote lookup returned an undecodable body", extra=extra)
            return LookupResult.unavailable(f"invalid body: {exc}")

        return LookupResult.found(body)
