"""
Shared HTTP plumbing for the external service clients.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config.routing_config import RoutingConfig
from ..exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def create_http_client(config: RoutingConfig) -> httpx.AsyncClient:
    """Create the async HTTP client shared by all service clients of one session."""
    return httpx.AsyncClient(
        timeout=config.http_timeout_s,
        headers={"User-Agent": config.user_agent}
    )


class ServiceClient:
    """
    Base class for thin JSON-over-HTTP clients.

    Transport errors and timeouts become transient ExternalServiceErrors,
    non-2xx responses are classified by status, and undecodable bodies
    become non-transient errors.
    """

    service_name = "external"

    def __init__(self, http_client: httpx.AsyncClient, config: Optional[RoutingConfig] = None):
        self.http_client = http_client
        self.config = config or RoutingConfig()

    async def _request_json(self, method: str, url: str,
                            params: Optional[Dict[str, Any]] = None,
                            data: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = await self.http_client.request(method, url, params=params, data=data)
        except httpx.TimeoutException as e:
            raise ExternalServiceError(self.service_name, f"timeout: {e}", transient=True)
        except httpx.TransportError as e:
            raise ExternalServiceError(self.service_name, f"transport error: {e}", transient=True)

        if not response.is_success:
            raise ExternalServiceError.from_status(self.service_name, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError(self.service_name, f"malformed JSON payload: {e}",
                                       status_code=response.status_code)
