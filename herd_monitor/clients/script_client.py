"""
HTTP client for the spreadsheet script endpoint.

Every command is a GET with an ``action`` query parameter plus a flat set
of string parameters, answered by a JSON ``{success, message, ...}``
envelope. The endpoint itself is a black box.
"""
import httpx
import logging
from typing import Any, Dict, Mapping, Optional

from herd_monitor.core.config import settings
from herd_monitor.core.exceptions import (
    ScriptAPIError,
    ScriptConnectionError,
    ScriptPayloadError,
)

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


def encode_param_value(value: Any) -> str:
    """
    Stringify a primitive for use as a query parameter value.
    
    Booleans become ``true``/``false`` and integral floats drop the
    trailing ``.0`` (``22.0`` -> ``"22"``), matching what the script
    endpoint receives from browser clients.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_params(action: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
    """
    Query parameters for one command: ``action`` first, then every
    non-None parameter in insertion order.
    """
    query = {"action": action}
    for key, value in (params or {}).items():
        if value is None:
            continue
        query[key] = encode_param_value(value)
    return query


class ScriptClient:
    """Client for the script endpoint (the only write path)."""
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.herd_script_url
        if not self.base_url:
            raise ValueError("HERD_SCRIPT_URL must be set in config")
        self.timeout = timeout if timeout is not None else settings.herd_http_timeout
        self._transport = transport
    
    async def call(self, action: str, params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Run one action against the script endpoint.
        
        Args:
            action: Action name, e.g. 'addCattle' or 'getUsers'
            params: Flat mapping of parameter name to primitive value
        
        Returns:
            The decoded JSON envelope. ``success`` may be False; that is a
            normal outcome and is returned, not raised.
        
        Raises:
            ScriptAPIError: For non-success HTTP status
            ScriptConnectionError: For connection/request errors
            ScriptPayloadError: If the body is not a JSON object
        """
        query = build_query_params(action, params)
        logger.debug("Calling script action", extra={"action": action})
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.base_url, params=query, headers=NO_CACHE_HEADERS)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            error_msg = f"API call failed: {e.response.status_code} {e.response.reason_phrase}"
            logger.error(error_msg, extra={"action": action})
            raise ScriptAPIError(
                action=action,
                detail=error_msg,
                http_status=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            error_msg = f"Request error: {e}"
            logger.error(error_msg, extra={"action": action})
            raise ScriptConnectionError(action=action, detail=error_msg) from e
        except ValueError as e:
            logger.error("Script response is not JSON", extra={"action": action})
            raise ScriptPayloadError(action=action) from e
        
        if not isinstance(payload, dict):
            logger.error("Script response is not a JSON object", extra={"action": action})
            raise ScriptPayloadError(action=action)
        
        return payload


# Global client instance
_client_instance: Optional[ScriptClient] = None


def get_script_client() -> ScriptClient:
    """Get or create the global script client instance."""
    global _client_instance
    if _client_instance is None:
        _client_instance = ScriptClient()
    return _client_instance
