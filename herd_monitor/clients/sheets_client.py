"""
HTTP client for the spreadsheet's published CSV exports.
This is the read path: one GET per sheet tab, no caching, no retry.
"""
import httpx
import logging
from typing import Optional
from urllib.parse import quote

from herd_monitor.core.config import settings
from herd_monitor.core.exceptions import SheetFetchError

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}


class SheetsClient:
    """Fetches sheet tabs as CSV text."""
    
    def __init__(
        self,
        sheet_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.sheet_id = sheet_id or settings.herd_sheet_id
        self.base_url = (base_url or settings.herd_sheets_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.herd_http_timeout
        self._transport = transport
    
    def sheet_csv_url(self, sheet_name: str) -> str:
        """Export URL for one tab of the spreadsheet."""
        return (
            f"{self.base_url}/{self.sheet_id}/gviz/tq"
            f"?tqx=out:csv&sheet={quote(sheet_name)}"
        )
    
    async def fetch_csv(self, sheet_name: str) -> str:
        """
        Download a sheet tab as CSV text.
        
        Args:
            sheet_name: Tab name, e.g. 'Owners' or 'RFID_Database'
        
        Returns:
            The raw CSV body (first row is the header row)
        
        Raises:
            SheetFetchError: For non-success status or connection errors
        """
        url = self.sheet_csv_url(sheet_name)
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=NO_CACHE_HEADERS)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            error_msg = f"Sheet '{sheet_name}' returned {e.response.status_code}"
            logger.warning(error_msg)
            raise SheetFetchError(
                sheet_name=sheet_name,
                detail=error_msg,
                http_status=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            error_msg = f"Request error fetching sheet '{sheet_name}': {e}"
            logger.warning(error_msg)
            raise SheetFetchError(sheet_name=sheet_name, detail=error_msg) from e


# Global client instance
_client_instance: Optional[SheetsClient] = None


def get_sheets_client() -> SheetsClient:
    """Get or create the global sheets client instance."""
    global _client_instance
    if _client_instance is None:
        _client_instance = SheetsClient()
    return _client_instance
