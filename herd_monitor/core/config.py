"""
Configuration module for the herd monitor.
Uses Pydantic BaseSettings for validation - app fails fast if required config is missing.
"""
import logging

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with validation.
    Required fields will cause the app to fail fast if not provided.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # Spreadsheet read path (published CSV exports)
    herd_sheet_id: str = Field(
        default="1N-3sqs45hD8kKaKVfPsdE69I4uWqs6lERZ29Y_6a9Is",
        description="Identifier of the spreadsheet backing the farm data"
    )
    herd_sheets_base_url: str = Field(
        default="https://docs.google.com/spreadsheets/d",
        description="Export host prefix for published sheet tabs"
    )
    
    # Remote script endpoint (the only write path)
    herd_script_url: str = Field(
        default="",
        description="URL of the spreadsheet script endpoint handling actions"
    )
    herd_http_timeout: float = Field(default=10.0, description="Per-request HTTP timeout in seconds")
    
    # API Configuration
    herd_api_host: str = Field(default="0.0.0.0", description="API host")
    herd_api_port: int = Field(default=8000, description="API port")
    herd_api_reload: bool = Field(default=False, description="Enable hot reload")
    
    # API Authentication Configuration
    herd_api_key: str = Field(
        ...,  # Required - no default means fail fast if missing
        description="API key for authenticating requests to the herd monitor API",
        min_length=32,
    )
    
    @model_validator(mode="after")
    def warn_missing_script_url(self) -> "Settings":
        """Writes and the live cattle read need the script endpoint."""
        if not self.herd_script_url:
            logger.warning(
                "HERD_SCRIPT_URL not set - write actions and login will be unavailable"
            )
        return self
    
    @property
    def sheet_export_prefix(self) -> str:
        """Base URL of the spreadsheet, without a trailing slash."""
        return f"{self.herd_sheets_base_url.rstrip('/')}/{self.herd_sheet_id}"


# Create global settings instance - fails fast if required config is missing
settings = Settings()

SHEET_ID = settings.herd_sheet_id
SHEETS_BASE_URL = settings.herd_sheets_base_url
SCRIPT_URL = settings.herd_script_url
HTTP_TIMEOUT = settings.herd_http_timeout

API_HOST = settings.herd_api_host
API_PORT = settings.herd_api_port
API_RELOAD = settings.herd_api_reload

API_KEY = settings.herd_api_key
