"""
Core module for application configuration, logging, and error types.

This module provides:
- Settings: Application configuration via pydantic-settings
- Exceptions: Error hierarchy with HTTP status codes
- Logging: JSON/text logging setup with request id propagation
"""
from herd_monitor.core.config import settings, Settings
from herd_monitor.core.exceptions import (
    HerdMonitorError,
    SheetFetchError,
    ScriptAPIError,
    ScriptConnectionError,
    ScriptPayloadError,
    ScriptNotConfiguredError,
    InvalidCredentialsError,
    UnknownResourceError,
    NoDataToExportError,
    setup_exception_handlers,
)
from herd_monitor.core.logging_config import setup_logging

__all__ = [
    "settings",
    "Settings",
    "HerdMonitorError",
    "SheetFetchError",
    "ScriptAPIError",
    "ScriptConnectionError",
    "ScriptPayloadError",
    "ScriptNotConfiguredError",
    "InvalidCredentialsError",
    "UnknownResourceError",
    "NoDataToExportError",
    "setup_exception_handlers",
    "setup_logging",
]
