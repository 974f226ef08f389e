"""
HTTP clients for the spreadsheet backend.

- SheetsClient: read path (CSV export of a sheet tab)
- ScriptClient: command path (action GETs answered with a JSON envelope)
"""
from herd_monitor.clients.sheets_client import SheetsClient, get_sheets_client
from herd_monitor.clients.script_client import ScriptClient, get_script_client

__all__ = ["SheetsClient", "get_sheets_client", "ScriptClient", "get_script_client"]
