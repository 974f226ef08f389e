"""
Data access layer for the sheet-backed farm database.
"""
from herd_monitor.repositories.csv_decoder import decode_csv, data_rows, map_data_rows
from herd_monitor.repositories.farm_repository import (
    FarmRepository,
    OWNERS_SHEET,
    CATTLE_SHEET,
    LOGS_SHEET,
    MILK_SHEET,
    HEALTH_SHEET,
    TREATMENTS_SHEET,
)

__all__ = [
    "decode_csv",
    "data_rows",
    "map_data_rows",
    "FarmRepository",
    "OWNERS_SHEET",
    "CATTLE_SHEET",
    "LOGS_SHEET",
    "MILK_SHEET",
    "HEALTH_SHEET",
    "TREATMENTS_SHEET",
]
