"""
Service layer for business logic.

This module contains services that compose repository reads and script
endpoint writes into the operations the dashboards use.
"""
from herd_monitor.services.herd_service import HerdService
from herd_monitor.services.registry_service import RegistryService, next_sequential_id
from herd_monitor.services.user_service import UserService
from herd_monitor.services.analytics_service import AnalyticsService
from herd_monitor.services.export_service import CSVExport, export_to_csv
from herd_monitor.services.cattle_images import get_cattle_image

__all__ = [
    "HerdService",
    "RegistryService",
    "next_sequential_id",
    "UserService",
    "AnalyticsService",
    "CSVExport",
    "export_to_csv",
    "get_cattle_image",
]
