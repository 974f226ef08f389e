"""
CSV export router.

Each resource is served as an attachment named ``<stem>_<YYYY-MM-DD>.csv``.
"""
import logging
from typing import Awaitable, Callable, Dict, List, Tuple

from fastapi import APIRouter, Depends, Path
from fastapi.responses import Response

from herd_monitor.core.auth import get_session, verify_api_key
from herd_monitor.core.dependencies import get_farm_repository, get_herd_service
from herd_monitor.core.exceptions import NoDataToExportError, UnknownResourceError
from herd_monitor.repositories import FarmRepository
from herd_monitor.schemas import Session
from herd_monitor.services import HerdService, export_to_csv

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/exports",
    tags=["Exports"],
    dependencies=[Depends(verify_api_key)],
)

Loader = Callable[[FarmRepository, HerdService, Session], Awaitable[List]]

# resource -> (filename stem, loader)
EXPORTS: Dict[str, Tuple[str, Loader]] = {
    "cattle": ("cattle", lambda repo, herd, session: herd.get_cattle_for_session(session)),
    "logs": ("rfid_logs", lambda repo, herd, session: herd.get_logs_for_session(session)),
    "milk": ("milk_production", lambda repo, herd, session: herd.get_milk_records_for_session(session)),
    "health": ("health_records", lambda repo, herd, session: repo.fetch_health_records()),
    "treatments": ("treatments", lambda repo, herd, session: repo.fetch_treatments()),
    "owners": ("owners", lambda repo, herd, session: repo.fetch_owners()),
}


@router.get(
    "/{resource}",
    summary="Download a collection as CSV",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}},
)
async def export_resource(
    resource: str = Path(..., description=", ".join(EXPORTS)),
    session: Session = Depends(get_session),
    repo: FarmRepository = Depends(get_farm_repository),
    herd: HerdService = Depends(get_herd_service),
):
    """
    Raises:
        UnknownResourceError: 404 for a resource not in the list.
        NoDataToExportError: 404 when the collection is empty.
    """
    if resource not in EXPORTS:
        raise UnknownResourceError(resource)

    stem, load = EXPORTS[resource]
    export = export_to_csv(await load(repo, herd, session), stem)
    if export is None:
        raise NoDataToExportError(resource=resource)

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
