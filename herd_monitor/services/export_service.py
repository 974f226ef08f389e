"""
CSV export of record collections.

Column headers come from the first record's field names (camelCase for
schema records). The Python side of "download" is a CSVExport carrying
filename, body and media type; the API layer sends it as an attachment.
"""
import csv
import io
import logging
from dataclasses import asdict, dataclass, is_dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from herd_monitor.core.datetime_utils import iso_date

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv;charset=utf-8;"


@dataclass(frozen=True)
class CSVExport:
    """A ready-to-send CSV file."""
    filename: str
    content: str
    media_type: str = CSV_MEDIA_TYPE

    def write_to(self, directory: Path) -> Path:
        """Write the file into ``directory`` and return its path."""
        path = Path(directory) / self.filename
        path.write_text(self.content, encoding="utf-8")
        return path


def _as_row(record: Any) -> Dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True)
    if is_dataclass(record) and not isinstance(record, type):
        return asdict(record)
    if isinstance(record, Mapping):
        return dict(record)
    raise TypeError(f"Cannot export {type(record).__name__} records")


def format_csv_value(value: Any) -> str:
    """Cell text: empty for None, ``true``/``false``, ``22`` for 22.0."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_csv(records: Sequence[Any]) -> str:
    """
    Serialize flat records to CSV text.

    Values containing a comma or a double quote are quoted with inner
    quotes doubled. Fields missing from later records are left empty.
    """
    rows: List[Dict[str, Any]] = [_as_row(r) for r in records]
    headers = list(rows[0].keys())

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=headers, extrasaction="ignore", lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow({h: format_csv_value(row.get(h)) for h in headers})
    return buffer.getvalue()


def export_filename(filename_stem: str, on: Optional[date] = None) -> str:
    """``<stem>_<YYYY-MM-DD>.csv``"""
    return f"{filename_stem}_{iso_date(on)}.csv"


def export_to_csv(
    records: Sequence[Any],
    filename_stem: str,
    on: Optional[date] = None,
) -> Optional[CSVExport]:
    """
    Build a CSV export of ``records``.

    Args:
        records: Non-empty, homogeneous collection of flat records
            (schema models, dataclasses or mappings).
        filename_stem: Prefix for the filename, e.g. 'milk_production'.
        on: Date stamped into the filename (default: today, UTC).

    Returns:
        The export, or None when there is nothing to export.
    """
    if not records:
        logger.warning("No data to export", extra={"filename_stem": filename_stem})
        return None

    export = CSVExport(filename=export_filename(filename_stem, on), content=build_csv(records))
    logger.info(f"Exported {len(records)} rows to {export.filename}")
    return export
