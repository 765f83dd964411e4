"""Spreadsheet export of an attendance report (pandas + openpyxl)."""

from __future__ import annotations

import io
from os import PathLike
from typing import BinaryIO, Union

import pandas as pd

from ..common.logging import get_logger
from ..core.constants import EXPORT_SHEET_NAME, PRESENT_MARK
from ..core.exceptions import ExportError
from .model import AttendanceReport

logger = get_logger(__name__)


def report_to_dataframe(report: AttendanceReport) -> pd.DataFrame:
    """One row per roster student, one column per session, then a totals row."""
    columns = [s.date.isoformat() for s in report.sessions]

    data = []
    for row in report.rows:
        line = {"Student": f"{row.position}. {row.display_name}"}
        for column, present in zip(columns, row.marks):
            line[column] = PRESENT_MARK if present else ""
        data.append(line)

    participants = report.summary.participants
    totals = {"Student": "Total students:"}
    for session, column in zip(report.sessions, columns):
        count = report.totals.get(session.date, 0)
        totals[column] = f"{count} / {participants}" if count else ""
    data.append(totals)

    return pd.DataFrame(data, columns=["Student", *columns])


def export_excel(
    report: AttendanceReport,
    target: Union[str, PathLike, BinaryIO, None] = None,
) -> Union[str, PathLike, BinaryIO]:
    """Write the report as .xlsx to ``target`` (a path or binary buffer).

    Returns the target; when none is given, a fresh BytesIO rewound to the start.
    """
    output = target if target is not None else io.BytesIO()
    df = report_to_dataframe(report)
    try:
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
    except (OSError, ValueError) as exc:
        raise ExportError(f"Could not export attendance for activity {report.summary.activity_id}") from exc

    logger.info("report.exported", activity_id=report.summary.activity_id, rows=len(report.rows))
    if isinstance(output, io.BytesIO):
        output.seek(0)
    return output
