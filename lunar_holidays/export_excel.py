"""Excel export of an annotated month."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from lunar_holidays.calendar_kr import WEEKDAY_NAMES, month_grid
from lunar_holidays.classifier import HolidayEngine

CALENDAR_SHEET = "calendar"
HOLIDAYS_SHEET = "holidays"
MAX_COLUMN_WIDTH = 60


def _format_sheet(worksheet, frame: pd.DataFrame) -> None:
    """Freeze the header row, add a filter and size columns to their longest text."""
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    for index, column in enumerate(frame.columns, start=1):
        texts = [str(column), *(str(value) for value in frame[column] if pd.notna(value))]
        widest = max(len(text) for text in texts)
        worksheet.column_dimensions[get_column_letter(index)].width = min(
            widest + 2, MAX_COLUMN_WIDTH
        )


def month_rows(engine: HolidayEngine, year: int, month: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for week in month_grid(engine, year, month):
        for cell in week:
            if not cell.is_current_month:
                continue
            classification = cell.classification
            rows.append(
                {
                    "date": cell.date,
                    "weekday": WEEKDAY_NAMES[cell.date.weekday()],
                    "lunar": cell.lunar_marker,
                    "holiday": classification.primary_name,
                    "all_holidays": ", ".join(classification.all_names),
                    "type": classification.type.value,
                }
            )
    return rows


def export_month_excel(path: str | Path, engine: HolidayEngine, year: int, month: int) -> None:
    output_path = Path(path)
    calendar_df = pd.DataFrame(month_rows(engine, year, month))
    holidays_df = pd.DataFrame(
        [entry.model_dump() for entry in engine.adapter.cleaned_holidays(year)],
        columns=["name", "solar_date", "is_known_substitute"],
    )

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        calendar_df.to_excel(writer, sheet_name=CALENDAR_SHEET, index=False)
        holidays_df.to_excel(writer, sheet_name=HOLIDAYS_SHEET, index=False)

        for sheet_name, frame in ((CALENDAR_SHEET, calendar_df), (HOLIDAYS_SHEET, holidays_df)):
            _format_sheet(writer.sheets[sheet_name], frame)
