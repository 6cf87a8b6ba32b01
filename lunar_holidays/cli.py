"""CLI printing a month annotated with lunar markers and Korean holidays."""

from __future__ import annotations

import argparse
import logging

import pandas as pd

from lunar_holidays.calendar_kr import parse_month, zodiac_for
from lunar_holidays.classifier import HolidayEngine
from lunar_holidays.domain import EngineSettings
from lunar_holidays.export_excel import export_month_excel, month_rows
from lunar_holidays.source import SourceFetchError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Korean lunar/holiday calendar")
    parser.add_argument("--month", required=True, help="Month in YYYY-MM format")
    parser.add_argument("--out", help="Optional path to an output Excel file")
    parser.add_argument(
        "--holidays-only",
        action="store_true",
        help="Print only days with a holiday or lunar marker",
    )
    parser.add_argument(
        "--language",
        default="en_US",
        help="Language passed to the holidays package (default: en_US)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_engine(args: argparse.Namespace) -> HolidayEngine:
    return HolidayEngine(settings=EngineSettings(language=args.language))


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        year, month = parse_month(args.month)
    except ValueError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc

    engine = build_engine(args)
    rows = month_rows(engine, year, month)
    if args.holidays_only:
        rows = [row for row in rows if row["all_holidays"] or row["lunar"]]

    zodiac = zodiac_for(year)
    print(f"{year:04d}-{month:02d} (year of the {zodiac.name} {zodiac.emoji})")
    print(_render_table(rows))

    if args.out:
        try:
            export_month_excel(args.out, engine, year, month)
        except SourceFetchError as exc:
            raise SystemExit(f"ERROR: Excel export failed: {exc}") from exc
        print(f"OK: {args.out}")


if __name__ == "__main__":
    main()
