"""Main entry point for flextime tracker."""
import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from flextime.pipelines import pipeline
from flextime.transformers import report
from flextime.utilities import config, utils
from flextime.utilities.errors import UnreadableFileError

logger = logging.getLogger(__name__)


def parse_date(date_str: str) -> date:
    """Parse date string in YYYY-MM-DD format."""
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date format: {date_str}. Use YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarise flextime and vacation from a time-tracking export",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report through today with an 8 hour workday
  python main.py timesheet.xlsx

  # Report through a fixed date
  python main.py timesheet.xlsx --end-date 2025-06-30

  # Four day week, JSON written to a file
  python main.py timesheet.xls --weekends Fri Sat Sun --workday-hours 10 --format json --output flex.json
        """,
    )

    parser.add_argument("file", type=Path, help="Spreadsheet export (.xls or .xlsx)")

    parser.add_argument(
        "--workday-hours",
        type=float,
        default=config.DEFAULT_WORKDAY_HOURS,
        help="Standard workday length in hours (default: %(default)s)",
    )

    parser.add_argument(
        "--weekends",
        nargs="+",
        choices=config.WEEKDAY_LABELS,
        default=sorted(config.DEFAULT_WEEKENDS),
        help="Weekend day labels (default: %(default)s)",
    )

    parser.add_argument(
        "--end-date",
        type=parse_date,
        help="Last day of the report (YYYY-MM-DD format, default: today)",
    )

    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--output",
        type=Path,
        help="Write the report to this file instead of stdout",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    return parser


def main(argv=None):
    """Main entry point with CLI argument parsing."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings = utils.create_settings(
        workday_hours=args.workday_hours,
        weekends=args.weekends,
        end_date=args.end_date,
    )
    logger.info(
        "Processing %s (workday %s h, weekends %s, through %s)",
        args.file,
        settings.workday_hours,
        ", ".join(sorted(settings.weekends)),
        settings.end_date,
    )

    try:
        groups = pipeline.parse_time_data(args.file, settings)
    except UnreadableFileError as exc:
        logger.error("Could not read %s: %s", args.file, exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("Processing interrupted by user")
        return 130
    except Exception as exc:
        logger.exception("Fatal error: %s", exc)
        return 1

    if args.format == "json":
        output = report.groups_to_json(groups)
    else:
        output = report.render_month_groups(groups)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info("Report written to %s", args.output)
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
