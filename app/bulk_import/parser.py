import re

import structlog

from app.bulk_import.schemas import ParsedTable
from app.exceptions import InvalidInputError

logger = structlog.get_logger()

# Tab and comma are tried together; the same split applies to every line.
DELIMITER = re.compile(r"\t|,")


def parse_table(text: str) -> ParsedTable:
    """Split pasted spreadsheet text into headers and data rows."""
    if not text or not text.strip():
        raise InvalidInputError("Please paste some data first")

    lines = [line.rstrip("\r") for line in text.split("\n")]
    while lines and not lines[0].strip():
        lines.pop(0)
    # A single terminating newline closes the last line rather than adding a blank one.
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()

    headers = split_line(lines[0])
    data_lines = [split_line(line) for line in lines[1:]]
    rows = [cells for cells in data_lines if any(cells)]

    table = ParsedTable(headers=headers, rows=rows, total_rows=len(data_lines))
    logger.info(
        "bulk_import_parsed",
        columns=len(headers),
        total_rows=table.total_rows,
        usable_rows=len(rows),
    )
    return table


def split_line(line: str) -> list[str]:
    return [_clean_cell(cell) for cell in DELIMITER.split(line)]


def _clean_cell(cell: str) -> str:
    cell = cell.strip()
    if len(cell) >= 2 and cell.startswith('"') and cell.endswith('"'):
        cell = cell[1:-1]
    return cell


def parse_summary(table: ParsedTable) -> str:
    return f"Found {len(table.headers)} columns and {table.total_rows} data rows"
