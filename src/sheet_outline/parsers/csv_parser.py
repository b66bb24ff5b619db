# parsers/csv_parser.py

import logging
from enum import Enum
from time import monotonic

from sheet_outline.errors import MalformedInput
from sheet_outline.observability import names
from sheet_outline.observability.base import MetricsHook, NoOpMetricsHook

from .base import TableParser
from .models import ParsedTable, RawRow

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class _State(Enum):
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def tokenize(text: str) -> list[RawRow]:
    """Split CSV text into rows of fields.

    Quoted fields may contain commas, doubled quotes and raw newlines.
    A ``\\r\\n`` pair ends a single row. Blank rows are kept here;
    filtering them is the parser's job.
    """
    rows: list[RawRow] = []
    row: RawRow = []
    buf: list[str] = []
    state = _State.UNQUOTED
    # a quote opened a field that may legitimately be empty ("")
    touched = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if state is _State.QUOTED:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    buf.append('"')
                    i += 2
                    continue
                state = _State.UNQUOTED
            else:
                buf.append(ch)
            i += 1
            continue

        if ch == '"':
            state = _State.QUOTED
            touched = True
        elif ch == ",":
            row.append("".join(buf))
            buf = []
            touched = False
        elif ch == "\r" or ch == "\n":
            row.append("".join(buf))
            rows.append(row)
            row = []
            buf = []
            touched = False
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
        else:
            buf.append(ch)
        i += 1

    if buf or row or touched:
        row.append("".join(buf))
        rows.append(row)

    if state is _State.QUOTED:
        logger.warning("Unterminated quoted field at end of input")

    return rows


def is_blank(row: RawRow) -> bool:
    return all(not value.strip() for value in row)


class CsvParser(TableParser):
    """
    Quote-aware CSV parser for published spreadsheet exports.
    - Handles embedded commas, doubled quotes and newlines inside quotes
    - Drops fully blank rows
    - First non-blank row is the header
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, raw_text: str) -> ParsedTable:
        start = monotonic()

        if not raw_text or not raw_text.strip():
            self.metrics_hook.increment(names.CSV_PARSE_ERRORS_TOTAL)
            logger.error("CSV input is empty")
            raise MalformedInput("CSV input is empty")

        if raw_text.startswith(_BOM):
            raw_text = raw_text[len(_BOM) :]

        rows = tokenize(raw_text)
        kept = [row for row in rows if not is_blank(row)]
        skipped = len(rows) - len(kept)
        if skipped:
            logger.debug("Skipped %d blank rows", skipped)

        if not kept:
            self.metrics_hook.increment(names.CSV_PARSE_ERRORS_TOTAL)
            logger.error("CSV input has no header row")
            raise MalformedInput("CSV input has no header row")

        table = ParsedTable(header_row=kept[0], data_rows=kept[1:])

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CSV_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CSV_ROWS_PARSED, len(table.data_rows))
        self.metrics_hook.increment(names.CSV_BLANK_ROWS_SKIPPED, skipped)
        logger.info(
            "Parsed CSV: %d header fields, %d data rows",
            len(table.header_row),
            len(table.data_rows),
        )
        return table
