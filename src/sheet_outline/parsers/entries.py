# parsers/entries.py

import logging
from dataclasses import dataclass, field

from sheet_outline.observability import names
from sheet_outline.observability.base import MetricsHook, NoOpMetricsHook

from .columns import ColumnConfig, ColumnResolution
from .models import ParsedTable

logger = logging.getLogger(__name__)

# header occupies the first sheet row
_FIRST_DATA_ROW = 2


@dataclass(frozen=True)
class Entry:
    label: str
    detail: str
    row_number: int = 0


@dataclass(frozen=True)
class EntryReport:
    padded_rows: int = 0
    empty_label_rows: int = 0
    long_labels: list[tuple[int, str]] = field(default_factory=list)


def materialize_entries(
    table: ParsedTable,
    resolution: ColumnResolution,
    config: ColumnConfig = ColumnConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> tuple[list[Entry], EntryReport]:
    """Reduce data rows to label/detail entries.

    Short rows are padded with empty fields, never rejected. Rows whose
    trimmed label is empty are dropped. Overlong labels are kept but
    reported, since they usually mean detail text drifted into the
    label column.
    """
    width = resolution.required_width
    entries: list[Entry] = []
    padded = 0
    empty = 0
    long_labels: list[tuple[int, str]] = []

    for row_number, row in enumerate(table.data_rows, start=_FIRST_DATA_ROW):
        values = list(row)
        if len(values) < width:
            logger.debug(
                "Row %d has %d fields, padding to %d", row_number, len(values), width
            )
            values.extend([""] * (width - len(values)))
            padded += 1

        label = values[resolution.label_index].strip()
        if not label:
            empty += 1
            continue

        if resolution.detail_index is None:
            detail = ""
        else:
            detail = values[resolution.detail_index].strip()

        if len(label) > config.long_label_threshold:
            logger.warning(
                "Row %d label is unusually long (%d chars), possible column drift: %.50s...",
                row_number,
                len(label),
                label,
            )
            long_labels.append((row_number, label))

        entries.append(Entry(label=label, detail=detail, row_number=row_number))

    metrics_hook.increment(names.ENTRIES_PADDED_ROWS, padded)
    metrics_hook.increment(names.ENTRIES_DROPPED_TOTAL, empty)
    metrics_hook.increment(names.ENTRIES_LONG_LABELS, len(long_labels))
    logger.info(
        "Materialized %d entries from %d rows (%d without label)",
        len(entries),
        len(table.data_rows),
        empty,
    )
    return entries, EntryReport(
        padded_rows=padded, empty_label_rows=empty, long_labels=long_labels
    )
