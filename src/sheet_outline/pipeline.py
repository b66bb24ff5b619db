# src/sheet_outline/pipeline.py

"""Raw CSV text to Hierarchy, in one call.

Fatal problems (empty input, no label column) raise; callers should show
an error state instead of rendering anything partial.
"""

import logging
from dataclasses import dataclass, field

from sheet_outline.hierarchy.builder import BuildReport, build_with_report
from sheet_outline.hierarchy.filter import filter_hierarchy
from sheet_outline.hierarchy.models import Hierarchy
from sheet_outline.observability.base import MetricsHook, NoOpMetricsHook
from sheet_outline.parsers.columns import (
    ColumnConfig,
    ColumnResolution,
    resolve_columns,
)
from sheet_outline.parsers.csv_parser import CsvParser
from sheet_outline.parsers.entries import EntryReport, materialize_entries
from sheet_outline.sources.sheet_client import SheetClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outline:
    hierarchy: Hierarchy
    columns: ColumnResolution
    entry_report: EntryReport
    build_report: BuildReport
    metrics_hook: MetricsHook = field(
        default=NoOpMetricsHook(), compare=False, repr=False
    )

    def filter(self, term: str) -> Hierarchy:
        return filter_hierarchy(self.hierarchy, term, metrics_hook=self.metrics_hook)


def load_outline(
    raw_text: str,
    config: ColumnConfig = ColumnConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Outline:
    table = CsvParser(metrics_hook=metrics_hook).parse(raw_text)
    columns = resolve_columns(table.header_row, config)
    entries, entry_report = materialize_entries(
        table, columns, config=config, metrics_hook=metrics_hook
    )
    hierarchy, build_report = build_with_report(entries, metrics_hook=metrics_hook)
    return Outline(
        hierarchy=hierarchy,
        columns=columns,
        entry_report=entry_report,
        build_report=build_report,
        metrics_hook=metrics_hook,
    )


async def fetch_outline(
    client: SheetClient,
    config: ColumnConfig = ColumnConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Outline:
    raw_text = await client.fetch_text()
    logger.debug("Received %d characters of CSV", len(raw_text))
    return load_outline(raw_text, config=config, metrics_hook=metrics_hook)
