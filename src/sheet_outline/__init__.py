# Errors
from .errors import MalformedInput, MissingRequiredColumn, OutlineError

# Hierarchy
from .hierarchy import (
    BuildReport,
    Hierarchy,
    Item,
    Section,
    anchor_id,
    build,
    build_with_report,
    filter_hierarchy,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ColumnConfig,
    ColumnResolution,
    ColumnRole,
    CsvParser,
    Entry,
    ParsedTable,
    materialize_entries,
    resolve_columns,
)

# Pipeline
from .pipeline import Outline, fetch_outline, load_outline

# Settings
from .settings import OutlineSettings, load_settings

# Sources
from .sources import SheetClient, SheetConfig

__all__ = [
    # Errors
    "OutlineError",
    "MalformedInput",
    "MissingRequiredColumn",
    # Hierarchy
    "BuildReport",
    "Hierarchy",
    "Item",
    "Section",
    "anchor_id",
    "build",
    "build_with_report",
    "filter_hierarchy",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ColumnConfig",
    "ColumnResolution",
    "ColumnRole",
    "CsvParser",
    "Entry",
    "ParsedTable",
    "materialize_entries",
    "resolve_columns",
    # Pipeline
    "Outline",
    "fetch_outline",
    "load_outline",
    # Settings
    "OutlineSettings",
    "load_settings",
    # Sources
    "SheetClient",
    "SheetConfig",
]
