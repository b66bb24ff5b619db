from .base import TableParser
from .columns import (
    ColumnConfig,
    ColumnResolution,
    ColumnRole,
    resolve_column,
    resolve_columns,
)
from .csv_parser import CsvParser, tokenize
from .entries import Entry, EntryReport, materialize_entries
from .models import ParsedTable, RawRow

__all__ = [
    # Parsers
    "TableParser",
    "CsvParser",
    "tokenize",
    # Columns
    "ColumnConfig",
    "ColumnResolution",
    "ColumnRole",
    "resolve_column",
    "resolve_columns",
    # Entries
    "Entry",
    "EntryReport",
    "materialize_entries",
    # Types
    "ParsedTable",
    "RawRow",
]
