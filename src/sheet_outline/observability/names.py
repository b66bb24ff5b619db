# src/sheet_outline/observability/names.py

"""Standard metric names for sheet-outline observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
CSV_PARSE_DURATION = "csv_parse_duration"

# Counters
CSV_ROWS_PARSED = "csv_rows_parsed"
CSV_BLANK_ROWS_SKIPPED = "csv_blank_rows_skipped"
CSV_PARSE_ERRORS_TOTAL = "csv_parse_errors_total"

# Counters (row materialization)
ENTRIES_PADDED_ROWS = "entries_padded_rows"
ENTRIES_DROPPED_TOTAL = "entries_dropped_total"
ENTRIES_LONG_LABELS = "entries_long_labels"


# ============================================================================
# Hierarchy Metrics
# ============================================================================

# Duration
HIERARCHY_BUILD_DURATION = "hierarchy_build_duration"
HIERARCHY_FILTER_DURATION = "hierarchy_filter_duration"

# Counters
HIERARCHY_ITEMS_DROPPED = "hierarchy_items_dropped"
HIERARCHY_SECTIONS_OVERWRITTEN = "hierarchy_sections_overwritten"

# Gauges
HIERARCHY_SECTIONS = "hierarchy_sections"


# ============================================================================
# Sheet Fetch Metrics
# ============================================================================

# Duration
SHEET_FETCH_DURATION = "sheet_fetch_duration"

# Counters
SHEET_REQUESTS_TOTAL = "sheet_requests_total"
SHEET_ERRORS_TOTAL = "sheet_errors_total"
