from .anchors import anchor_id
from .builder import BuildReport, build, build_with_report
from .filter import filter_hierarchy
from .models import MARKER, PLACEHOLDER_DETAIL, Hierarchy, Item, Section

__all__ = [
    # Builder
    "build",
    "build_with_report",
    "BuildReport",
    # Filter
    "filter_hierarchy",
    # Anchors
    "anchor_id",
    # Types
    "Hierarchy",
    "Item",
    "Section",
    "MARKER",
    "PLACEHOLDER_DETAIL",
]
