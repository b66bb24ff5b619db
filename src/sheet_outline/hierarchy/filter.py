# src/sheet_outline/hierarchy/filter.py

import logging
from time import monotonic

from sheet_outline.observability import names
from sheet_outline.observability.base import MetricsHook, NoOpMetricsHook

from .models import Hierarchy, Item, Section

logger = logging.getLogger(__name__)


def _matches(text: str, needle: str) -> bool:
    return needle in text.lower()


def _item_matches(item: Item, needle: str) -> bool:
    return _matches(item.name, needle) or _matches(item.detail, needle)


def filter_hierarchy(
    hierarchy: Hierarchy,
    term: str,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Hierarchy:
    """Return a new Hierarchy holding only what matches ``term``.

    Matching is a case-insensitive substring test. A Section is kept when
    its title, its detail or any of its items match, and its items are
    always reduced to the matching ones, so a Section kept for its title
    alone comes back with no items. An empty term keeps everything.
    The source Hierarchy is not modified.
    """
    start = monotonic()
    needle = term.lower()
    kept: list[Section] = []

    for section in hierarchy.values():
        matching_items = tuple(
            item for item in section.items if _item_matches(item, needle)
        )
        if (
            _matches(section.title, needle)
            or _matches(section.detail, needle)
            or matching_items
        ):
            kept.append(
                Section(
                    title=section.title,
                    detail=section.detail,
                    items=matching_items,
                )
            )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.HIERARCHY_FILTER_DURATION, elapsed_ms)
    logger.debug(
        "Filtered hierarchy with term=%r: %d of %d sections kept",
        term,
        len(kept),
        len(hierarchy),
    )
    return Hierarchy(kept)
