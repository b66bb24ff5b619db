# src/sheet_outline/hierarchy/builder.py

import logging
from dataclasses import dataclass, field
from functools import reduce
from time import monotonic

from sheet_outline.observability import names
from sheet_outline.observability.base import MetricsHook, NoOpMetricsHook
from sheet_outline.parsers.entries import Entry

from .models import MARKER, PLACEHOLDER_DETAIL, Hierarchy, Item, Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildReport:
    """What the builder did with rows it could not place as-is."""

    sections: int = 0
    items: int = 0
    orphan_items: list[str] = field(default_factory=list)
    empty_items: int = 0
    overwritten_titles: list[str] = field(default_factory=list)

    @property
    def dropped(self) -> int:
        return len(self.orphan_items) + self.empty_items


@dataclass
class _BuildState:
    # title -> (detail, items); dict order is first-seen title order
    sections: dict[str, tuple[str, list[Item]]] = field(default_factory=dict)
    current_title: str | None = None
    items: int = 0
    orphan_items: list[str] = field(default_factory=list)
    empty_items: int = 0
    overwritten_titles: list[str] = field(default_factory=list)


def _step(state: _BuildState, entry: Entry) -> _BuildState:
    label = entry.label
    detail = entry.detail or PLACEHOLDER_DETAIL

    if not label.startswith(MARKER):
        if label in state.sections:
            logger.warning(
                "Row %d: section %r repeats an earlier title, replacing it",
                entry.row_number,
                label,
            )
            state.overwritten_titles.append(label)
        state.sections[label] = (detail, [])
        state.current_title = label
        logger.debug("Row %d: added section %r", entry.row_number, label)
        return state

    name = label[len(MARKER) :].strip()
    if not name:
        logger.debug("Row %d: empty sub-item name, skipping", entry.row_number)
        state.empty_items += 1
        return state
    if state.current_title is None:
        logger.warning(
            "Row %d: sub-item %r has no section before it, skipping",
            entry.row_number,
            name,
        )
        state.orphan_items.append(name)
        return state

    state.sections[state.current_title][1].append(Item(name=name, detail=detail))
    state.items += 1
    logger.debug(
        "Row %d: added item %r under %r", entry.row_number, name, state.current_title
    )
    return state


def build_with_report(
    entries: list[Entry],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> tuple[Hierarchy, BuildReport]:
    """Fold entries into a Hierarchy and report dropped or replaced rows.

    Never raises. A label without the marker starts a new Section (or
    replaces one with the same title, losing its items); a marker label
    adds an Item to the current Section.
    """
    start = monotonic()
    state = reduce(_step, entries, _BuildState())

    hierarchy = Hierarchy(
        Section(title=title, detail=detail, items=tuple(items))
        for title, (detail, items) in state.sections.items()
    )
    report = BuildReport(
        sections=len(hierarchy),
        items=sum(len(section.items) for section in hierarchy.values()),
        orphan_items=state.orphan_items,
        empty_items=state.empty_items,
        overwritten_titles=state.overwritten_titles,
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.HIERARCHY_BUILD_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.HIERARCHY_SECTIONS, report.sections)
    metrics_hook.increment(names.HIERARCHY_ITEMS_DROPPED, report.dropped)
    metrics_hook.increment(
        names.HIERARCHY_SECTIONS_OVERWRITTEN, len(report.overwritten_titles)
    )
    logger.info(
        "Built hierarchy: %d sections, %d items, %d rows dropped",
        report.sections,
        report.items,
        report.dropped,
    )
    return hierarchy, report


def build(
    entries: list[Entry],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Hierarchy:
    hierarchy, _ = build_with_report(entries, metrics_hook=metrics_hook)
    return hierarchy
