# parsers/columns.py

import logging
from dataclasses import dataclass
from enum import Enum

from sheet_outline.errors import MissingRequiredColumn

from .models import RawRow

logger = logging.getLogger(__name__)


class ColumnRole(str, Enum):
    """Logical role a source column plays in the outline."""

    LABEL = "label"
    DETAIL = "detail"


@dataclass(frozen=True)
class ColumnConfig:
    """How header names map to column roles.

    Immutable. A header matches a role when its lower-cased name contains
    one of the role's keywords or equals the role's fallback letter
    (the spreadsheet column letter).
    """

    label_keywords: tuple[str, ...] = ("category", "section")
    label_fallback: str = "b"
    detail_keywords: tuple[str, ...] = ("detail",)
    detail_fallback: str = "c"
    long_label_threshold: int = 100

    def keywords_for(self, role: ColumnRole) -> tuple[str, ...]:
        if role is ColumnRole.LABEL:
            return self.label_keywords
        return self.detail_keywords

    def fallback_for(self, role: ColumnRole) -> str:
        if role is ColumnRole.LABEL:
            return self.label_fallback
        return self.detail_fallback


@dataclass(frozen=True)
class ColumnResolution:
    headers: list[str]
    label_index: int
    detail_index: int | None

    @property
    def required_width(self) -> int:
        """Field count needed to index every resolved column."""
        indices = [self.label_index]
        if self.detail_index is not None:
            indices.append(self.detail_index)
        return max(indices) + 1


def clean_header(value: str) -> str:
    return value.strip().strip('"').strip()


def resolve_column(
    headers: list[str], role: ColumnRole, config: ColumnConfig = ColumnConfig()
) -> int | None:
    """Return the index of the first header matching ``role``, or None."""
    keywords = [k.lower() for k in config.keywords_for(role)]
    fallback = config.fallback_for(role).lower()

    for index, header in enumerate(headers):
        name = header.lower()
        if not name:
            continue
        if any(keyword in name for keyword in keywords) or name == fallback:
            return index
    return None


def resolve_columns(
    header_row: RawRow, config: ColumnConfig = ColumnConfig()
) -> ColumnResolution:
    headers = [clean_header(value) for value in header_row]

    label_index = resolve_column(headers, ColumnRole.LABEL, config)
    if label_index is None:
        logger.error("Label column not found. Available headers: %s", headers)
        raise MissingRequiredColumn(ColumnRole.LABEL.value, headers)

    detail_index = resolve_column(headers, ColumnRole.DETAIL, config)
    if detail_index is None:
        logger.warning(
            "Detail column not found, details will be empty. Available headers: %s",
            headers,
        )

    logger.debug(
        "Resolved columns: label=%d (%r), detail=%s",
        label_index,
        headers[label_index],
        detail_index,
    )
    return ColumnResolution(
        headers=headers, label_index=label_index, detail_index=detail_index
    )
