# src/sheet_outline/settings.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

from sheet_outline.parsers.columns import ColumnConfig
from sheet_outline.sources.config import SheetConfig

logger = logging.getLogger(__name__)


class ColumnSettings(BaseModel):
    label_keywords: list[str] = ["category", "section"]
    label_fallback: str = "b"
    detail_keywords: list[str] = ["detail"]
    detail_fallback: str = "c"
    long_label_threshold: int = 100

    class Config:
        extra = "forbid"


class OutlineSettings(BaseModel):
    """File-based settings for an outline deployment."""

    url: str
    timeout: float = 30.0
    max_retries: int = 3
    columns: ColumnSettings = ColumnSettings()

    class Config:
        extra = "forbid"

    def sheet_config(self) -> SheetConfig:
        return SheetConfig(
            url=self.url, timeout=self.timeout, max_retries=self.max_retries
        )

    def column_config(self) -> ColumnConfig:
        return ColumnConfig(
            label_keywords=tuple(self.columns.label_keywords),
            label_fallback=self.columns.label_fallback,
            detail_keywords=tuple(self.columns.detail_keywords),
            detail_fallback=self.columns.detail_fallback,
            long_label_threshold=self.columns.long_label_threshold,
        )


def load_settings(path: str | Path) -> OutlineSettings:
    logger.info("Loading outline settings from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    return OutlineSettings.model_validate(data)
