# src/sheet_outline/sources/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class SheetConfig:
    """Where to fetch the published sheet export from.

    Immutable. Explicit. No magic defaults from environment.
    """

    url: str
    timeout: float = 30.0
    max_retries: int = 3
