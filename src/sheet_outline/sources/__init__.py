from .config import SheetConfig
from .sheet_client import SheetClient

__all__ = [
    "SheetClient",
    "SheetConfig",
]
