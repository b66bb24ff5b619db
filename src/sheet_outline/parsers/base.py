# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedTable


class TableParser(ABC):
    @abstractmethod
    def parse(self, raw_text: str) -> ParsedTable:
        """
        Parse raw text into a header row and ordered data rows.

        Requirements:
        - Deterministic output for same input
        - Blank rows are never emitted
        - Raises MalformedInput when no header row can be found
        """
        raise NotImplementedError
