# parsers/models.py

from dataclasses import dataclass, field

RawRow = list[str]


@dataclass(frozen=True)
class ParsedTable:
    header_row: RawRow
    data_rows: list[RawRow] = field(default_factory=list)
