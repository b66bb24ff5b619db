# src/sheet_outline/hierarchy/models.py

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

MARKER = "-"
PLACEHOLDER_DETAIL = "WIP"


@dataclass(frozen=True)
class Item:
    """A sub-item listed under a Section."""

    name: str
    detail: str


@dataclass(frozen=True)
class Section:
    """A top-level node of the outline.

    Immutable. Items keep their source order.
    """

    title: str
    detail: str
    items: tuple[Item, ...] = ()


class Hierarchy(Mapping[str, Section]):
    """Ordered, read-only mapping from Section title to Section.

    Iteration order is the order titles were first seen. A later Section
    with the same title replaces the earlier one in place.
    """

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self._sections: dict[str, Section] = {}
        for section in sections:
            self._sections[section.title] = section

    def __getitem__(self, title: str) -> Section:
        return self._sections[title]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"Hierarchy({list(self._sections.values())!r})"

    def sections(self) -> list[Section]:
        return list(self._sections.values())

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-ready structure for the presentation layer."""
        return {
            title: {
                "detail": section.detail,
                "items": [
                    {"name": item.name, "detail": item.detail}
                    for item in section.items
                ],
            }
            for title, section in self._sections.items()
        }
