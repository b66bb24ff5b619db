import pytest

from sheet_outline.hierarchy.builder import build, build_with_report
from sheet_outline.hierarchy.models import Hierarchy, Item, Section
from sheet_outline.parsers.entries import Entry


def _entries(*pairs: tuple[str, str]) -> list[Entry]:
    return [
        Entry(label=label, detail=detail, row_number=n)
        for n, (label, detail) in enumerate(pairs, start=2)
    ]


class TestBuild:
    def test_section_with_item(self) -> None:
        hierarchy = build(_entries(("Intro", "Welcome, friend"), ("-Sub", "More info")))

        assert list(hierarchy) == ["Intro"]
        assert hierarchy["Intro"] == Section(
            title="Intro",
            detail="Welcome, friend",
            items=(Item(name="Sub", detail="More info"),),
        )

    def test_sections_keep_first_seen_order(self) -> None:
        hierarchy = build(_entries(("B", "1"), ("A", "2"), ("C", "3")))

        assert list(hierarchy) == ["B", "A", "C"]

    def test_items_attach_to_most_recent_section(self) -> None:
        hierarchy = build(
            _entries(("A", "a"), ("-one", "1"), ("B", "b"), ("-two", "2"), ("-three", "3"))
        )

        assert [i.name for i in hierarchy["A"].items] == ["one"]
        assert [i.name for i in hierarchy["B"].items] == ["two", "three"]

    def test_empty_detail_defaults_to_wip(self) -> None:
        hierarchy = build(_entries(("Intro", ""), ("-Sub", "")))

        assert hierarchy["Intro"].detail == "WIP"
        assert hierarchy["Intro"].items[0].detail == "WIP"

    def test_item_name_strips_one_marker_and_whitespace(self) -> None:
        hierarchy = build(_entries(("Intro", "x"), ("-  Sub  ", "y"), ("--Dash", "z")))

        assert [i.name for i in hierarchy["Intro"].items] == ["Sub", "-Dash"]

    def test_duplicate_title_replaces_earlier_section(self) -> None:
        """A repeated title keeps only the later section, losing earlier items."""
        hierarchy = build(
            _entries(("Foo", "first"), ("-Old", "x"), ("Bar", "b"), ("Foo", "second"))
        )

        assert list(hierarchy) == ["Foo", "Bar"]
        assert hierarchy["Foo"] == Section(title="Foo", detail="second", items=())

    def test_orphan_item_is_dropped(self) -> None:
        hierarchy = build(_entries(("-Orphan", "x"), ("Intro", "y")))

        assert list(hierarchy) == ["Intro"]
        assert all(
            item.name != "Orphan"
            for section in hierarchy.values()
            for item in section.items
        )

    def test_marker_only_label_is_dropped(self) -> None:
        hierarchy = build(_entries(("Intro", "x"), ("-", "y"), ("-   ", "z")))

        assert hierarchy["Intro"].items == ()

    def test_empty_input_gives_empty_hierarchy(self) -> None:
        assert len(build([])) == 0

    def test_titles_never_start_with_marker(self) -> None:
        hierarchy = build(
            _entries(("-a", "1"), ("A", "2"), ("-b", "3"), ("-", "4"), ("B", "5"))
        )

        assert all(title and not title.startswith("-") for title in hierarchy)


class TestBuildReport:
    def test_counts_dropped_and_overwritten_rows(self) -> None:
        _, report = build_with_report(
            _entries(
                ("-Orphan", "x"),
                ("Foo", "1"),
                ("-", "y"),
                ("-Kept", "z"),
                ("Foo", "2"),
            )
        )

        assert report.orphan_items == ["Orphan"]
        assert report.empty_items == 1
        assert report.dropped == 2
        assert report.overwritten_titles == ["Foo"]
        assert report.sections == 1
        assert report.items == 0

    def test_orphan_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            build_with_report(_entries(("-Orphan", "x")))

        assert "no section before it" in caplog.text


class TestHierarchy:
    def test_is_read_only_mapping(self) -> None:
        hierarchy = Hierarchy([Section(title="A", detail="a")])

        with pytest.raises(TypeError):
            hierarchy["B"] = Section(title="B", detail="b")  # type: ignore

    def test_sections_are_frozen(self) -> None:
        section = Section(title="A", detail="a")

        with pytest.raises(AttributeError):
            section.title = "B"  # type: ignore

    def test_to_dict(self) -> None:
        hierarchy = Hierarchy(
            [Section(title="A", detail="a", items=(Item(name="x", detail="1"),))]
        )

        assert hierarchy.to_dict() == {
            "A": {"detail": "a", "items": [{"name": "x", "detail": "1"}]}
        }

    def test_equal_content_compares_equal(self) -> None:
        first = Hierarchy([Section(title="A", detail="a")])
        second = Hierarchy([Section(title="A", detail="a")])

        assert first == second
