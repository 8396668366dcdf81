"""Tests for single-pass item filtering."""

from __future__ import annotations

from tests.fakes.records import raw_item
from todogist.contracts.task import ROOT_SECTION, ParsedContent
from todogist.core.items import (
    filter_items,
    format_item,
    is_category_item,
    is_ignored_item,
    order_parents_first,
)


def _ids(tasks: list) -> list[int]:
    return [task.id for task in tasks]


class TestMarkers:
    def test_ignore_mark_optionally_followed_by_colon(self) -> None:
        assert is_ignored_item("Old stuff ✖")
        assert is_ignored_item("Old heading ✖:")
        assert not is_ignored_item("✖ leading mark")

    def test_category_mark(self) -> None:
        assert is_category_item("Groceries:")
        assert not is_category_item("Buy: milk")

    def test_markers_do_not_match_before_a_trailing_newline(self) -> None:
        assert not is_ignored_item("Notes ✖\n")
        assert not is_category_item("Groceries:\n")


class TestFilterItems:
    def test_ignored_item_and_its_children_are_dropped(self) -> None:
        items = [
            raw_item(1, "A"),
            raw_item(2, "B ✖", parent_id=1),
            raw_item(3, "C", parent_id=2),
            raw_item(4, "D"),
        ]

        tasks, category_ids = filter_items(items)

        assert _ids(tasks) == [1, 4]
        assert category_ids == []

    def test_trailing_newline_content_is_kept_as_plain_task(self) -> None:
        items = [raw_item(1, "Groceries:\n"), raw_item(2, "Notes ✖\n"), raw_item(3, "Milk", parent_id=2)]

        tasks, category_ids = filter_items(items)

        assert _ids(tasks) == [1, 2, 3]
        assert category_ids == []

    def test_unknown_section_is_dropped(self) -> None:
        items = [raw_item(1, "in root"), raw_item(2, "in section 9", section_id=9)]

        tasks, _ = filter_items(items, {None: ROOT_SECTION, 5: ParsedContent(text="Five")})

        assert _ids(tasks) == [1]

    def test_default_section_map_is_root_only(self) -> None:
        items = [raw_item(1, "root"), raw_item(2, "sectioned", section_id=5)]

        tasks, _ = filter_items(items)

        assert _ids(tasks) == [1]

    def test_category_is_recorded_but_not_emitted(self) -> None:
        items = [
            raw_item(1, "Groceries:"),
            raw_item(2, "Milk", parent_id=1),
            raw_item(3, "Eggs", parent_id=1),
        ]

        tasks, category_ids = filter_items(items)

        assert _ids(tasks) == [2, 3]
        assert category_ids == [1]
        assert not set(category_ids) & set(_ids(tasks))

    def test_ignored_category_is_not_recorded(self) -> None:
        items = [raw_item(1, "Old ✖:"), raw_item(2, "Child", parent_id=1)]

        tasks, category_ids = filter_items(items)

        assert tasks == []
        assert category_ids == []

    def test_category_under_skipped_parent_carries_the_skip(self) -> None:
        items = [
            raw_item(1, "Hidden ✖"),
            raw_item(2, "Sub heading:", parent_id=1),
            raw_item(3, "Deep task", parent_id=2),
            raw_item(4, "Visible"),
        ]

        tasks, category_ids = filter_items(items)

        assert _ids(tasks) == [4]
        assert category_ids == [2]

    def test_sibling_after_skipped_subtree_resets_skip(self) -> None:
        items = [
            raw_item(1, "Parent"),
            raw_item(2, "Hidden ✖", parent_id=1),
            raw_item(3, "Hidden child", parent_id=2),
            raw_item(4, "Sibling", parent_id=1),
            raw_item(5, "Sibling child", parent_id=4),
        ]

        tasks, _ = filter_items(items)

        assert _ids(tasks) == [1, 4, 5]

    def test_only_direct_children_of_ignored_item_are_skipped(self) -> None:
        # A single skip region is tracked: the grandchild below a regular
        # child of an ignored item is emitted.
        items = [
            raw_item(1, "Hidden ✖"),
            raw_item(2, "Child", parent_id=1),
            raw_item(3, "Grandchild", parent_id=2),
        ]

        tasks, _ = filter_items(items)

        assert _ids(tasks) == [3]

    def test_children_reached_out_of_order_are_not_skipped(self) -> None:
        items = [
            raw_item(1, "Hidden ✖"),
            raw_item(2, "Unrelated"),
            raw_item(3, "Late child", parent_id=1),
        ]

        tasks, _ = filter_items(items)
        reordered, _ = filter_items(items, reorder=True)

        assert _ids(tasks) == [2, 3]
        assert _ids(reordered) == [2]

    def test_root_items_are_not_confused_with_the_no_skip_state(self) -> None:
        tasks, _ = filter_items([raw_item(1, "A"), raw_item(2, "B")])

        assert _ids(tasks) == [1, 2]


class TestFormatItem:
    def test_task_fields(self) -> None:
        task = format_item(
            raw_item(
                7,
                "{Music} Song - YouTube",
                parent_id=3,
                section_id=4,
                checked=True,
                date_added="2021-03-09T08:00:00Z",
                priority=4,
            )
        )

        assert task.model_dump(by_alias=True) == {
            "id": 7,
            "parentId": 3,
            "sectionId": 4,
            "checked": True,
            "dateAdded": "March 9, 2021",
            "priority": 4,
            "content": {"text": "Song", "tag": "music"},
        }


class TestOrderParentsFirst:
    def test_identity_on_depth_first_input(self) -> None:
        items = [
            raw_item(1),
            raw_item(2, parent_id=1),
            raw_item(3, parent_id=2),
            raw_item(4),
        ]

        assert order_parents_first(items) == items

    def test_moves_children_under_their_parent(self) -> None:
        items = [
            raw_item(3, parent_id=2),
            raw_item(1),
            raw_item(4),
            raw_item(2, parent_id=1),
        ]

        assert [item.id for item in order_parents_first(items)] == [1, 2, 3, 4]

    def test_missing_parent_makes_item_a_root(self) -> None:
        items = [raw_item(5, parent_id=99), raw_item(6, parent_id=5)]

        assert [item.id for item in order_parents_first(items)] == [5, 6]

    def test_parent_cycle_is_kept_in_input_order(self) -> None:
        items = [raw_item(1, parent_id=2), raw_item(2, parent_id=1), raw_item(3)]

        assert [item.id for item in order_parents_first(items)] == [3, 1, 2]
