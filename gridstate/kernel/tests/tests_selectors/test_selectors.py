"""
gridstate Selectors -- Tests

Fixture rows (conftest.PEOPLE):
  1 Ada      London     36
  2 Grace    New York   45
  3 Linus    Helsinki   21
  4 Barbara  Boston     None

Covers:
  - visible_columns honours visibility and order
  - filtered_data for string / mapping / empty filters
  - sorted_data single and multi column, None last
  - max_page and current_page_data
"""

from gridstate.kernel import actions
from gridstate.kernel.reducer import reduce
from gridstate.kernel.selectors import (
    current_page_data,
    filtered_data,
    max_page,
    sorted_data,
    visible_columns,
)


def names(rows):
    return [row["name"] for row in rows]


# ============================================================================
# 1. visible_columns
# ============================================================================


class TestVisibleColumns:
    def test_all_detected_columns_visible(self, people_state):
        assert visible_columns(people_state) == ["id", "name", "city", "age"]

    def test_hidden_column_dropped(self, people_state):
        state = reduce(people_state, actions.toggle_column("city"))
        assert visible_columns(state) == ["id", "name", "age"]

    def test_order_property_wins(self):
        state = {"renderProperties": {"columnProperties": {
            "b": {"id": "b", "order": 2},
            "a": {"id": "a", "order": 1},
            "c": {"id": "c"},
        }}}
        assert visible_columns(state) == ["a", "b", "c"]

    def test_no_columns(self):
        assert visible_columns({}) == []


# ============================================================================
# 2. filtered_data
# ============================================================================


class TestFilteredData:
    def test_no_filter_keeps_all(self, people_state):
        assert len(filtered_data(people_state)) == 4

    def test_string_filter_any_cell(self, people_state):
        state = reduce(people_state, actions.set_filter("ON"))
        assert names(filtered_data(state)) == ["Ada", "Barbara"]

    def test_string_filter_matches_numbers(self, people_state):
        state = reduce(people_state, actions.set_filter("45"))
        assert names(filtered_data(state)) == ["Grace"]

    def test_row_tag_not_searched(self, people_state):
        # griddleKey 0..3 must not match; no visible cell contains "0"
        state = reduce(people_state, actions.set_filter("0"))
        assert filtered_data(state) == []

    def test_mapping_filter_per_column(self, people_state):
        state = reduce(people_state, actions.set_filter({"city": "bo"}))
        assert names(filtered_data(state)) == ["Barbara"]

    def test_mapping_filter_all_columns_must_match(self, people_state):
        state = reduce(people_state, actions.set_filter({"city": "o", "name": "a"}))
        assert names(filtered_data(state)) == ["Ada", "Grace", "Barbara"]

    def test_mapping_filter_blank_values_ignored(self, people_state):
        state = reduce(people_state, actions.set_filter({"city": "", "name": None}))
        assert len(filtered_data(state)) == 4


# ============================================================================
# 3. sorted_data
# ============================================================================


class TestSortedData:
    def test_unsorted_keeps_order(self, people_state):
        assert names(sorted_data(people_state)) == ["Ada", "Grace", "Linus", "Barbara"]

    def test_ascending(self, people_state):
        state = reduce(people_state, actions.set_sort({"id": "city", "sortAscending": True}))
        assert names(sorted_data(state)) == ["Barbara", "Linus", "Ada", "Grace"]

    def test_descending_none_last(self, people_state):
        state = reduce(people_state, actions.set_sort({"id": "age", "sortAscending": False}))
        assert names(sorted_data(state)) == ["Grace", "Ada", "Linus", "Barbara"]

    def test_ascending_none_last(self, people_state):
        state = reduce(people_state, actions.set_sort({"id": "age", "sortAscending": True}))
        assert names(sorted_data(state)) == ["Linus", "Ada", "Grace", "Barbara"]

    def test_multi_column_primary_first(self):
        state = {
            "data": [
                {"team": "b", "score": 1},
                {"team": "a", "score": 1},
                {"team": "a", "score": 3},
            ],
            "sortProperties": [
                {"id": "team", "sortAscending": True},
                {"id": "score", "sortAscending": False},
            ],
        }
        assert sorted_data(state) == [
            {"team": "a", "score": 3},
            {"team": "a", "score": 1},
            {"team": "b", "score": 1},
        ]

    def test_mixed_types_do_not_raise(self):
        state = {
            "data": [{"v": "x"}, {"v": 2}, {"v": True}],
            "sortProperties": [{"id": "v", "sortAscending": True}],
        }
        assert sorted_data(state) == [{"v": True}, {"v": 2}, {"v": "x"}]

    def test_explicit_rows(self, people_state):
        state = reduce(people_state, actions.set_sort({"id": "name", "sortAscending": True}))
        rows = people_state["data"][:2]
        assert names(sorted_data(state, rows)) == ["Ada", "Grace"]


# ============================================================================
# 4. Paging
# ============================================================================


class TestPaging:
    def test_max_page(self, people_state):
        assert max_page(people_state) == 2

    def test_max_page_after_filter(self, people_state):
        state = reduce(people_state, actions.set_filter("on"))
        assert max_page(state) == 1

    def test_max_page_no_rows(self):
        assert max_page({"data": [], "pageProperties": {"pageSize": 5}}) == 0

    def test_first_page(self, people_state):
        assert names(current_page_data(people_state)) == ["Ada", "Grace"]

    def test_second_page(self, people_state):
        state = reduce(people_state, actions.set_page(2))
        assert names(current_page_data(state)) == ["Linus", "Barbara"]

    def test_page_after_sort_and_filter(self, people_state):
        state = reduce(people_state, actions.set_filter({"city": "n"}))
        state = reduce(state, actions.set_sort({"id": "age", "sortAscending": True}))
        # London, New York, Helsinki, Boston all contain "n"
        assert names(current_page_data(state)) == ["Linus", "Ada"]

    def test_page_past_end_is_empty(self, people_state):
        state = reduce(people_state, actions.set_page(9))
        assert current_page_data(state) == []
