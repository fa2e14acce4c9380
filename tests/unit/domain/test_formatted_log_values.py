"""
Unit tests for FormattedLogValues.
"""

import copy
import pickle

from log_bridge.domain.services import ORIGINAL_FORMAT_KEY
from log_bridge.domain.values import FormattedLogValues


class TestFormattedLogValues:
    """Tests for positional binding and rendering."""

    def test_pairs_end_with_original_format(self):
        values = FormattedLogValues("User {UserId} logged in", 42)
        assert list(values) == [("UserId", 42), (ORIGINAL_FORMAT_KEY, "User {UserId} logged in")]

    def test_str_renders(self):
        assert str(FormattedLogValues("{A} + {B}", 1, 2)) == "1 + 2"

    def test_surplus_arguments_ignored(self):
        values = FormattedLogValues("Only {A}", 1, 2, 3)
        assert list(values)[:-1] == [("A", 1)]

    def test_missing_arguments_leave_placeholder(self):
        values = FormattedLogValues("{A} and {B}", 1)

        assert list(values)[:-1] == [("A", 1)]
        assert str(values) == "1 and {B}"

    def test_no_placeholders(self):
        values = FormattedLogValues("Started")

        assert list(values) == [(ORIGINAL_FORMAT_KEY, "Started")]
        assert str(values) == "Started"


class TestFormattedLogValuesCopying:
    """Copies and pickles rebuild the same pairs and template."""

    def assert_same(self, original, restored):
        assert type(restored) is FormattedLogValues
        assert list(restored) == list(original)
        assert restored.template == original.template
        assert restored.args == original.args
        assert str(restored) == str(original)

    def test_copy(self):
        values = FormattedLogValues("User {UserId}", 1)
        self.assert_same(values, copy.copy(values))

    def test_deepcopy(self):
        values = FormattedLogValues("User {UserId} tags {Tags}", 1, ["a", "b"])
        restored = copy.deepcopy(values)

        self.assert_same(values, restored)
        assert restored[1][1] is not values[1][1]

    def test_pickle_round_trip_keeps_surplus_arguments(self):
        values = FormattedLogValues("Only {A}", 1, 2)
        self.assert_same(values, pickle.loads(pickle.dumps(values)))
