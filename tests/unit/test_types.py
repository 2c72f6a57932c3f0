"""Unit tests for parameter value types."""

import copy
import pickle

from urlbat.types import UNDEFINED, Missing, Null, Value, lookup


class TestUndefined:
    """Test the UNDEFINED sentinel."""

    def test_singleton(self):
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED

    def test_falsy_and_repr(self):
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"


class TestLookup:
    """Test lookup classification."""

    def test_missing(self):
        assert lookup({}, "a") == Missing()

    def test_null(self):
        assert lookup({"a": None}, "a") == Null()
        assert lookup({"a": UNDEFINED}, "a") == Null()

    def test_value(self):
        assert lookup({"a": 0}, "a") == Value(0)
        assert lookup({"a": False}, "a") == Value(False)
        assert lookup({"a": ""}, "a") == Value("")
