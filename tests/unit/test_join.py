"""Unit tests for segment joining."""

import pytest

from urlbat.join import join_segments


SAMPLES = ["a", "/a", "a/", "/a/", "http://example.com", "/", "//", "x//y"]


class TestJoinSegments:
    """Test join_segments."""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_empty_side_is_identity(self, value):
        assert join_segments(value, "") == value
        assert join_segments("", value) == value

    def test_both_empty(self):
        assert join_segments("", "") == ""

    @pytest.mark.parametrize("base, path", [("a", "b"), ("http://x.com", "p/q"), ("/a", "b/")])
    def test_plain_sides_joined_with_slash(self, base, path):
        assert join_segments(base, path) == f"{base}/{path}"

    @pytest.mark.parametrize("base", ["a/", "http://x.com/", "/a/"])
    @pytest.mark.parametrize("path", ["b", "/b", "//b"])
    def test_trailing_slash_on_base_is_ignored(self, base, path):
        assert join_segments(base, path) == join_segments(base[:-1], path)

    def test_only_one_slash_stripped_from_each_side(self):
        assert join_segments("a//", "//b") == "a///b"

    def test_lone_slash_path(self):
        assert join_segments("yep", "/") == "yep/"
        assert join_segments("yep/", "/") == "yep/"

    def test_lone_slash_base(self):
        assert join_segments("/", "path") == "/path"
        assert join_segments("/", "/") == "/"
