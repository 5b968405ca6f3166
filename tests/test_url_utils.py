"""
Unit tests for path/query encoding and URL building (no server required).
Run: pytest tests/test_url_utils.py -v
"""

import pytest

from reqlayer.url_utils import build_url, encode_path, encode_query, qpart


class TestQpart:
    def test_slash_is_escaped(self):
        assert qpart("d/e") == "d%2Fe"

    def test_space_is_percent_twenty(self):
        assert qpart("b c") == "b%20c"

    def test_unreserved_marks_kept(self):
        assert qpart("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"

    def test_unicode(self):
        assert qpart("é") == "%C3%A9"

    def test_scalars(self):
        assert qpart(1) == "1"
        assert qpart(2.0) == "2"
        assert qpart(True) == "true"
        assert qpart(None) == "null"

    def test_list_is_comma_joined(self):
        assert qpart(["x", "y"]) == "x%2Cy"


class TestEncodePath:
    @pytest.mark.parametrize("path", ["", "users", "a/b c?x=1", "/already/encoded%20"])
    def test_strings_pass_through(self, path):
        assert encode_path(path) == path

    def test_none_passes_through(self):
        assert encode_path(None) is None

    def test_empty_list(self):
        assert encode_path([]) == ""

    def test_nested_segments_are_encoded(self):
        assert encode_path(["a", ["b c", "d/e"]]) == "a/b%20c/d%2Fe"

    def test_top_level_strings_not_encoded(self):
        assert encode_path(["a", "b"]) == "a/b"
        assert encode_path(["a b", "c/d"]) == "a b/c/d"

    def test_numbers_in_nested_segment(self):
        assert encode_path(["users", [1]]) == "users/1"

    def test_mixed_entries(self):
        assert encode_path([["x y"], "raw", ["z"]]) == "x%20y/raw/z"

    def test_no_trailing_slash(self):
        assert not encode_path(["a", ["b"]]).endswith("/")

    def test_tuple_works_like_list(self):
        assert encode_path(("a", ("b c",))) == "a/b%20c"


class TestEncodeQuery:
    @pytest.mark.parametrize("query", [{}, None, [1, 2], "a=1", 5, ("a", 1)])
    def test_absent(self, query):
        assert encode_query(query) is None

    def test_scalars_in_order(self):
        assert encode_query({"a": 1, "b": "x y"}) == "a=1&b=x%20y"

    def test_insertion_order_preserved(self):
        assert encode_query({"z": 1, "a": 2}) == "z=1&a=2"

    def test_list_values(self):
        assert encode_query({"a": [1, 2]}) == "a%5B%5D=1&a%5B%5D=2"

    def test_keys_and_values_encoded(self):
        assert encode_query({"a&b": "c=d"}) == "a%26b=c%3Dd"

    def test_empty_list_yields_nothing(self):
        assert encode_query({"a": []}) is None
        assert encode_query({"a": [], "b": 1}) == "b=1"

    def test_booleans_and_none(self):
        assert encode_query({"t": True, "n": None}) == "t=true&n=null"


class TestBuildUrl:
    def test_no_query(self):
        assert build_url("path", {}) == "path"
        assert build_url("path") == "path"

    def test_appends_with_question_mark(self):
        assert build_url(["a", "b"], {"q": "v"}) == "a/b?q=v"

    def test_existing_question_mark_uses_ampersand(self):
        assert build_url("path?x=1", {"y": 2}) == "path?x=1&y=2"

    def test_malformed_query_ignored(self):
        assert build_url("path", ["not", "a", "mapping"]) == "path"

    def test_none_path_without_query(self):
        assert build_url(None, {}) is None

    def test_encoded_question_mark_is_not_a_query(self):
        assert build_url([["a?b"]], {"c": 1}) == "a%3Fb?c=1"


class TestBytesValues:
    def test_bytes_quoted_directly(self):
        assert qpart(b"x y") == "x%20y"

    def test_bytes_in_query(self):
        assert encode_query({"b": b"x y", "l": [b"a/b"]}) == "b=x%20y&l%5B%5D=a%2Fb"
