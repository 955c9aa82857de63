"""Tests for the naming module."""

import pytest

from pbhttp.errors import InvalidInputError
from pbhttp.naming import (
    add_word_boundaries,
    method_name,
    normalize,
    output_file_name,
    project_file_name,
    to_camel,
    to_lower_camel,
)


class TestAddWordBoundaries:
    """Test digit-run boundary insertion."""

    def test_digit_between_letters(self):
        assert add_word_boundaries("bar2baz") == "bar 2 baz"

    def test_trailing_digits(self):
        assert add_word_boundaries("v10") == "v 10 "

    def test_leading_digits_untouched(self):
        assert add_word_boundaries("2fa") == "2fa"

    def test_matches_do_not_overlap(self):
        assert add_word_boundaries("a1b2c") == "a 1 b2c"


class TestNormalize:
    """Test separator-delimited text -> camel/Pascal case."""

    def test_underscore_pascal(self):
        assert normalize("foo_bar", True) == "FooBar"

    def test_underscore_camel(self):
        assert normalize("foo_bar", False) == "fooBar"

    def test_digit_run_boundary(self):
        assert normalize("foo-bar2baz", True) == "FooBar2Baz"
        assert normalize("foo-bar2baz", False) == "fooBar2Baz"

    def test_spaces(self):
        assert normalize("hello big world", True) == "HelloBigWorld"

    def test_uppercase_passes_through(self):
        assert normalize("getHTTPStatus", True) == "GetHTTPStatus"

    def test_uppercase_does_not_capitalize_next(self):
        assert normalize("Ab", False) == "Ab"
        assert normalize("ABc", True) == "ABc"

    def test_leading_and_trailing_separators_trimmed(self):
        assert normalize("_foo_", False) == "foo"
        assert normalize("-foo bar-", True) == "FooBar"

    def test_repeated_separators(self):
        assert normalize("foo__bar", False) == "fooBar"

    def test_other_characters_dropped(self):
        assert normalize("foo.bar", True) == "Foobar"

    def test_trailing_digits(self):
        assert normalize("v2", True) == "V2"

    def test_empty(self):
        assert normalize("", True) == ""

    def test_helpers(self):
        assert to_camel("user_service") == "UserService"
        assert to_lower_camel("user_service") == "userService"


class TestMethodName:
    """Test client method naming from RPC names."""

    def test_literal_lowercases_first_char_only(self):
        assert method_name("GetUser") == "getUser"

    def test_literal_keeps_remainder(self):
        assert method_name("Get_user_v2") == "get_user_v2"
        assert method_name("ListHTTPRoutes") == "listHTTPRoutes"

    def test_camel_style_normalizes(self):
        assert method_name("Get_user_v2", "camel") == "getUserV2"

    def test_camel_style_on_plain_name(self):
        assert method_name("GetUser", "camel") == "getUser"

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidInputError):
            method_name("")

    def test_unknown_style_rejected(self):
        with pytest.raises(InvalidInputError):
            method_name("GetUser", "snake")


class TestFileNames:
    """Test output file naming."""

    def test_project_file_name(self):
        assert project_file_name("my-cool-app") == "my_cool_app"

    def test_output_file_name(self):
        assert output_file_name("user.proto", "dart") == "user.pb.http.dart"

    def test_output_file_name_replaces_hyphens(self):
        assert output_file_name("user-service.proto", "dart") == "user_service.pb.http.dart"

    def test_output_file_name_keeps_directories(self):
        assert output_file_name("api/v1/user.proto", "dart") == "api/v1/user.pb.http.dart"

    def test_output_file_name_without_extension(self):
        assert output_file_name("user", "dart") == "user.pb.http.dart"

    def test_output_file_name_leading_dot_is_extension(self):
        assert output_file_name(".proto", "dart") == ".pb.http.dart"
        assert output_file_name("api/.proto", "dart") == "api/.pb.http.dart"

    def test_output_file_name_ignores_dots_in_directories(self):
        assert output_file_name("v1.2/user", "dart") == "v1.2/user.pb.http.dart"
        assert output_file_name("v1.2/user.proto", "dart") == "v1.2/user.pb.http.dart"
