"""Tests for identifier casing and escaping."""

from iopc_rust.generator.util import (
    FieldCase,
    const_name,
    escape_identifier,
    field_name,
    to_camel_case,
    to_lower_camel_case,
    to_snake_case,
    to_upper_snake_case,
    variant_name,
)


def describe_to_snake_case():
    def converts_camel_case(expect):
        expect(to_snake_case("fooBar")) == "foo_bar"
        expect(to_snake_case("fooBarBaz")) == "foo_bar_baz"

    def lowers_a_leading_capital(expect):
        expect(to_snake_case("FooBar")) == "foo_bar"

    def keeps_lower_case_names(expect):
        expect(to_snake_case("x")) == "x"
        expect(to_snake_case("foo_bar")) == "foo_bar"

    def does_not_double_underscores(expect):
        expect(to_snake_case("foo_Bar")) == "foo_bar"

    def copies_non_ascii_characters(expect):
        expect(to_snake_case("étéFoo")) == "été_foo"
        expect(to_snake_case("Ñandú")) == "Ñandú"


def describe_to_camel_case():
    def upper_cases_the_first_letter(expect):
        expect(to_camel_case("getUser")) == "GetUser"

    def joins_snake_case_words(expect):
        expect(to_camel_case("get_user_name")) == "GetUserName"

    def lower_camel_case(expect):
        expect(to_lower_camel_case("get_user")) == "getUser"
        expect(to_lower_camel_case("GetUser")) == "getUser"

    def handles_empty_names(expect):
        expect(to_camel_case("")) == ""


def describe_to_upper_snake_case():
    def converts_camel_case(expect):
        expect(to_upper_snake_case("maxRetryCount")) == "MAX_RETRY_COUNT"

    def only_maps_ascii(expect):
        expect(to_upper_snake_case("étéA")) == "éTé_A"


def describe_escape_identifier():
    def escapes_reserved_words(expect):
        expect(escape_identifier("type")) == "r#type"
        expect(escape_identifier("module")) == "r#module"
        expect(escape_identifier("match")) == "r#match"

    def keeps_other_names(expect):
        expect(escape_identifier("name")) == "name"
        expect(escape_identifier("Type")) == "Type"

    def suffixes_names_that_cannot_be_raw(expect):
        expect(escape_identifier("self")) == "self_"
        expect(escape_identifier("Self")) == "Self_"
        expect(escape_identifier("crate")) == "crate_"


def describe_identifiers():
    def field_names_are_snake_case_and_escaped(expect):
        expect(field_name("userId")) == "user_id"
        expect(field_name("type")) == "r#type"

    def field_names_can_be_camel_case(expect):
        expect(field_name("user_id", FieldCase.CAMEL)) == "userId"
        expect(field_name("type", FieldCase.CAMEL)) == "r#type"

    def variant_names_are_camel_case(expect):
        expect(variant_name("intValue")) == "IntValue"
        expect(variant_name("self")) == "Self_"

    def const_names_are_upper_snake_case(expect):
        expect(const_name("fooBar")) == "FOO_BAR"
