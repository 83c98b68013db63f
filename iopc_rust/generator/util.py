"""Identifier casing and reserved-word escaping.

Only ASCII letters are case-mapped. Any other character is copied through
unchanged, Rust accepting Unicode identifiers.
"""

from enum import StrEnum
from typing import assert_never

# Rust strict and reserved keywords that may be used as raw identifiers.
RESERVED_NAMES = frozenset(
    [
        "abstract",
        "as",
        "async",
        "await",
        "become",
        "box",
        "break",
        "const",
        "continue",
        "do",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "final",
        "fn",
        "for",
        "gen",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "macro",
        "match",
        "mod",
        "module",
        "move",
        "mut",
        "override",
        "priv",
        "pub",
        "ref",
        "return",
        "static",
        "struct",
        "trait",
        "true",
        "try",
        "type",
        "typeof",
        "unsafe",
        "unsized",
        "use",
        "virtual",
        "where",
        "while",
        "yield",
    ]
)

# Keywords rustc refuses as raw identifiers.
NON_RAW_NAMES = frozenset(["crate", "self", "Self", "super"])

RAW_PREFIX = "r#"


class FieldCase(StrEnum):
    """Casing applied to struct field names."""

    SNAKE = "snake"
    CAMEL = "camel"


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _ascii_upper(c: str) -> str:
    return chr(ord(c) - 32) if "a" <= c <= "z" else c


def _ascii_lower(c: str) -> str:
    return chr(ord(c) + 32) if _is_ascii_upper(c) else c


def to_snake_case(name: str) -> str:
    """Convert a camelCase schema name to snake_case (`fooBar` -> `foo_bar`)."""
    out: list[str] = []
    for i, c in enumerate(name):
        if _is_ascii_upper(c):
            if i > 0 and out[-1] != "_":
                out.append("_")
            out.append(_ascii_lower(c))
        else:
            out.append(c)
    return "".join(out)


def to_camel_case(name: str) -> str:
    """Convert a schema name to UpperCamelCase (`fooBar` -> `FooBar`)."""
    words = [w for w in name.split("_") if w]
    return "".join(_ascii_upper(w[0]) + w[1:] for w in words)


def to_lower_camel_case(name: str) -> str:
    """Convert a schema name to lowerCamelCase (`foo_bar` -> `fooBar`)."""
    camel = to_camel_case(name)
    return _ascii_lower(camel[:1]) + camel[1:]


def to_upper_snake_case(name: str) -> str:
    """Convert a schema name to UPPER_SNAKE_CASE (`fooBar` -> `FOO_BAR`)."""
    return "".join(_ascii_upper(c) for c in to_snake_case(name))


def escape_identifier(ident: str) -> str:
    """Escape an identifier colliding with a Rust keyword."""
    if ident in NON_RAW_NAMES:
        return ident + "_"
    if ident in RESERVED_NAMES:
        return RAW_PREFIX + ident
    return ident


def field_name(name: str, case: FieldCase = FieldCase.SNAKE) -> str:
    """Identifier of a struct member."""
    match case:
        case FieldCase.SNAKE:
            ident = to_snake_case(name)
        case FieldCase.CAMEL:
            ident = to_lower_camel_case(name)
        case _:
            assert_never(case)
    return escape_identifier(ident)


def variant_name(name: str) -> str:
    """Identifier of a union variant."""
    return escape_identifier(to_camel_case(name))


def const_name(name: str) -> str:
    """Identifier of a module tag constant."""
    return escape_identifier(to_upper_snake_case(name))
