"""Rust literals for field default values."""

import logging
import math
from typing import Any, assert_never

from .context import EmitContext
from .errors import DefaultValueError
from .types import Field, FieldKind, Repeat

logger = logging.getLogger(__name__)

GENERIC_DEFAULT = "Default::default()"

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def rust_string_literal(value: str) -> str:
    """Quote a string as a Rust string literal."""
    out: list[str] = []
    for c in value:
        if c in _ESCAPES:
            out.append(_ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7F:
            out.append(f"\\u{{{ord(c):x}}}")
        else:
            out.append(c)
    return '"' + "".join(out) + '"'


def rust_float_literal(value: float) -> str:
    """Render a double as a Rust f64 literal."""
    if math.isnan(value):
        return "f64::NAN"
    if math.isinf(value):
        return "f64::INFINITY" if value > 0 else "f64::NEG_INFINITY"
    text = repr(float(value))
    if "." not in text and "e" not in text:
        text += ".0"
    return text


def _string_value(field: Field, value: Any) -> str:
    if isinstance(value, bytes | bytearray):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DefaultValueError(
                f"default of field {field.name} is not valid UTF-8: {e.reason}"
            ) from e
    if isinstance(value, str):
        return value
    raise DefaultValueError(f"default of field {field.name} is not a string: {value!r}")


def _int_value(field: Field, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DefaultValueError(f"default of field {field.name} is not an integer: {value!r}")
    return value


def _check_enum_default(ctx: EmitContext, field: Field) -> None:
    """Flag enum defaults that `Default::default()` does not honor."""
    ref = field.type_ref
    enum = None
    if ref is not None and ctx.is_local(ref.package):
        enum = next((e for e in ctx.package.enums if e.name == ref.name), None)

    if enum is not None and enum.values and enum.values[0].value == field.default:
        return

    message = (
        f"field {field.name}: enum default {field.default} rendered as "
        f"{GENERIC_DEFAULT}, which selects the first declared value"
    )
    logger.warning(message)


def default_literal(ctx: EmitContext, field: Field) -> str:
    """Rust expression of a field's default value."""
    if field.repeat != Repeat.DEFAULT or field.default is None:
        return GENERIC_DEFAULT

    value = field.default
    match field.kind:
        case FieldKind.I8 | FieldKind.I16 | FieldKind.I32 | FieldKind.I64:
            literal = str(_int_value(field, value))
        case FieldKind.U8 | FieldKind.U16 | FieldKind.U32 | FieldKind.U64:
            literal = str(_int_value(field, value))
        case FieldKind.BOOL:
            literal = "true" if value else "false"
        case FieldKind.DOUBLE:
            literal = rust_float_literal(value)
        case FieldKind.STRING | FieldKind.XML | FieldKind.DATA:
            literal = f"String::from({rust_string_literal(_string_value(field, value))})"
        case FieldKind.ENUM:
            # TODO: resolve the enum member matching the schema value instead
            # of the enum's own default.
            _check_enum_default(ctx, field)
            literal = GENERIC_DEFAULT
        case FieldKind.VOID | FieldKind.STRUCT | FieldKind.UNION:
            return GENERIC_DEFAULT
        case _:
            assert_never(field.kind)

    if ctx.options.defval_as_optional:
        return f"Some({literal})"
    return literal
