"""Mapping of IOP field types to Rust type expressions."""

from typing import assert_never

from .context import EmitContext
from .types import Field, FieldKind, Repeat, TypeRef
from .util import escape_identifier

PRIMITIVE_TYPE_MAP = {
    FieldKind.I8: "i8",
    FieldKind.U8: "u8",
    FieldKind.I16: "i16",
    FieldKind.U16: "u16",
    FieldKind.I32: "i32",
    FieldKind.U32: "u32",
    FieldKind.I64: "i64",
    FieldKind.U64: "u64",
    FieldKind.BOOL: "bool",
    FieldKind.DOUBLE: "f64",
    FieldKind.VOID: "()",
    FieldKind.STRING: "String",
    FieldKind.XML: "String",
    FieldKind.DATA: "String",
}


def package_segments(path: list[str]) -> list[str]:
    """Path segments of a package as Rust module names."""
    return [escape_identifier(segment) for segment in path]


def package_alias(path: list[str]) -> str:
    """Local alias of an imported package (`a.b` -> `a__b`)."""
    return escape_identifier("__".join(path))


def qualified_name(ctx: EmitContext, ref: TypeRef) -> str:
    """Name of a user type, prefixed by its package alias when foreign."""
    if ctx.is_local(ref.package):
        return ref.name
    return f"{package_alias(ref.package)}::{ref.name}"


def _type_ref(field: Field) -> TypeRef:
    if field.type_ref is None:
        raise ValueError(f"field {field.name} of kind {field.kind} has no type reference")
    return field.type_ref


def map_base_type(ctx: EmitContext, field: Field) -> str:
    """Map a field to its Rust type, ignoring cardinality.

    Class references become `Box<dyn T>` and fields marked as references
    become `Box<T>`.
    """
    match field.kind:
        case (
            FieldKind.I8
            | FieldKind.U8
            | FieldKind.I16
            | FieldKind.U16
            | FieldKind.I32
            | FieldKind.U32
            | FieldKind.I64
            | FieldKind.U64
            | FieldKind.BOOL
            | FieldKind.DOUBLE
            | FieldKind.VOID
            | FieldKind.STRING
            | FieldKind.XML
            | FieldKind.DATA
        ):
            return PRIMITIVE_TYPE_MAP[field.kind]
        case FieldKind.STRUCT:
            ref = _type_ref(field)
            name = qualified_name(ctx, ref)
            if ref.is_class:
                # Placeholder for class polymorphism: a boxed marker trait.
                return f"Box<dyn {name}>"
            if field.is_ref:
                return f"Box<{name}>"
            return name
        case FieldKind.UNION | FieldKind.ENUM:
            return qualified_name(ctx, _type_ref(field))
        case _:
            assert_never(field.kind)


def map_field_type(ctx: EmitContext, field: Field) -> str:
    """Map a field to its Rust type, cardinality wrapper outermost."""
    base = map_base_type(ctx, field)

    match field.repeat:
        case Repeat.REQUIRED:
            return base
        case Repeat.REPEATED:
            return f"Vec<{base}>"
        case Repeat.OPTIONAL:
            return f"Option<{base}>"
        case Repeat.DEFAULT:
            if ctx.options.defval_as_optional:
                return f"Option<{base}>"
            return base
        case _:
            assert_never(field.repeat)
