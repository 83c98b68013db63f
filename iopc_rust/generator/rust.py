"""Rust code generator for IOP packages."""

import logging

from jinja2 import Environment, PackageLoader

from .context import EmitContext, RustOptions
from .defaults import default_literal
from .imports import resolve_imports
from .typemap import map_base_type, map_field_type, qualified_name
from .types import (
    Dependencies,
    Enum,
    Field,
    GenerationUnit,
    Interface,
    InterfaceKind,
    Module,
    Package,
    Payload,
    Rpc,
    Struct,
)
from .util import const_name, field_name, to_camel_case, variant_name

logger = logging.getLogger(__name__)

env = Environment(
    loader=PackageLoader("iopc_rust.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("rust.rs.j2")

RO_WARN = "/***** THIS FILE IS AUTOGENERATED DO NOT MODIFY DIRECTLY ! *****/"

STRUCT_DERIVES = "#[derive(PartialEq, Clone, Serialize, Deserialize)]"
ENUM_DERIVES = "#[derive(PartialEq, Eq, Clone, Serialize_repr, Deserialize_repr)]"
WRAPPER_DERIVES = "#[derive(Serialize, Deserialize)]"

RPC_INDENT = "        "
PAYLOAD_ROLES = (("arg", "Args"), ("res", "Res"), ("exn", "Exn"))


def _indent(lines: list[str], indent: str) -> str:
    return "\n".join(indent + line if line else line for line in lines)


def struct_members(ctx: EmitContext, st: Struct) -> list[tuple[str, str, str]]:
    """Positional members of a struct as (name, type, default) triples.

    Members are sorted by tag and every tag without a field gets a `()`
    placeholder, so that the Nth member is always wire tag N.
    """
    members: list[tuple[str, str, str]] = []
    next_tag = 1

    for field in sorted(st.fields, key=lambda f: f.tag):
        while next_tag < field.tag:
            members.append((f"_dummy{next_tag}", "()", "()"))
            next_tag += 1

        members.append(
            (
                field_name(field.name, ctx.options.field_case),
                map_field_type(ctx, field),
                default_literal(ctx, field),
            )
        )
        next_tag = field.tag + 1

    return members


def _gen_enum(en: Enum) -> str:
    """Generate an enum declaration and its Default impl."""
    lines = [ENUM_DERIVES, "#[repr(i32)]", f"pub enum {en.name} {{"]
    lines += [f"    {v.name} = {v.value}," for v in en.values]
    lines.append("}")

    # Enums are used as struct fields, so they need a default as well.
    if en.values:
        lines += [
            f"impl Default for {en.name} {{",
            "    fn default() -> Self {",
            f"        {en.name}::{en.values[0].name}",
            "    }",
            "}",
        ]
    return "\n".join(lines)


def _gen_struct(ctx: EmitContext, st: Struct, name: str, indent: str = "") -> str:
    """Generate a struct or class declaration and its Default impl."""
    decl_name = f"{name}Obj" if st.is_class else name
    members = struct_members(ctx, st)

    lines = [STRUCT_DERIVES]
    if members:
        lines.append(f"pub struct {decl_name} {{")
        lines += [f"    pub {m_name}: {m_type}," for m_name, m_type, _ in members]
        lines.append("}")
    else:
        lines.append(f"pub struct {decl_name} {{}}")

    lines += [
        f"impl Default for {decl_name} {{",
        "    fn default() -> Self {",
    ]
    if members:
        lines.append("        Self {")
        lines += [f"            {m_name}: {m_default}," for m_name, _, m_default in members]
        lines.append("        }")
    else:
        lines.append("        Self {}")
    lines += ["    }", "}"]

    if st.is_class:
        # Inheritance is not modelled: the class only gets a marker trait, bound
        # to its parent's marker by an empty impl.
        lines.append(f"pub trait {name} {{}}")
        if st.parent is not None:
            lines.append(f"impl {qualified_name(ctx, st.parent)} for dyn {name} {{}}")

    return _indent(lines, indent)


def _gen_union(ctx: EmitContext, st: Struct, name: str, indent: str = "") -> str:
    """Generate a union as a Rust enum with one payload per variant."""
    lines = [STRUCT_DERIVES, f"pub enum {name} {{"]
    for field in sorted(st.fields, key=lambda f: f.tag):
        lines.append(f"    {variant_name(field.name)}({map_field_type(ctx, field)}),")
    lines.append("}")

    # The default variant is the first one declared, whatever its tag.
    if st.fields:
        first = st.fields[0]
        lines += [
            f"impl Default for {name} {{",
            "    fn default() -> Self {",
            f"        {name}::{variant_name(first.name)}({default_literal(ctx, first)})",
            "    }",
            "}",
        ]
    return _indent(lines, indent)


def gen_type(ctx: EmitContext, st: Struct, name: str | None = None, indent: str = "") -> str:
    """Generate the declaration of a struct, class or union."""
    name = name or st.name
    if st.is_union:
        return _gen_union(ctx, st, name, indent)
    return _gen_struct(ctx, st, name, indent)


def _gen_payload(ctx: EmitContext, payload: Payload | None, name: str) -> str:
    if payload is None:
        return f"{RPC_INDENT}pub type {name} = ();"

    if payload.is_anonymous:
        return gen_type(ctx, payload.struct, name, RPC_INDENT)

    field: Field | None = payload.field
    if field is None:
        raise ValueError(f"payload {name} has neither a field nor a struct")

    # Single-type payloads wrap the base type, without its cardinality.
    return _indent(
        [WRAPPER_DERIVES, f"pub struct {name}(pub {map_base_type(ctx, field)});"],
        RPC_INDENT,
    )


def gen_rpc(ctx: EmitContext, rpc: Rpc) -> str:
    """Generate the payload types and descriptor of an RPC."""
    name = to_camel_case(rpc.name)
    parts = [_gen_payload(ctx, getattr(rpc, attr), name + role) for attr, role in PAYLOAD_ROLES]

    parts.append(
        _indent(
            [
                f"pub struct {name} {{}}",
                f"impl {ctx.options.rpc_trait} for {name} {{",
                f"    type Input = {name}Args;",
                f"    type Output = {name}Res;",
                f"    type Exception = {name}Exn;",
                f"    const TAG: u16 = {rpc.tag};",
                f"    const ASYNC: bool = {'true' if rpc.is_async else 'false'};",
                "}",
            ],
            RPC_INDENT,
        )
    )
    return "\n".join(parts)


def rpc_crate(rpc_trait: str) -> str | None:
    """Crate to import for the RPC trait, None when the path is unqualified."""
    crate, sep, _ = rpc_trait.partition("::")
    return crate if sep else None


def _gen_interface(ctx: EmitContext, iface: Interface) -> str:
    lines = [f"    pub mod {field_name(iface.name)} {{", "        use super::super::*;"]
    crate = rpc_crate(ctx.options.rpc_trait)
    if crate is not None:
        lines.append(f"        use {crate};")
    lines.append("")

    # RPCs are separated by a blank line.
    if iface.rpcs:
        lines.append("\n\n".join(gen_rpc(ctx, rpc) for rpc in iface.rpcs))
    lines.append("    }")
    return "\n".join(lines)


def _gen_modules(modules: list[Module]) -> str:
    """Generate the `modules` scope, one nested scope of tag constants per module."""
    lines = ["pub mod modules {"]
    for module in modules:
        lines.append(f"    pub mod {field_name(module.name)} {{")
        lines += [f"        pub const {const_name(f.name)}: u16 = {f.tag};" for f in module.fields]
        lines.append("    }")
    lines.append("}")
    return "\n".join(lines)


def render(
    package: Package,
    dependencies: Dependencies | None = None,
    options: RustOptions | None = None,
) -> str:
    """Render an IOP package to Rust source code.

    Args:
        package: Package AST
        dependencies: Dependency lists of the package, already computed
        options: Generation options
    """
    ctx = EmitContext(package=package, options=options or RustOptions())
    pkg_name = ".".join(package.name)
    logger.debug("%s: rendering Rust code", pkg_name)

    imports = resolve_imports(ctx, dependencies or Dependencies())
    enums = [_gen_enum(en) for en in package.enums]
    structs = [gen_type(ctx, st) for st in package.structs]

    interfaces = []
    for iface in package.interfaces:
        if iface.kind != InterfaceKind.IFACE:
            logger.debug("%s: skipping %s interface %s", pkg_name, iface.kind, iface.name)
            continue
        interfaces.append(_gen_interface(ctx, iface))

    # Blank lines after a `%` line statement are eaten by the template lexer,
    # so every separator that follows one is part of the rendered value.
    return template.render(
        banner=RO_WARN,
        imports=imports,
        enums=["\n" + decl for decl in enums],
        structs=structs,
        interfaces="\n\n".join(interfaces),
        modules="\n" + _gen_modules(package.modules) if package.modules else "",
    )


def render_unit(unit: GenerationUnit, options: RustOptions | None = None) -> str:
    """Render a package together with its dependency lists."""
    return render(unit.package, unit.dependencies, options)
