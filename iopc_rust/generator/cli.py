"""Command-line interface for iopc-rust code generation."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from iopc_rust.generator import load_file, render_unit, write_package
from iopc_rust.generator.context import RPC_TRAIT, EmitContext, RustOptions
from iopc_rust.generator.errors import GeneratorError
from iopc_rust.generator.imports import resolve_imports
from iopc_rust.generator.types import InterfaceKind, StructKind
from iopc_rust.generator.util import FieldCase

if TYPE_CHECKING:
    from iopc_rust.generator.types import GenerationUnit

logger = logging.getLogger("iopc_rust")

SUMMARY_COLUMNS = ("enums", "structs", "classes", "unions", "interfaces", "rpcs", "modules")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _load(input_file: str) -> list[GenerationUnit]:
    try:
        return load_file(input_file)
    except (OSError, GeneratorError) as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """IOP to Rust code generator."""
    _setup_logging(verbose)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input package AST (JSON)")
@click.option("--output", "-o", "output_dir", required=True, help="Output directory")
@click.option(
    "--defval-as-optional",
    is_flag=True,
    default=False,
    help="Map fields with a default value to Option<T>",
)
@click.option(
    "--import-root", default="crate", show_default=True, help="Path prefix of package imports"
)
@click.option(
    "--rpc-trait", default=RPC_TRAIT, show_default=True, help="Trait implemented by RPCs"
)
@click.option(
    "--field-case",
    type=click.Choice([c.value for c in FieldCase]),
    default=FieldCase.SNAKE.value,
    show_default=True,
    help="Casing of struct member names",
)
def gen(
    input_file: str,
    output_dir: str,
    defval_as_optional: bool,
    import_root: str,
    rpc_trait: str,
    field_case: str,
) -> None:
    """Generate Rust code for every package of an AST document."""
    units = _load(input_file)
    options = RustOptions(
        defval_as_optional=defval_as_optional,
        import_root=import_root,
        rpc_trait=rpc_trait,
        field_case=FieldCase(field_case),
    )

    failed: list[str] = []
    for unit in units:
        name = ".".join(unit.package.name)
        try:
            write_package(render_unit(unit, options), output_dir, unit.package.name)
        except GeneratorError as e:
            logger.error("%s: %s", name, e)
            failed.append(name)

    if failed:
        logger.error("generation failed for %d package(s): %s", len(failed), ", ".join(failed))
        sys.exit(1)


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input package AST (JSON)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display a summary of the packages of an AST document."""
    units = _load(input_file)
    summaries = [summarize(unit) for unit in units]

    if output_json:
        print(json.dumps(summaries, indent=2))
    else:
        _output_plain(summaries)


def summarize(unit: GenerationUnit) -> dict:
    """Count the declarations a package generates."""
    pkg = unit.package
    kinds = [st.kind for st in pkg.structs]
    ifaces = [iface for iface in pkg.interfaces if iface.kind == InterfaceKind.IFACE]

    return {
        "package": ".".join(pkg.name),
        "enums": len(pkg.enums),
        "structs": kinds.count(StructKind.STRUCT),
        "classes": kinds.count(StructKind.CLASS),
        "unions": kinds.count(StructKind.UNION),
        "interfaces": len(ifaces),
        "rpcs": sum(len(iface.rpcs) for iface in ifaces),
        "modules": len(pkg.modules),
        "imports": len(resolve_imports(EmitContext(package=pkg), unit.dependencies)),
    }


def _output_plain(summaries: list[dict]) -> None:
    """Output package summaries using rich text formatting."""
    console = Console()
    console.print("[bold cyan]Packages[/bold cyan]")

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Package", style="white")
    for column in SUMMARY_COLUMNS:
        table.add_column(column.capitalize(), style="yellow", justify="right")
    table.add_column("Imports", style="green", justify="right")

    for summary in summaries:
        columns = (*SUMMARY_COLUMNS, "imports")
        table.add_row(summary["package"], *(str(summary[c]) for c in columns))

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli(auto_envvar_prefix="IOPC_RUST")


if __name__ == "__main__":
    main()
