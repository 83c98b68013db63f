"""Unit tests configuration file."""

import pytest

from iopc_rust.generator.context import EmitContext, RustOptions
from iopc_rust.generator.types import (
    Enum,
    EnumValue,
    Field,
    FieldKind,
    Package,
    Repeat,
    Struct,
)


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def geo_package():
    """Package with Color{RED=0,BLUE=1} and Point{x tag 1, y tag 3 optional}."""
    return Package(
        name=["geo"],
        enums=[
            Enum(
                name="Color",
                values=[EnumValue(name="RED", value=0), EnumValue(name="BLUE", value=1)],
            )
        ],
        structs=[
            Struct(
                name="Point",
                fields=[
                    Field(name="x", tag=1, kind=FieldKind.I32),
                    Field(name="y", tag=3, kind=FieldKind.I32, repeat=Repeat.OPTIONAL),
                ],
            )
        ],
    )


@pytest.fixture
def make_ctx():
    """Build an emission context for a package path."""

    def _make_ctx(name=("test",), **options):
        return EmitContext(package=Package(name=list(name)), options=RustOptions(**options))

    return _make_ctx
