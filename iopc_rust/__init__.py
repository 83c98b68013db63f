"""iopc-rust - Rust code generation backend for IOP schema packages."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("iopc-rust")
except PackageNotFoundError:
    __version__ = "(local)"
