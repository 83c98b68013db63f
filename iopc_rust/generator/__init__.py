"""Rust code generator for IOP packages."""

from .context import EmitContext as EmitContext
from .context import RustOptions as RustOptions
from .errors import *
from .loader import load as load
from .loader import load_file as load_file
from .output import write_package as write_package
from .rust import render as render
from .rust import render_unit as render_unit
from .types import *
