"""Generation options and per-package emission state."""

from dataclasses import dataclass, field

from .types import Package
from .util import FieldCase

RPC_TRAIT = "libcommon_ic::types::Rpc"


@dataclass(frozen=True)
class RustOptions:
    """Options controlling the generated Rust code.

    - defval_as_optional: map fields with a schema default to `Option<T>`
    - import_root: path prefix of dependency imports (`use <root>::a::b`)
    - rpc_trait: trait implemented by RPC descriptors
    - field_case: casing of struct member names
    """

    defval_as_optional: bool = False
    import_root: str = "crate"
    rpc_trait: str = RPC_TRAIT
    field_case: FieldCase = FieldCase.SNAKE


@dataclass
class EmitContext:
    """Scratch state of a single package emission.

    Created by `render()` and dropped when it returns; nothing here is shared
    between packages.
    """

    package: Package
    options: RustOptions = field(default_factory=RustOptions)
    imported: set[str] = field(default_factory=set)

    def is_local(self, package: list[str]) -> bool:
        """Check if a package path designates the package being emitted."""
        return package == self.package.name
