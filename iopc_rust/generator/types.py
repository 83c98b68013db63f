"""Type definitions for the IOP package AST consumed by the Rust generator.

The AST is produced upstream by the schema parser and validator. The generator
only reads it; anything that needs a different order works on a copy.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from dataclasses_json import DataClassJsonMixin


class FieldKind(StrEnum):
    """Closed set of field kinds."""

    I8 = "i8"
    U8 = "u8"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    BOOL = "bool"
    DOUBLE = "double"
    VOID = "void"
    STRING = "string"
    XML = "xml"
    DATA = "data"
    STRUCT = "struct"
    UNION = "union"
    ENUM = "enum"


class Repeat(StrEnum):
    """Field cardinality."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"
    DEFAULT = "default"


class StructKind(StrEnum):
    STRUCT = "struct"
    CLASS = "class"
    UNION = "union"


class InterfaceKind(StrEnum):
    IFACE = "iface"
    SNMP_IFACE = "snmp_iface"


@dataclass
class TypeRef(DataClassJsonMixin):
    """Reference to a user-defined type.

    `package` is the path of the package declaring the type. `is_class` is set
    when the referenced struct is a polymorphic class.
    """

    name: str
    package: list[str]
    is_class: bool = False


@dataclass
class Field(DataClassJsonMixin):
    """Represents a struct, union, module or RPC payload field.

    For `repeat=default`, `default` holds the schema literal:
    - int for integer and enum kinds
    - bool / float for bool and double
    - str (or bytes for data) for string kinds
    """

    name: str
    tag: int
    kind: FieldKind
    repeat: Repeat = Repeat.REQUIRED
    type_ref: TypeRef | None = None
    is_ref: bool = False
    default: Any | None = None


@dataclass
class EnumValue(DataClassJsonMixin):
    """Represents a single enum value."""

    name: str
    value: int


@dataclass
class Enum(DataClassJsonMixin):
    """Represents an enum type definition."""

    name: str
    values: list[EnumValue]


@dataclass
class Struct(DataClassJsonMixin):
    """Represents a struct, class or union type definition."""

    name: str
    fields: list[Field]
    kind: StructKind = StructKind.STRUCT
    parent: TypeRef | None = None

    @property
    def is_class(self) -> bool:
        return self.kind == StructKind.CLASS

    @property
    def is_union(self) -> bool:
        return self.kind == StructKind.UNION


@dataclass
class Payload(DataClassJsonMixin):
    """RPC argument, result or exception.

    Exactly one of `field` (an existing type) or `struct` (an anonymous inline
    struct) is set.
    """

    field: Field | None = None
    struct: Struct | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.struct is not None


@dataclass
class Rpc(DataClassJsonMixin):
    """Represents a remote call definition."""

    name: str
    tag: int
    is_async: bool = False
    arg: Payload | None = None
    res: Payload | None = None
    exn: Payload | None = None


@dataclass
class Interface(DataClassJsonMixin):
    """Represents an interface definition."""

    name: str
    rpcs: list[Rpc]
    kind: InterfaceKind = InterfaceKind.IFACE


@dataclass
class Module(DataClassJsonMixin):
    """Represents a module: a namespace for tag constants."""

    name: str
    fields: list[Field]


@dataclass
class Package(DataClassJsonMixin):
    """Represents a complete package definition."""

    name: list[str]
    enums: list[Enum] = field(default_factory=list)
    structs: list[Struct] = field(default_factory=list)
    interfaces: list[Interface] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)


@dataclass
class Dependencies(DataClassJsonMixin):
    """Dependency closure of a package, as computed upstream.

    Order within and across the lists is significant: imports are emitted
    direct first, then weak, then indirect.
    """

    direct: list[list[str]] = field(default_factory=list)
    weak: list[list[str]] = field(default_factory=list)
    indirect: list[list[str]] = field(default_factory=list)


@dataclass
class GenerationUnit(DataClassJsonMixin):
    """A package together with its dependency lists."""

    package: Package
    dependencies: Dependencies = field(default_factory=Dependencies)
