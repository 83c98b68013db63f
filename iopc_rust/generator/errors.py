"""Exceptions raised by the Rust generator."""


class GeneratorError(RuntimeError):
    """Base class for generator failures."""


class ValidationError(GeneratorError):
    """Raised when a schema value cannot be rendered as valid Rust."""


class DefaultValueError(ValidationError):
    """Raised when a field default cannot be encoded as a Rust literal."""


class OutputWriteError(GeneratorError):
    """Raised when a generated package cannot be written to disk."""

    def __init__(self, package: str, path: str, reason: str) -> None:
        super().__init__(f"cannot write {package} to {path}: {reason}")
        self.package = package
        self.path = path


class InputError(GeneratorError):
    """Raised when an AST document cannot be loaded."""
