"""Dependency imports of a generated package."""

import logging

from .context import EmitContext
from .types import Dependencies
from .typemap import package_alias, package_segments

logger = logging.getLogger(__name__)


def import_line(root: str, path: list[str]) -> str:
    """Rust `use` statement importing a package under its alias."""
    return f"use {'::'.join([root, *package_segments(path)])} as {package_alias(path)};"


def resolve_imports(ctx: EmitContext, deps: Dependencies) -> list[str]:
    """Build the import statements of a package.

    Lists are processed direct, weak then indirect. A package reached more
    than once is imported at its first occurrence only.
    """
    lines: list[str] = []

    for path in [*deps.direct, *deps.weak, *deps.indirect]:
        if ctx.is_local(path):
            continue

        alias = package_alias(path)
        if alias in ctx.imported:
            logger.debug("%s: skipping duplicate import of %s", ".".join(ctx.package.name), alias)
            continue

        ctx.imported.add(alias)
        lines.append(import_line(ctx.options.import_root, path))

    return lines
