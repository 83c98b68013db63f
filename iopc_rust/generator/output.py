"""Writing generated packages to the output directory."""

import logging
from pathlib import Path

from .errors import OutputWriteError

logger = logging.getLogger(__name__)

RUST_EXTENSION = ".rs"


def package_path(outdir: str | Path, package: list[str], extension: str = RUST_EXTENSION) -> Path:
    """Path of a package's generated file (`a.b.c` -> `outdir/a/b/c.rs`)."""
    if not package:
        raise ValueError("package name is empty")
    return Path(outdir).joinpath(*package[:-1], package[-1] + extension)


def write_package(
    text: str, outdir: str | Path, package: list[str], extension: str = RUST_EXTENSION
) -> Path:
    """Write the generated code of a package, creating parent directories."""
    path = package_path(outdir, package, extension)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(".".join(package), str(path), e.strerror or str(e)) from e

    logger.info("wrote %s", path)
    return path
