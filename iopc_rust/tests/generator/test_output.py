"""Tests for writing generated files."""

import os

import pytest

from iopc_rust.generator.errors import OutputWriteError
from iopc_rust.generator.output import package_path, write_package


def describe_package_path():
    def maps_the_package_path_to_directories(expect, tmp_path):
        expect(package_path(tmp_path, ["a", "b", "c"])) == tmp_path / "a" / "b" / "c.rs"

    def places_single_segment_packages_at_the_root(expect, tmp_path):
        expect(package_path(tmp_path, ["geo"])) == tmp_path / "geo.rs"

    def rejects_empty_names(tmp_path):
        with pytest.raises(ValueError):
            package_path(tmp_path, [])


def describe_write_package():
    def creates_parent_directories(expect, tmp_path):
        path = write_package("// code\n", tmp_path, ["app", "users"])
        expect(path) == tmp_path / "app" / "users.rs"
        expect(path.read_text(encoding="utf-8")) == "// code\n"

    def overwrites_existing_files(expect, tmp_path):
        write_package("old\n", tmp_path, ["geo"])
        path = write_package("new\n", tmp_path, ["geo"])
        expect(path.read_text(encoding="utf-8")) == "new\n"

    def reports_write_failures(expect, tmp_path):
        # A file where the package directory should be.
        (tmp_path / "app").write_text("not a directory")
        with pytest.raises(OutputWriteError) as exc_info:
            write_package("// code\n", tmp_path, ["app", "users"])
        expect(exc_info.value.package) == "app.users"
        expect(exc_info.value.path) == os.path.join(tmp_path, "app", "users.rs")
