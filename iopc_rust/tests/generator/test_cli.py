"""Tests for CLI interface."""

import json
import os

from click.testing import CliRunner

from iopc_rust.generator.cli import cli, summarize
from iopc_rust.generator.loader import load_file

FILE_DIR = os.path.dirname(os.path.realpath(__file__))
PACKAGES = f"{FILE_DIR}/packages.json"


def describe_gen_command():
    def generates_one_file_per_package(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["gen", "-i", PACKAGES, "-o", str(tmp_path)])
        expect(result.exit_code) == 0

        geo = (tmp_path / "geo.rs").read_text(encoding="utf-8")
        expect("pub struct Point {" in geo) == True

        users = (tmp_path / "app" / "users.rs").read_text(encoding="utf-8")
        expect(users.count("use crate::geo as geo;")) == 1
        expect("    pub home: Option<geo::Point>,\n" in users) == True
        expect("    pub favorite_color: geo::Color,\n" in users) == True
        expect("        pub struct GetUserRes(pub User);\n" in users) == True
        expect("        pub const USER_SERVICE: u16 = 1;\n" in users) == True

    def applies_generation_options(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "gen",
                "-i",
                PACKAGES,
                "-o",
                str(tmp_path),
                "--defval-as-optional",
                "--import-root",
                "iop",
                "--field-case",
                "camel",
            ],
        )
        expect(result.exit_code) == 0
        users = (tmp_path / "app" / "users.rs").read_text(encoding="utf-8")
        expect("use iop::geo as geo;" in users) == True
        expect("    pub favoriteColor: Option<geo::Color>,\n" in users) == True

    def reads_options_from_the_environment(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["gen", "-i", PACKAGES, "-o", str(tmp_path)],
            auto_envvar_prefix="IOPC_RUST",
            env={"IOPC_RUST_GEN_IMPORT_ROOT": "super"},
        )
        expect(result.exit_code) == 0
        users = (tmp_path / "app" / "users.rs").read_text(encoding="utf-8")
        expect("use super::geo as geo;" in users) == True

    def keeps_going_after_a_write_failure(expect, tmp_path):
        # A file where the `app` package directory should be.
        (tmp_path / "app").write_text("not a directory")
        runner = CliRunner()
        result = runner.invoke(cli, ["gen", "-i", PACKAGES, "-o", str(tmp_path)])
        expect(result.exit_code) == 1
        expect((tmp_path / "geo.rs").exists()) == True

    def fails_with_missing_input(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["gen", "-i", "/nonexistent/packages.json", "-o", str(tmp_path)]
        )
        expect(result.exit_code) != 0

    def fails_with_invalid_input(expect, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        runner = CliRunner()
        result = runner.invoke(cli, ["gen", "-i", str(bad), "-o", str(tmp_path)])
        expect(result.exit_code) == 1
        expect("invalid JSON" in result.output) == True

    def requires_all_options(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["gen", "-i", PACKAGES])
        expect(result.exit_code) != 0
        expect("Missing option" in result.output) == True

    def rejects_unknown_field_cases(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["gen", "-i", PACKAGES, "-o", str(tmp_path), "--field-case", "kebab"]
        )
        expect(result.exit_code) == 2


def describe_info_command():
    def outputs_json(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", PACKAGES, "--json"])
        expect(result.exit_code) == 0

        data = json.loads(result.output)
        expect([d["package"] for d in data]) == ["geo", "app.users"]
        expect(data[0]["enums"]) == 1
        expect(data[1]["rpcs"]) == 1
        expect(data[1]["imports"]) == 1

    def outputs_a_table(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["info", "-i", PACKAGES], env={"COLUMNS": "200"})
        expect(result.exit_code) == 0
        expect("Packages" in result.output) == True
        expect("app.users" in result.output) == True


def describe_summarize():
    def counts_declarations(expect):
        summary = summarize(load_file(PACKAGES)[1])
        expect(summary) == {
            "package": "app.users",
            "enums": 0,
            "structs": 1,
            "classes": 0,
            "unions": 0,
            "interfaces": 1,
            "rpcs": 1,
            "modules": 1,
            "imports": 1,
        }
