# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Tests for the omnitypes command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from omnitypes import __version__
from omnitypes.cli import cli

CYCLE_SCHEMA = {"definitions": {"A": {"$ref": "#/definitions/A"}}}


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Create a Click CLI test runner working inside ``tmp_path``."""
    monkeypatch.chdir(tmp_path)
    return CliRunner()


@pytest.mark.unit
class TestCliGroup:
    def test_help_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Generate TypeScript declarations" in result.output

    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"omnitypes {__version__}" in result.output

    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli)
        assert result.exit_code == 0
        assert "generate" in result.output
        assert "show" in result.output


@pytest.mark.unit
class TestGenerateCommand:
    def test_converts_directory(
        self,
        runner: CliRunner,
        tmp_path: Path,
        write_schema: Any,
        user_schema: dict[str, Any],
    ) -> None:
        write_schema("user.schema.json", user_schema)
        output_dir = tmp_path / "types"

        result = runner.invoke(cli, ["generate", str(tmp_path / "schemas"), str(output_dir)])

        assert result.exit_code == 0, result.output
        assert (output_dir / "user.d.ts").is_file()

    def test_directories_from_environment(
        self,
        runner: CliRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        write_schema: Any,
        user_schema: dict[str, Any],
    ) -> None:
        write_schema("user.json", user_schema)
        monkeypatch.setenv("OMNITYPES_SCHEMAS_DIR", str(tmp_path / "schemas"))
        monkeypatch.setenv("OMNITYPES_OUTPUT_DIR", str(tmp_path / "out"))

        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "user.d.ts").is_file()

    def test_missing_directories_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 2
        assert "SCHEMAS_DIR" in result.output

    def test_nonexistent_schemas_dir_is_usage_error(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(cli, ["generate", str(tmp_path / "nope"), str(tmp_path / "out")])

        assert result.exit_code == 2

    def test_failed_file_exits_one_after_converting_others(
        self,
        runner: CliRunner,
        tmp_path: Path,
        write_schema: Any,
        user_schema: dict[str, Any],
    ) -> None:
        write_schema("cycle.json", CYCLE_SCHEMA)
        write_schema("user.json", user_schema)
        output_dir = tmp_path / "types"

        result = runner.invoke(cli, ["generate", str(tmp_path / "schemas"), str(output_dir)])

        assert result.exit_code == 1
        assert (output_dir / "user.d.ts").is_file()
        assert not (output_dir / "cycle.d.ts").exists()

    def test_no_docs_and_root_only(
        self,
        runner: CliRunner,
        tmp_path: Path,
        write_schema: Any,
        user_schema: dict[str, Any],
    ) -> None:
        write_schema("user.json", user_schema)
        output_dir = tmp_path / "types"

        result = runner.invoke(
            cli,
            [
                "generate",
                str(tmp_path / "schemas"),
                str(output_dir),
                "--export-format",
                "root_only",
                "--no-docs",
            ],
        )

        assert result.exit_code == 0, result.output
        content = (output_dir / "user.d.ts").read_text(encoding="utf-8")
        assert "/**" not in content
        assert content.endswith("\n\nexport { User };\n")


@pytest.mark.unit
class TestShowCommand:
    def test_prints_module(
        self, runner: CliRunner, write_schema: Any, user_schema: dict[str, Any]
    ) -> None:
        path = write_schema("user.json", user_schema)

        result = runner.invoke(cli, ["show", str(path)])

        assert result.exit_code == 0, result.output
        assert result.output == (
            "/**\n * User\n */\n"
            "interface User {\n  id: UserId;\n}\n\n"
            "type UserId = string\n\n"
            "export { User };\n"
            "export { UserId };\n"
        )

    def test_export_format_from_environment(
        self,
        runner: CliRunner,
        monkeypatch: pytest.MonkeyPatch,
        write_schema: Any,
        user_schema: dict[str, Any],
    ) -> None:
        path = write_schema("user.json", user_schema)
        monkeypatch.setenv("OMNITYPES_EXPORT_FORMAT", "ROOT_ONLY")

        result = runner.invoke(cli, ["show", str(path)])

        assert result.exit_code == 0, result.output
        assert result.output.count("export {") == 1

    def test_cycle_is_reported(self, runner: CliRunner, write_schema: Any) -> None:
        path = write_schema("cycle.json", CYCLE_SCHEMA)

        result = runner.invoke(cli, ["show", str(path)])

        assert result.exit_code == 1
        assert "Circular reference detected" in result.output

    def test_malformed_schema_is_reported(self, runner: CliRunner, write_schema: Any) -> None:
        path = write_schema("broken.json", '{"title": ')

        result = runner.invoke(cli, ["show", str(path)])

        assert result.exit_code == 1
        assert "invalid document" in result.output
