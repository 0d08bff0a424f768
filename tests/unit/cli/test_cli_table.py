"""Tests for the table CLI command."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import json

from click.testing import CliRunner

from eyecandy.cli import eyecandy


class TestCLITable:
    """Test suite for the table command."""

    def test_render_csv(self, create_data_file):
        """Test a CSV file is printed as a table."""
        runner = CliRunner()
        result = runner.invoke(eyecandy, ["table", str(create_data_file())])

        assert result.exit_code == 0, result.output
        assert "status" in result.output
        assert "disk almost full again" in result.output

    def test_render_json(self, create_data_file):
        """Test a JSON list of objects is printed as a table."""
        data = json.dumps([{"name": "web", "replicas": 3}, {"name": "db", "replicas": None}])
        data_file = create_data_file(data, "data.json")

        runner = CliRunner()
        result = runner.invoke(eyecandy, ["table", str(data_file), "--empty", "n/a"])

        assert result.exit_code == 0, result.output
        assert "replicas" in result.output
        assert "web" in result.output
        assert "n/a" in result.output

    def test_json_must_be_list(self, create_data_file):
        """Test JSON that is not a list of objects is rejected."""
        data_file = create_data_file('{"name": "web"}', "data.json")

        runner = CliRunner()
        result = runner.invoke(eyecandy, ["table", str(data_file)])

        assert result.exit_code == 1
        assert "Expected a JSON list of objects" in result.output

    def test_markdown_style_and_overrides(self, create_data_file):
        """Test style choice, hiding, truncation and alignment options."""
        runner = CliRunner()
        result = runner.invoke(
            eyecandy,
            [
                "table",
                str(create_data_file()),
                "--style",
                "markdown",
                "--hide",
                "status",
                "--max-width",
                "notes=8",
                "--align",
                "id=right",
            ],
        )

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "| id | notes    |"
        assert lines[1] == "|----|----------|"
        assert "| 2  |" not in result.output
        assert "|  2 | disk ... |" in lines
        assert "status" not in result.output

    def test_export_csv(self, create_data_file, tmp_path):
        """Test --export writes CSV instead of printing."""
        out = tmp_path / "out.csv"

        runner = CliRunner()
        result = runner.invoke(
            eyecandy,
            ["table", str(create_data_file()), "--empty", "-", "--export", str(out)],
        )

        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8") == (
            "id,status,notes\n1,ok,-\n2,fail,disk almost full again\n"
        )

    def test_columns_file(self, create_data_file, create_columns_file, tmp_path):
        """Test a YAML column file drives titles and formatting."""
        out = tmp_path / "out.csv"

        runner = CliRunner()
        result = runner.invoke(
            eyecandy,
            [
                "table",
                str(create_data_file()),
                "--columns",
                str(create_columns_file()),
                "--export",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        assert out.read_text(encoding="utf-8").splitlines() == [
            "ID,Status,Notes",
            "1,OK,-",
            "2,FAIL,disk al...",
        ]

    def test_invalid_columns_file(self, create_data_file, create_columns_file):
        """Test column file errors exit with code 1."""
        columns_file = create_columns_file("columns:\n  - title: A\n")

        runner = CliRunner()
        result = runner.invoke(
            eyecandy, ["table", str(create_data_file()), "--columns", str(columns_file)]
        )

        assert result.exit_code == 1
        assert "missing required 'key'" in result.output

    def test_max_width_too_small(self, create_data_file):
        """Test widths that cannot hold the ellipsis are a usage error."""
        runner = CliRunner()
        result = runner.invoke(
            eyecandy, ["table", str(create_data_file()), "--max-width", "notes=3"]
        )

        assert result.exit_code == 2
        assert "max_width" in result.output

    def test_unknown_column_key(self, create_data_file):
        """Test overrides naming unknown columns are a usage error."""
        runner = CliRunner()
        result = runner.invoke(eyecandy, ["table", str(create_data_file()), "--hide", "nope"])

        assert result.exit_code == 2
        assert "unknown column key(s): nope" in result.output

    def test_malformed_assignment(self, create_data_file):
        """Test KEY=VALUE options without '=' are a usage error."""
        runner = CliRunner()
        result = runner.invoke(eyecandy, ["table", str(create_data_file()), "--align", "id"])

        assert result.exit_code == 2
        assert "expected KEY=VALUE" in result.output

    def test_version(self):
        """Test --version prints the program version."""
        runner = CliRunner()
        result = runner.invoke(eyecandy, ["--version"])

        assert result.exit_code == 0
        assert "eyecandy" in result.output
