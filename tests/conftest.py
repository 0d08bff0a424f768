"""Test configuration and global fixtures for eyecandy tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import io
import subprocess
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console
from rich.style import Style

from eyecandy.table_renderer import TableColumn


@pytest.fixture(autouse=True)
def mock_subprocess_run():
    """Patch subprocess.run globally to prevent actual shell commands."""

    def mock_run_side_effect(*args, **kwargs):
        result = MagicMock()
        result.returncode = 0
        result.stdout = ""
        result.stderr = ""

        if not args or not args[0]:
            return result

        cmd = args[0]
        if not isinstance(cmd, list) or not cmd:
            return result

        _apply_mock_command_handlers(cmd, result, kwargs)
        return result

    def _apply_mock_command_handlers(cmd, result, kwargs):
        """Apply output adjustments based on the given command list."""
        tool = str(cmd[0])
        if tool == "echo":
            result.stdout = " ".join(cmd[1:]) + "\n"
            return
        if tool == "false":
            result.returncode = 1
            result.stderr = "warming up\nboom\n"
            return
        if tool == "sleep":
            raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"), output="", stderr="")
        if tool == "missing-tool":
            raise FileNotFoundError(2, "No such file or directory", tool)

    with patch("subprocess.run", side_effect=mock_run_side_effect) as mock_run:
        yield mock_run


@pytest.fixture
def record_console():
    """A wide, colourless console whose output can be inspected."""
    return Console(file=io.StringIO(), record=True, width=120)


@pytest.fixture
def status_columns():
    """ID/Status columns where the status column bolds "OK"."""

    def bold_ok(style: Style, value: str) -> Style:
        return style + Style(bold=True) if value == "OK" else style

    return [
        TableColumn("id", "ID"),
        TableColumn("status", "Status").with_style_func(bold_ok),
    ]


@pytest.fixture
def status_rows():
    """Two rows for the ID/Status columns."""
    return [{"id": "1", "status": "OK"}, {"id": "2", "status": "FAIL"}]


@pytest.fixture
def create_columns_file(tmp_path):
    """Create a temporary YAML column file."""
    default_content = """
columns:
  - key: id
    title: ID
    alignment: right
  - key: status
    title: Status
    transform: upper
    styles:
      OK: bold
  - key: notes
    title: Notes
    max_width: 10
    empty_string: "-"
"""

    def _create_file(yaml_content=None, filename="columns.yaml"):
        content = yaml_content if yaml_content is not None else default_content
        columns_file = tmp_path / filename
        columns_file.write_text(content)
        return columns_file

    return _create_file


@pytest.fixture
def create_data_file(tmp_path):
    """Create a temporary CSV data file."""
    default_content = "id,status,notes\n1,ok,\n2,fail,disk almost full again\n"

    def _create_file(content=None, filename="data.csv"):
        data_file = tmp_path / filename
        data_file.write_text(default_content if content is None else content)
        return data_file

    return _create_file
