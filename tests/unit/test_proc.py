# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Tests for the subprocess helper."""

import pytest

from eyecandy.utils.proc import ProcessError, run


def test_run_returns_stdout(mock_subprocess_run):
    """Test stdout is returned on success."""
    assert run(["echo", "hello"]) == "hello\n"

    args, kwargs = mock_subprocess_run.call_args
    assert args[0] == ["echo", "hello"]
    assert kwargs["capture_output"] is True
    assert kwargs["check"] is False


def test_run_failure_uses_last_stderr_line():
    """Test a non-zero exit raises ProcessError with a short message."""
    with pytest.raises(ProcessError) as excinfo:
        run(["false"])

    assert str(excinfo.value) == "exit code 1: boom"
    assert excinfo.value.code == 1
    assert "warming up" in excinfo.value.stderr


def test_run_timeout():
    """Test a timeout raises ProcessError without an exit code."""
    with pytest.raises(ProcessError, match="timed out after 1.5s") as excinfo:
        run(["sleep", "10"], timeout=1.5)

    assert excinfo.value.code is None


def test_run_missing_executable():
    """Test a missing executable raises ProcessError."""
    with pytest.raises(ProcessError, match="Command not found: missing-tool"):
        run(["missing-tool"])


def test_run_empty_command():
    """Test an empty command is rejected."""
    with pytest.raises(ValueError, match="Empty command"):
        run([])
