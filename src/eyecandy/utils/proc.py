# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Subprocess helper for commands run under the spinner.

Avoids shell=True and raises a structured error on failure so the spinner
can show a readable one-line reason.
"""

from __future__ import annotations

import subprocess

from eyecandy.logging import logger


class ProcessError(RuntimeError):
    """Normalized process error with code/stdout/stderr attached."""

    def __init__(self, message: str, *, code: int | None, stdout: str, stderr: str) -> None:
        super().__init__(message)
        self.code = code
        self.stdout = stdout
        self.stderr = stderr


def _fmt_cmd(cmd: list[str]) -> str:
    return " ".join(cmd)


def run(cmd: list[str], *, timeout: float | None = None) -> str:
    """Run a command and return stdout text.

    Raises ProcessError on non-zero exit, timeout or a missing executable.
    """
    if not cmd:
        msg = "Empty command"
        raise ValueError(msg)

    logger.debug("$ %s", _fmt_cmd(cmd))
    try:
        cp = subprocess.run(cmd, check=False, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as e:
        not_found_msg = f"Command not found: {cmd[0]}"
        raise ProcessError(not_found_msg, code=None, stdout="", stderr=str(e)) from e
    except subprocess.TimeoutExpired as e:
        timeout_msg = f"Command timed out after {timeout}s: {_fmt_cmd(cmd)}"
        raise ProcessError(
            timeout_msg,
            code=None,
            stdout=str(e.stdout or ""),
            stderr=str(e.stderr or ""),
        ) from e

    if cp.returncode != 0:
        _log_failure(cp, cmd)
        stderr_tail = (cp.stderr or "").strip().splitlines()
        detail = f": {stderr_tail[-1]}" if stderr_tail else ""
        failure_msg = f"exit code {cp.returncode}{detail}"
        raise ProcessError(
            failure_msg,
            code=cp.returncode,
            stdout=str(cp.stdout or ""),
            stderr=str(cp.stderr or ""),
        )
    return cp.stdout


def _log_failure(cp: subprocess.CompletedProcess[str], cmd: list[str]) -> None:
    logger.debug("Command failed (%s): %s", cp.returncode, _fmt_cmd(cmd))
    if cp.stdout:
        logger.debug("Stdout: %s", cp.stdout)
    if cp.stderr:
        logger.debug("Stderr: %s", cp.stderr)
