"""Utility helpers: executable-bit checks and subprocess wrappers."""

from __future__ import annotations

import logging
import os
import shutil
import stat
import subprocess

logger = logging.getLogger(__name__)


def is_executable(st: os.stat_result) -> bool:
    """True if any of the user/group/other execute bits are set."""
    return bool(st.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


def command_available(name: str) -> bool:
    """True if *name* resolves to an executable on PATH (or is one)."""
    found = shutil.which(name) is not None
    if not found:
        logger.debug("%s not found on PATH", name)
    return found


def run_command(
    cmd: list[str],
    stdin: str | None = None,
    cwd: str | None = None,
) -> subprocess.CompletedProcess:
    """Run *cmd* capturing text output.

    A missing executable is reported as a completed process with exit code
    127 and the error on stderr, mirroring what a shell would do.
    """
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            input=stdin,
            capture_output=True,
            text=True,
            cwd=cwd,
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", cmd[0], exc)
        return subprocess.CompletedProcess(cmd, 127, stdout="", stderr=str(exc))
    logger.debug("%s exited with code %d", cmd[0], result.returncode)
    return result
