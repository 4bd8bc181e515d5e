"""Subprocess helper for replaying process-backed views."""

import subprocess
from typing import Callable, List, Optional


def run_cmd(
    cmd: List[str],
    cwd: Optional[str] = None,
    line_callback: Optional[Callable[[str], None]] = None,
) -> int:
    """Run command; stream combined output lines to line_callback if given. Return exit code."""
    proc = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        cwd=cwd,
    )
    with proc.stdout:
        for line in proc.stdout:
            if line_callback:
                line_callback(line.rstrip("\n"))
    return proc.wait()
