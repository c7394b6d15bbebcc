"""Editor adapter - subprocess wrapper for opening an entry file."""

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def default_opener() -> str:
    """$EDITOR if set, otherwise a platform default."""
    return os.environ.get("EDITOR") or ("notepad" if sys.platform == "win32" else "vi")


class EditorOpener:
    """Opens files in an external program and waits for it to exit."""

    def __init__(self, program: str | None = None):
        self.program = program or default_opener()

    def open(self, path: Path | str) -> int:
        """Open a file and block until the program exits. Returns its exit code."""
        command = shlex.split(self.program, posix=sys.platform != "win32") + [str(path)]
        logger.debug(f"Running {command}")
        try:
            proc = subprocess.run(command)
        except FileNotFoundError:
            raise RuntimeError(f"'{self.program}' not found. Set OPENER in daybook.conf or $EDITOR")
        if proc.returncode != 0:
            logger.error(f"{self.program} exited with code {proc.returncode}")
            raise RuntimeError(f"{self.program} exited with code {proc.returncode}")
        return proc.returncode
