"""Clipboard sink for share text."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys

logger = logging.getLogger(__name__)

COPY_TIMEOUT_S = 2.0


def _copy_command() -> list[str] | None:
    if sys.platform == "darwin":
        return ["pbcopy"]
    if sys.platform == "win32":
        return ["clip"]
    if shutil.which("wl-copy"):
        return ["wl-copy"]
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard"]
    if shutil.which("xsel"):
        return ["xsel", "--clipboard", "--input"]
    return None


def copy_to_clipboard(text: str) -> bool:
    """Copy text with the platform tool. Returns False if it could not be run."""
    cmd = _copy_command()
    if cmd is None:
        logger.warning("No clipboard tool found; share text not copied")
        return False
    # clip.exe reads UTF-16 with a BOM; everything else takes UTF-8
    encoding = "utf-16" if cmd[0] == "clip" else "utf-8"
    try:
        subprocess.run(
            cmd, input=text.encode(encoding), timeout=COPY_TIMEOUT_S,
            stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.warning("Clipboard copy failed: %s", exc)
        return False
    return True
