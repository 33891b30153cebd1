"""Copy text to the host clipboard.

Uses the platform clipboard command when one is installed and falls back to a
hidden Tk window. Every failure is reported as False, nothing is raised.
"""
import logging
import os
import shutil
import subprocess
import sys
from typing import List, Optional

from admin_panel.config.settings import settings

logger = logging.getLogger(__name__)


def _clipboard_command() -> Optional[List[str]]:
    if sys.platform == "darwin":
        candidates = [["pbcopy"]]
    elif sys.platform.startswith("win"):
        candidates = [["clip"]]
    else:
        candidates = []
        if os.environ.get("WAYLAND_DISPLAY"):
            candidates.append(["wl-copy"])
        if os.environ.get("DISPLAY"):
            candidates.append(["xclip", "-selection", "clipboard"])
            candidates.append(["xsel", "--clipboard", "--input"])
    for cmd in candidates:
        if shutil.which(cmd[0]):
            return cmd
    return None


def _copy_with_command(cmd: List[str], text: str) -> bool:
    try:
        result = subprocess.run(
            cmd,
            input=text,
            capture_output=True,
            text=True,
            timeout=settings.clipboard_timeout_seconds
        )
    except subprocess.TimeoutExpired:
        logger.warning(f"Clipboard command {cmd[0]} timed out")
        return False
    except OSError as e:
        logger.warning(f"Clipboard command {cmd[0]} failed: {e}")
        return False
    if result.returncode != 0:
        logger.warning(f"Clipboard command {cmd[0]} exited with {result.returncode}: {result.stderr}")
        return False
    return True


def _copy_with_tk(text: str) -> bool:
    try:
        import tkinter

        root = tkinter.Tk()
        try:
            root.withdraw()
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
        finally:
            root.destroy()
        return True
    except Exception as e:
        logger.warning(f"Tk clipboard fallback failed: {e}")
        return False


def copy_to_clipboard(text: str) -> bool:
    cmd = _clipboard_command()
    if cmd is not None:
        return _copy_with_command(cmd, text)
    return _copy_with_tk(text)
