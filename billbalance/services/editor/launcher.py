"""
External Editor Launcher

Opens the payments file in the user's editor and waits for it to exit.

Editor resolution order:
1. Explicit editor (from settings)
2. $VISUAL
3. $EDITOR
4. Platform default (notepad on Windows, vi elsewhere)
"""

import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Optional

from billbalance.observability import get_logger


logger = get_logger(__name__)


class EditorError(Exception):
    """The editor could not be started or exited with an error."""
    pass


def resolve_editor(
    editor: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Pick the editor command to run."""
    if editor:
        return editor

    env = os.environ if environ is None else environ
    for var in ("VISUAL", "EDITOR"):
        value = env.get(var, "").strip()
        if value:
            return value

    return "notepad" if sys.platform == "win32" else "vi"


def edit_file(path: Path, editor: Optional[str] = None) -> None:
    """
    Open `path` in an editor and block until it closes.

    Raises:
        EditorError: If the editor is missing or exits non-zero
    """
    command = shlex.split(resolve_editor(editor)) + [str(path)]
    logger.info("editor_launched", command=command[0], path=str(path))

    try:
        subprocess.run(command, check=True)
    except FileNotFoundError as e:
        raise EditorError(f"Editor not found: {command[0]}") from e
    except subprocess.CalledProcessError as e:
        raise EditorError(
            f"Editor {command[0]} exited with status {e.returncode}"
        ) from e
