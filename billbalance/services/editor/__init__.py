"""Editor services package."""

from billbalance.services.editor.launcher import (
    EditorError,
    edit_file,
    resolve_editor,
)

__all__ = [
    "EditorError",
    "edit_file",
    "resolve_editor",
]
