"""External text editor for the template list."""

import logging
import os

import click

from cmdrunner.core.templates.errors import EditorFailed

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "nano"


class ClickEditor:
    """Edits text in ``$EDITOR`` through click.edit.

    Attributes:
        editor: Editor command. Falls back to $EDITOR, then nano.
    """

    def __init__(self, editor: str = "") -> None:
        self.editor = editor or os.environ.get("EDITOR") or DEFAULT_EDITOR

    def edit(self, text: str) -> str | None:
        """Open ``text`` in the editor and return what was saved.

        Returns:
            The edited text, or None if the editor produced nothing.

        Raises:
            EditorFailed: If the editor cannot be started or exits with an error.
        """
        try:
            return click.edit(text, editor=self.editor, require_save=False, extension=".txt")
        except click.ClickException as e:
            logger.info("Editor failed: %s", e.format_message())
            raise EditorFailed(e.format_message()) from e
