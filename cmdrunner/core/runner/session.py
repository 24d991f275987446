# cmdrunner/core/runner/session.py
"""Session controller for running templates.

This module provides the CommandSession class which takes a picked
template line through resolution, building, history recording and
execution (or clipboard copy). All user interaction goes through the
collaborator protocols in cmdrunner.core.runner.protocols.
"""

import logging
from dataclasses import dataclass

from cmdrunner.core.runner.protocols import (
    ClipboardSink,
    CommandRunner,
    Selector,
    TemplateEditor,
    Terminal,
)
from cmdrunner.core.templates.builder import build_command
from cmdrunner.core.templates.errors import (
    ClipboardUnavailable,
    EditorFailed,
    MissingRequiredValue,
    PersistenceError,
    SelectorFailed,
)
from cmdrunner.core.templates.history import HistoryRecorder
from cmdrunner.core.templates.parser import parse_placeholders, parse_template_text, split_template_line
from cmdrunner.core.templates.resolver import ParameterResolver
from cmdrunner.core.templates.store import TemplateStore
from cmdrunner.utils.logging import set_invocation_id

logger = logging.getLogger(__name__)

COPY_KEYS = ("c", "C")


@dataclass
class RunOutcome:
    """Result of one run attempt.

    Attributes:
        status: "executed", "copied", "cancelled" or "empty".
        command: Resolved command text, or the raw one if resolution failed.
        exit_code: Exit code when executed, None otherwise.
        message: Human readable summary shown to the user.
    """

    status: str
    command: str = ""
    exit_code: int | None = None
    message: str = ""


class CommandSession:
    """Interactive session over a TemplateStore.

    The session holds the current store and replaces it wholesale when
    templates are edited. It never parses shell syntax; it only resolves
    placeholders and hands the resulting text to the runner.

    Attributes:
        store: Templates listed by the picker.
        history: History log that executed commands are appended to.
        terminal: Line prompt and output.
        runner: Shell execution.
        clipboard: Clipboard sink, None when copying is not supported.
        editor: Template editor, None when editing is not supported.

    Example:
        >>> session = CommandSession(store, history, terminal, runner, clipboard)
        >>> outcome = session.run_selection("List all files in specified directory :: ls -la {DIRECTORY}")
        >>> outcome.command
        'ls -la /tmp'
    """

    def __init__(
        self,
        store: TemplateStore,
        history: HistoryRecorder,
        terminal: Terminal,
        runner: CommandRunner,
        clipboard: ClipboardSink | None = None,
        editor: TemplateEditor | None = None,
    ) -> None:
        self.store = store
        self.history = history
        self.terminal = terminal
        self.runner = runner
        self.clipboard = clipboard
        self.editor = editor
        self.resolver = ParameterResolver(prompt=terminal.prompt)

    def clipboard_available(self) -> bool:
        """Check whether the copy option should be offered."""
        return self.clipboard is not None and self.clipboard.available()

    def run_selection(self, line: str) -> RunOutcome:
        """Resolve and run the command of a ``"description :: command"`` line.

        Steps: resolve placeholders, build the command, offer to copy it,
        record the raw command in history, run it and report the exit code.
        Copying ends the invocation without recording or running.

        Args:
            line: Picker line or ad-hoc ``"Custom command :: ..."`` line.

        Returns:
            RunOutcome describing what happened.
        """
        _, raw_command = split_template_line(line)
        return self._run_command(raw_command)

    def _run_command(self, raw_command: str) -> RunOutcome:
        set_invocation_id()
        self.terminal.echo()
        tokens = parse_placeholders(raw_command)
        if tokens:
            self.terminal.echo("Command has placeholders that need values:")
            self.terminal.echo()

        try:
            parameters = self.resolver.resolve(tokens)
        except MissingRequiredValue as e:
            self.terminal.echo(f"Error: {e}", style="error")
            logger.info("Run cancelled, missing value for %s", e.name)
            return RunOutcome(
                status="cancelled",
                command=raw_command,
                message="Command execution cancelled.",
            )

        command = build_command(raw_command, parameters)

        self.terminal.echo()
        self.terminal.echo(f"Executing: {command}")

        if self.clipboard_available():
            key = self.terminal.read_key(
                "Press 'c' to copy this command to clipboard or any other key to continue: "
            )
            if key in COPY_KEYS:
                return self._copy(command)
        self.terminal.echo()

        self._record(raw_command)

        logger.info("Running resolved command")
        exit_code = self.runner.run(command)
        self.terminal.echo()
        if exit_code != 0:
            message = f"Command finished with exit code {exit_code}."
            self.terminal.echo(message, style="warning")
        else:
            message = "Command completed successfully."
            self.terminal.echo(message, style="success")

        return RunOutcome(status="executed", command=command, exit_code=exit_code, message=message)

    def run_custom(self, command: str) -> RunOutcome:
        """Run an ad-hoc command typed by the user.

        Placeholders in the typed text are resolved like any template.

        Args:
            command: Command text. Empty input returns to the menu.

        Returns:
            RunOutcome, with status "empty" when nothing was entered.
        """
        command = command.strip()
        if not command:
            return RunOutcome(status="empty", message="No command entered. Returning to menu...")
        return self._run_command(command)

    def search_and_run(self, selector: Selector) -> RunOutcome | None:
        """Let the user pick a template and run it.

        Args:
            selector: Fuzzy finder presenting the store's lines.

        Returns:
            RunOutcome, or None if nothing was selected. A failing picker
            gives a "cancelled" outcome.
        """
        try:
            selection = selector.select(self.store.lines())
        except SelectorFailed as e:
            self.terminal.echo(f"Error: {e}", style="error")
            return RunOutcome(status="cancelled", message=str(e))
        if selection is None:
            return None
        if selection.copy_requested:
            _, raw_command = split_template_line(selection.line)
            return self._copy(raw_command)
        return self.run_selection(selection.line)

    def edit_templates(self) -> bool:
        """Open the current templates in the editor and replace the store.

        Returns:
            True if the store was replaced, False if there is no editor,
            the edit was abandoned or the editor failed.
        """
        if self.editor is None:
            return False
        try:
            edited = self.editor.edit(self.store.to_text())
        except EditorFailed as e:
            self.terminal.echo(f"Editor error: {e}", style="error")
            return False
        if edited is None:
            logger.info("Template edit abandoned")
            return False
        self.store = self.store.replaced(parse_template_text(edited))
        logger.info("Template store replaced with %d templates", len(self.store))
        return True

    def _copy(self, text: str) -> RunOutcome:
        if self.clipboard is None:
            message = "Clipboard not supported on this system."
            self.terminal.echo(message, style="error")
            return RunOutcome(status="cancelled", command=text, message=message)
        try:
            self.clipboard.copy(text)
        except ClipboardUnavailable as e:
            self.terminal.echo(f"Clipboard error: {e}", style="error")
            return RunOutcome(status="cancelled", command=text, message=str(e))
        self.terminal.echo("Command copied to clipboard.", style="success")
        return RunOutcome(status="copied", command=text, message="Command copied to clipboard.")

    def _record(self, raw_command: str) -> None:
        known = (t.raw_command for t in self.store)
        try:
            self.history.record(raw_command, known=known)
        except PersistenceError as e:
            # History is best-effort; the command still runs
            logger.info("Failed to record history: %s", e)
            self.terminal.echo(f"Warning: {e}", style="warning")
