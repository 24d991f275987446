# cmdrunner/core/templates/history.py
"""Append-only history log of executed commands.

Each line has the form ``"Custom command from history :: <command>"``.
The log is owned by a single process; concurrent writers are not guarded
against.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from cmdrunner.core.templates.errors import PersistenceError
from cmdrunner.core.templates.models import HISTORY_DESCRIPTION, TEMPLATE_SEPARATOR, Template
from cmdrunner.core.templates.parser import parse_template_line

logger = logging.getLogger(__name__)


def entry_for(command: str) -> str:
    """Render the canonical history line for a command.

    Example:
        >>> entry_for("ls -la")
        'Custom command from history :: ls -la'
    """
    return f"{HISTORY_DESCRIPTION} {TEMPLATE_SEPARATOR} {command.strip()}"


class HistoryRecorder:
    """Reads and appends the persisted history log.

    Attributes:
        path: Location of the log file.

    Example:
        >>> recorder = HistoryRecorder("/tmp/.command_runner_history")
        >>> recorder.record("uptime")
        True
        >>> recorder.record("uptime")
        False
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the HistoryRecorder.

        Args:
            path: Log file location. ``~`` is expanded.
        """
        self.path = Path(path).expanduser()

    def read_entries(self) -> list[str]:
        """Read the raw log lines.

        Returns:
            Non-blank lines in file order, empty if the log does not exist.

        Raises:
            PersistenceError: If the log exists but cannot be read.
        """
        if not self.path.exists():
            return []
        try:
            with open(self.path, encoding="utf-8") as f:
                return [line.rstrip("\n") for line in f if line.strip()]
        except OSError as e:
            raise PersistenceError(f"Cannot read history log: {e}", str(self.path)) from e

    def load_templates(self) -> list[Template]:
        """Parse the log into templates, dropping repeated commands."""
        templates = []
        seen: set[str] = set()
        for line in self.read_entries():
            template = parse_template_line(line)
            if template is None or template.raw_command in seen:
                continue
            seen.add(template.raw_command)
            templates.append(template)
        return templates

    def contains(self, command: str) -> bool:
        """Check whether the log already has an exact line for ``command``."""
        return entry_for(command) in self.read_entries()

    def record(self, command: str, known: Iterable[str] = ()) -> bool:
        """Append a command to the log unless it is already listed.

        Args:
            command: Raw command text to persist.
            known: Raw commands already listed elsewhere (the template
                store). Matching commands are not appended.

        Returns:
            True if a line was written, False if it was a duplicate or empty.

        Raises:
            PersistenceError: If the log cannot be read or written.
        """
        command = command.strip()
        if not command:
            return False
        if command in set(known) or self.contains(command):
            logger.debug("History already lists command, not recording")
            return False

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(entry_for(command) + "\n")
        except OSError as e:
            raise PersistenceError(f"Cannot write history log: {e}", str(self.path)) from e

        logger.info("Recorded command in history: %s", self.path)
        return True
