"""Protocols for the external collaborators of a command session.

The session only talks to the terminal, the fuzzy finder, the clipboard,
the shell and the editor through these interfaces. Concrete adapters live
in cmdrunner.interfaces.cli.
"""

from collections.abc import Sequence
from typing import NamedTuple, Protocol, runtime_checkable


class Selection(NamedTuple):
    """A line picked in the fuzzy finder.

    Attributes:
        line: The chosen ``"description :: command"`` line.
        copy_requested: True if the user asked to copy the raw template
            instead of running it.
    """

    line: str
    copy_requested: bool = False


@runtime_checkable
class Terminal(Protocol):
    """Line-oriented interaction with the controlling terminal."""

    def prompt(self, label: str) -> str:
        """Read one line of input after showing ``label``."""
        ...

    def read_key(self, label: str) -> str:
        """Read a single keypress after showing ``label``."""
        ...

    def echo(self, message: str = "", style: str | None = None) -> None:
        """Print a line, optionally styled ("info", "success", "warning", "error")."""
        ...

    def pause(self, message: str) -> None:
        """Wait for Enter."""
        ...


@runtime_checkable
class Selector(Protocol):
    """Incremental fuzzy selection over template lines."""

    def select(self, items: Sequence[str]) -> Selection | None:
        """Return the chosen line, or None if the picker was aborted.

        Raises SelectorFailed if the picker itself fails.
        """
        ...


@runtime_checkable
class ClipboardSink(Protocol):
    """Platform clipboard."""

    def available(self) -> bool:
        ...

    def copy(self, text: str) -> None:
        """Copy text, raising ClipboardUnavailable on failure."""
        ...


@runtime_checkable
class CommandRunner(Protocol):
    """Executes a resolved command line in a shell."""

    def run(self, command_text: str) -> int:
        """Run the command and return its exit code."""
        ...


@runtime_checkable
class TemplateEditor(Protocol):
    """Opens template text in an editor."""

    def edit(self, text: str) -> str | None:
        """Return the edited text, or None if editing was abandoned.

        Raises EditorFailed if the editor cannot be run.
        """
        ...
