"""Exceptions raised by the template engine and its collaborators."""


class CommandRunnerError(Exception):
    """Base class for all cmdrunner errors."""


class MissingRequiredValue(CommandRunnerError):
    """Raised when a required placeholder receives empty input."""

    def __init__(self, name: str):
        super().__init__(f"A value is required for {name}.")
        self.name = name


class ClipboardUnavailable(CommandRunnerError):
    """Raised when no supported clipboard mechanism can be used."""


class PersistenceError(CommandRunnerError):
    """Raised when the history log cannot be read or written."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class SelectorNotFound(CommandRunnerError):
    """Raised at startup when the fuzzy finder is not installed."""

    def __init__(self, command: str, hint: str):
        super().__init__(hint)
        self.command = command
        self.hint = hint


class SelectorFailed(CommandRunnerError):
    """Raised when the fuzzy finder exits with an error."""


class EditorFailed(CommandRunnerError):
    """Raised when the template editor cannot be started or fails."""
