# cmdrunner/core/templates/models.py
"""Data models for command templates.

This module defines the Template dataclass, which pairs a human readable
description with a raw shell command, and the value types produced while
turning a template into a runnable command line.
"""

from dataclasses import dataclass, field

TEMPLATE_SEPARATOR = "::"
HISTORY_DESCRIPTION = "Custom command from history"


@dataclass(frozen=True)
class Template:
    """Represents a named shell command template.

    A template is identified by its (description, raw_command) pair. The
    raw command may contain ``{NAME}`` or ``{NAME:default}`` placeholders
    and ``[--flag {NAME}]`` optional segments.

    Attributes:
        description: Free text shown in the picker.
        raw_command: Command text with placeholder tokens.

    Example:
        >>> t = Template("List all files in specified directory", "ls -la {DIRECTORY}")
        >>> t.to_line()
        'List all files in specified directory :: ls -la {DIRECTORY}'
    """

    description: str
    raw_command: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", self.description.strip())
        object.__setattr__(self, "raw_command", self.raw_command.strip())

    def to_line(self) -> str:
        """Render the template in ``"description :: command"`` form.

        Returns:
            The single-line textual form used by the picker, the editor
            and the history log.
        """
        if not self.description:
            return f"{TEMPLATE_SEPARATOR} {self.raw_command}"
        return f"{self.description} {TEMPLATE_SEPARATOR} {self.raw_command}"


@dataclass(frozen=True)
class PlaceholderToken:
    """A distinct placeholder referenced by a template.

    Attributes:
        name: Uppercase-with-underscore identifier, e.g. ``OUTPUT_FILE``.
        has_default: True if the first occurrence carries a ``:default``.
        default_value: Default text, None unless has_default.
        is_optional_group: True if the name appears inside a
            ``[--flag {NAME}]`` segment. Display only.
        occurrences: Every distinct bracketed text seen for this name,
            in first-occurrence order.
    """

    name: str
    has_default: bool = False
    default_value: str | None = None
    is_optional_group: bool = False
    occurrences: tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """The first bracketed form of this placeholder."""
        if self.occurrences:
            return self.occurrences[0]
        if self.has_default:
            return f"{{{self.name}:{self.default_value}}}"
        return f"{{{self.name}}}"

    @property
    def is_required(self) -> bool:
        return not self.has_default


@dataclass(frozen=True)
class ResolvedParameter:
    """A placeholder name paired with the value chosen for it."""

    name: str
    value: str
