"""Pure function-based parser for placeholder tokens and template lines.

Placeholder grammar::

    {NAME}            required placeholder
    {NAME:default}    defaulted placeholder, default runs to the closing brace
    [--flag {NAME}]   optional segment, advisory only

NAME is one or more uppercase letters or underscores. Anything that does
not match the grammar (stray braces, lowercase names) is plain text.
"""

import re

from cmdrunner.core.templates.models import (
    HISTORY_DESCRIPTION,
    TEMPLATE_SEPARATOR,
    PlaceholderToken,
    Template,
)

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Z_]+)(?::([^}]*))?\}")
OPTIONAL_GROUP_PATTERN = re.compile(r"\[--[^\s\]]*\s+\{[A-Z_]+(?::[^}]*)?\}\]")
HISTORY_PREFIX = f"{HISTORY_DESCRIPTION} {TEMPLATE_SEPARATOR} "


def parse_placeholders(raw_command: str) -> list[PlaceholderToken]:
    """Extract the distinct placeholders referenced by a raw command.

    Names are de-duplicated and returned in first-occurrence order. When a
    name appears in several forms (``{BRANCH}`` and ``{BRANCH:main}``), the
    first form decides whether it has a default; every form is kept in
    ``occurrences`` so the builder can replace all of them.

    Args:
        raw_command: Template command text.

    Returns:
        List of PlaceholderToken, empty if the command has none.

    Examples:
        >>> [t.name for t in parse_placeholders("scp {LOCAL_FILE} {USER}@{HOST}:{REMOTE_PATH}")]
        ['LOCAL_FILE', 'USER', 'HOST', 'REMOTE_PATH']

        >>> parse_placeholders("grep -r x {DIRECTORY:-.}")[0].default_value
        '-.'

        >>> parse_placeholders("ls -la")
        []
    """
    optional_spans = [m.span() for m in OPTIONAL_GROUP_PATTERN.finditer(raw_command)]

    order: list[str] = []
    first_match: dict[str, re.Match[str]] = {}
    occurrences: dict[str, list[str]] = {}
    optional: dict[str, bool] = {}

    for match in PLACEHOLDER_PATTERN.finditer(raw_command):
        name = match.group(1)
        if name not in first_match:
            order.append(name)
            first_match[name] = match
            occurrences[name] = []
            optional[name] = False

        if match.group(0) not in occurrences[name]:
            occurrences[name].append(match.group(0))

        start = match.start()
        if any(lo <= start < hi for lo, hi in optional_spans):
            optional[name] = True

    tokens = []
    for name in order:
        default = first_match[name].group(2)
        tokens.append(
            PlaceholderToken(
                name=name,
                has_default=default is not None,
                default_value=default,
                is_optional_group=optional[name],
                occurrences=tuple(occurrences[name]),
            )
        )
    return tokens


def find_optional_segments(raw_command: str) -> list[str]:
    """Return the literal ``[--flag {NAME}]`` segments of a raw command."""
    return [m.group(0) for m in OPTIONAL_GROUP_PATTERN.finditer(raw_command)]


def split_template_line(line: str) -> tuple[str, str]:
    """Split a ``"description :: command"`` line on its rightmost separator.

    A line without a separator is treated as a bare command. History lines
    are split after their fixed prefix instead, so a recorded command that
    itself contains ``::`` is kept whole.

    Args:
        line: Template line.

    Returns:
        (description, command) tuple, both stripped.

    Examples:
        >>> split_template_line("a :: b :: echo hi")
        ('a :: b', 'echo hi')

        >>> split_template_line("Custom command from history :: echo 'a :: b'")
        ('Custom command from history', "echo 'a :: b'")
    """
    stripped = line.strip()
    if stripped.startswith(HISTORY_PREFIX):
        command = stripped
        while command.startswith(HISTORY_PREFIX):
            command = command[len(HISTORY_PREFIX) :].lstrip()
        return HISTORY_DESCRIPTION, command

    description, separator, command = line.rpartition(TEMPLATE_SEPARATOR)
    if not separator:
        return "", line.strip()
    return description.strip(), command.strip()


def parse_template_line(line: str) -> Template | None:
    """Parse one line of template text.

    Args:
        line: Text in ``"description :: command"`` form.

    Returns:
        Template, or None for a blank line.

    Examples:
        >>> parse_template_line("Show disk usage :: df -h")
        Template(description='Show disk usage', raw_command='df -h')

        >>> parse_template_line("   ") is None
        True
    """
    if not line.strip():
        return None
    description, command = split_template_line(line)
    return Template(description=description, raw_command=command)


def format_template_line(template: Template) -> str:
    """Render a template as a single ``"description :: command"`` line."""
    return template.to_line()


def parse_template_text(text: str) -> list[Template]:
    """Parse editor text holding one template per line.

    Blank lines are skipped; order is preserved.
    """
    templates = []
    for line in text.splitlines():
        template = parse_template_line(line)
        if template is not None:
            templates.append(template)
    return templates


def serialize_templates(templates: list[Template]) -> str:
    """Render templates as editor text, one per line.

    ``parse_template_text(serialize_templates(ts))`` reproduces ``ts``.
    """
    if not templates:
        return ""
    return "\n".join(format_template_line(t) for t in templates) + "\n"
