"""Command builder for resolved templates.

This module substitutes resolved values into a raw template. Substitution
is literal and shell-unaware: values are inserted exactly as resolved,
with no quoting or escaping.
"""

from collections.abc import Iterable

from cmdrunner.core.templates.models import ResolvedParameter, Template
from cmdrunner.core.templates.parser import PLACEHOLDER_PATTERN, parse_placeholders
from cmdrunner.core.templates.resolver import ParameterResolver


def build_command(raw_command: str, parameters: Iterable[ResolvedParameter]) -> str:
    """Substitute resolved values into a raw command.

    Every occurrence of a placeholder whose name has a resolved value is
    replaced, whichever form it is written in (``{NAME}`` or
    ``{NAME:default}``). The command is scanned once, so text inside a
    value is never substituted again. Placeholders without a value and
    ``[--flag ...]`` decorations are kept as written.

    Args:
        raw_command: Template command text.
        parameters: Resolved values keyed by placeholder name.

    Returns:
        The resolved command line.

    Examples:
        >>> build_command("ls -la {DIRECTORY}", [ResolvedParameter("DIRECTORY", "/tmp")])
        'ls -la /tmp'

        >>> build_command('grep -r "{PATTERN}" {DIRECTORY:-.}',
        ...               [ResolvedParameter("PATTERN", "TODO"), ResolvedParameter("DIRECTORY", "-.")])
        'grep -r "TODO" -.'
    """
    values = {p.name: p.value for p in parameters}
    if not values:
        return raw_command

    def _substitute(match):
        return values.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_substitute, raw_command)


def render_template(template: Template, resolver: ParameterResolver) -> str:
    """Parse, resolve and build a template in one step.

    Args:
        template: Template to render.
        resolver: Resolver used to obtain placeholder values.

    Returns:
        The resolved command line. A template without placeholders is
        returned unchanged and the resolver is never called.

    Raises:
        MissingRequiredValue: If a required placeholder is left empty.
            Nothing is built in that case.
    """
    tokens = parse_placeholders(template.raw_command)
    if not tokens:
        return template.raw_command
    parameters = resolver.resolve(tokens)
    return build_command(template.raw_command, parameters)
