"""Parameter resolution for placeholder tokens.

This module provides the ParameterResolver class which obtains a value for
each placeholder of a template, applying defaults and per-name
normalization. Resolution is all-or-nothing: the first required
placeholder left empty aborts the whole run.
"""

import logging
import re
from collections.abc import Callable, Iterable, Mapping

from cmdrunner.core.templates.errors import MissingRequiredValue
from cmdrunner.core.templates.models import PlaceholderToken, ResolvedParameter

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://[^\s;]*")


def normalize_value(name: str, value: str) -> str:
    """Apply name-specific cleanup to an entered value.

    For ``URL`` placeholders whose value starts with ``http`` only the first
    ``http(s)://`` run up to whitespace or ``;`` is kept, dropping anything
    pasted after it. Other names pass through unchanged.

    Args:
        name: Placeholder name.
        value: Value as entered (or the default).

    Returns:
        The normalized value.

    Examples:
        >>> normalize_value("URL", "https://example.com/file.tar.gz; rm -rf /")
        'https://example.com/file.tar.gz'

        >>> normalize_value("FILE", "a; b")
        'a; b'
    """
    if name == "URL" and value.startswith("http"):
        match = URL_PATTERN.search(value)
        if match:
            return match.group(0)
    return value


def prompt_label(token: PlaceholderToken) -> str:
    """Build the prompt text shown for a placeholder."""
    if token.has_default:
        return f"Enter value for {token.name} [default: {token.default_value}]"
    return f"Enter value for {token.name}"


class ParameterResolver:
    """Resolves placeholder tokens into concrete values.

    The resolver asks a line prompt for each token in order. It never
    touches the terminal itself, so tests and the non-interactive
    ``build`` command can supply values from anywhere.

    Attributes:
        prompt: Callable taking a label and returning one line of input.

    Example:
        >>> from cmdrunner.core.templates.parser import parse_placeholders
        >>> answers = iter(["/tmp"])
        >>> resolver = ParameterResolver(prompt=lambda label: next(answers))
        >>> tokens = parse_placeholders("ls -la {DIRECTORY}")
        >>> resolver.resolve(tokens)
        [ResolvedParameter(name='DIRECTORY', value='/tmp')]
    """

    def __init__(self, prompt: Callable[[str], str]) -> None:
        """Initialize the ParameterResolver.

        Args:
            prompt: Line prompt used once per placeholder token.
        """
        self.prompt = prompt

    def resolve_token(self, token: PlaceholderToken) -> ResolvedParameter:
        """Resolve a single token.

        Args:
            token: Placeholder to obtain a value for.

        Returns:
            ResolvedParameter with the normalized value.

        Raises:
            MissingRequiredValue: If the token has no default and the
                entered value is empty.
        """
        entered = self.prompt(prompt_label(token)).strip()

        if not entered:
            if not token.has_default:
                logger.info("No value entered for required placeholder %s", token.name)
                raise MissingRequiredValue(token.name)
            entered = token.default_value or ""
            logger.debug("Using default for %s", token.name)

        return ResolvedParameter(name=token.name, value=normalize_value(token.name, entered))

    def resolve(self, tokens: Iterable[PlaceholderToken]) -> list[ResolvedParameter]:
        """Resolve every token, stopping at the first missing required value.

        Args:
            tokens: Placeholder tokens in prompting order.

        Returns:
            One ResolvedParameter per token, in the same order.

        Raises:
            MissingRequiredValue: If any required token is left empty. No
                partial result is returned.
        """
        return [self.resolve_token(token) for token in tokens]


def resolve_from_mapping(
    tokens: Iterable[PlaceholderToken], values: Mapping[str, str]
) -> list[ResolvedParameter]:
    """Resolve tokens from a name to value mapping instead of a prompt.

    Names absent from ``values`` behave like an empty entry.

    Raises:
        MissingRequiredValue: If a required token has no value.
    """
    resolved = []
    for token in tokens:
        value = values.get(token.name, "")
        resolver = ParameterResolver(prompt=lambda _label: value)
        resolved.append(resolver.resolve_token(token))
    return resolved
