# cmdrunner/core/templates/store.py
"""Immutable, ordered collection of templates.

A TemplateStore is built once at startup from the built-in catalog, an
optional user template file and the history log. Operations that change
the collection return a new store instead of mutating the current one.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from cmdrunner.config import Settings
from cmdrunner.core.templates.catalog import builtin_templates
from cmdrunner.core.templates.errors import PersistenceError
from cmdrunner.core.templates.history import HistoryRecorder
from cmdrunner.core.templates.models import Template
from cmdrunner.core.templates.parser import parse_template_text, serialize_templates
from cmdrunner.utils.platform import OSType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TemplateStore:
    """Ordered, immutable set of templates.

    Attributes:
        templates: Templates in listing order.

    Example:
        >>> store = TemplateStore.from_text("Show disk usage :: df -h\\n")
        >>> store.contains_command("df -h")
        True
        >>> len(store.merged_with([Template("Again", "df -h")]))
        1
    """

    templates: tuple[Template, ...] = ()

    def __len__(self) -> int:
        return len(self.templates)

    def __iter__(self) -> Iterator[Template]:
        return iter(self.templates)

    def lines(self) -> list[str]:
        """Return every template as a ``"description :: command"`` line."""
        return [t.to_line() for t in self.templates]

    def contains_command(self, raw_command: str) -> bool:
        """Check whether any template has exactly this raw command."""
        raw_command = raw_command.strip()
        return any(t.raw_command == raw_command for t in self.templates)

    def merged_with(self, extra: Iterable[Template]) -> "TemplateStore":
        """Append templates whose raw command is not listed yet.

        The first template with a given raw command wins, so built-in
        entries are never shadowed by history lines.

        Args:
            extra: Templates to add, in order.

        Returns:
            A new TemplateStore.
        """
        templates = list(self.templates)
        seen = {t.raw_command for t in templates}
        for template in extra:
            if template.raw_command in seen:
                continue
            seen.add(template.raw_command)
            templates.append(template)
        return TemplateStore(templates=tuple(templates))

    def replaced(self, templates: Iterable[Template]) -> "TemplateStore":
        """Return a store holding exactly ``templates``, in order."""
        return TemplateStore(templates=tuple(templates))

    def to_text(self) -> str:
        """Render the store as editor text, one template per line."""
        return serialize_templates(list(self.templates))

    @classmethod
    def from_text(cls, text: str) -> "TemplateStore":
        """Create a store from editor text.

        Args:
            text: One ``"description :: command"`` template per line.

        Returns:
            TemplateStore with the parsed templates in order.
        """
        return cls(templates=tuple(parse_template_text(text)))


def read_template_file(path: str) -> list[Template]:
    """Read a user template file in ``"description :: command"`` form.

    Args:
        path: File to read.

    Returns:
        Parsed templates, empty if the file does not exist.

    Raises:
        PersistenceError: If the file exists but cannot be read.
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        logger.warning("Template file not found: %s", file_path)
        return []
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Cannot read template file: {e}", str(file_path)) from e
    return parse_template_text(text)


def load_store(
    settings: Settings,
    os_type: OSType,
    history: HistoryRecorder | None = None,
) -> TemplateStore:
    """Build the startup TemplateStore.

    Sources are merged in order: built-in catalog, the optional extra
    template file, then the history log. Each stage skips templates whose
    raw command is already listed. An unreadable template file is skipped
    with a warning.

    Args:
        settings: Application settings.
        os_type: Running operating system, selects platform extras.
        history: History log to merge. Skipped when None or when
            settings.include_history is false.

    Returns:
        The loaded TemplateStore.

    Raises:
        PersistenceError: If the history log cannot be read.
    """
    store = TemplateStore().merged_with(builtin_templates(settings.catalog, os_type))
    logger.debug("Loaded %d built-in templates (%s)", len(store), settings.catalog)

    if settings.extra_templates_path:
        try:
            extra = read_template_file(settings.extra_templates_path)
        except PersistenceError as e:
            logger.warning("Skipping unreadable template file %s: %s", e.path, e)
            extra = []
        store = store.merged_with(extra)

    if history is not None and settings.include_history:
        before = len(store)
        store = store.merged_with(history.load_templates())
        logger.debug("Merged %d templates from history", len(store) - before)

    return store
