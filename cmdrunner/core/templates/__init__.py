"""Template module for command template parsing and resolution.

This module provides:
- Template, PlaceholderToken, ResolvedParameter: data models
- parse_placeholders: Function to extract placeholder tokens from a command
- ParameterResolver: Resolver obtaining a value for each placeholder
- build_command: Function substituting resolved values into a command
- TemplateStore, load_store: Immutable template collection and its loader
- HistoryRecorder: Append-only log of executed commands
"""

from cmdrunner.core.templates.builder import build_command, render_template
from cmdrunner.core.templates.errors import (
    ClipboardUnavailable,
    CommandRunnerError,
    MissingRequiredValue,
    PersistenceError,
    SelectorFailed,
    SelectorNotFound,
    EditorFailed,
)
from cmdrunner.core.templates.history import HistoryRecorder
from cmdrunner.core.templates.models import PlaceholderToken, ResolvedParameter, Template
from cmdrunner.core.templates.parser import (
    parse_placeholders,
    parse_template_line,
    parse_template_text,
    serialize_templates,
)
from cmdrunner.core.templates.resolver import (
    ParameterResolver,
    normalize_value,
    resolve_from_mapping,
)
from cmdrunner.core.templates.store import TemplateStore, load_store

__all__ = [
    "Template",
    "PlaceholderToken",
    "ResolvedParameter",
    "parse_placeholders",
    "parse_template_line",
    "parse_template_text",
    "serialize_templates",
    "ParameterResolver",
    "normalize_value",
    "resolve_from_mapping",
    "build_command",
    "render_template",
    "TemplateStore",
    "load_store",
    "HistoryRecorder",
    "CommandRunnerError",
    "MissingRequiredValue",
    "ClipboardUnavailable",
    "PersistenceError",
    "SelectorFailed",
    "SelectorNotFound",
    "EditorFailed",
]
