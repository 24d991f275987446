"""Runner module driving a template from selection to execution.

This module provides:
- CommandSession: Session controller over a TemplateStore
- RunOutcome: Result of one run attempt
- Selection and the collaborator protocols (Terminal, Selector,
  ClipboardSink, CommandRunner, TemplateEditor)
"""

from cmdrunner.core.runner.protocols import (
    ClipboardSink,
    CommandRunner,
    Selection,
    Selector,
    TemplateEditor,
    Terminal,
)
from cmdrunner.core.runner.session import CommandSession, RunOutcome

__all__ = [
    "CommandSession",
    "RunOutcome",
    "Selection",
    "Terminal",
    "Selector",
    "ClipboardSink",
    "CommandRunner",
    "TemplateEditor",
]
