"""Command line interface: typer app and terminal adapters.

This module provides:
- app, main: typer application and console entry point
- FzfSelector: fzf-backed template picker
- PyperclipClipboard: clipboard sink
- ShellRunner: shell execution of resolved commands
- ClickEditor: template editing in $EDITOR
- TerminalIO: line prompt and output
"""

from cmdrunner.interfaces.cli.app import app, main
from cmdrunner.interfaces.cli.clipboard import PyperclipClipboard
from cmdrunner.interfaces.cli.editor import ClickEditor
from cmdrunner.interfaces.cli.fzf import FzfSelector, ensure_fzf
from cmdrunner.interfaces.cli.shell import ShellRunner
from cmdrunner.interfaces.cli.terminal import TerminalIO

__all__ = [
    "app",
    "main",
    "FzfSelector",
    "ensure_fzf",
    "PyperclipClipboard",
    "ClickEditor",
    "ShellRunner",
    "TerminalIO",
]
