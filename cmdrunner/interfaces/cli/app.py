# cmdrunner/interfaces/cli/app.py
"""Command line entry point.

Provides the interactive menu (search and run, custom command, edit
templates) plus non-interactive helpers used by scripts and by the fzf
preview pane.

Example:
    $ cmdrunner                      # interactive menu
    $ cmdrunner --catalog aws        # AWS IAM/SSO templates
    $ cmdrunner list
    $ cmdrunner build "List all files in specified directory :: ls -la {DIRECTORY}" -p DIRECTORY=/tmp
"""

import logging
import time
from typing import List, Optional

import typer
from dotenv import load_dotenv

from cmdrunner.config import Settings, settings
from cmdrunner.core.runner.session import CommandSession, RunOutcome
from cmdrunner.core.templates.builder import build_command
from cmdrunner.core.templates.errors import MissingRequiredValue, PersistenceError, SelectorNotFound
from cmdrunner.core.templates.history import HistoryRecorder
from cmdrunner.core.templates.parser import (
    find_optional_segments,
    parse_placeholders,
    split_template_line,
)
from cmdrunner.core.templates.resolver import resolve_from_mapping
from cmdrunner.core.templates.store import TemplateStore, load_store
from cmdrunner.interfaces.cli.clipboard import PyperclipClipboard
from cmdrunner.interfaces.cli.editor import ClickEditor
from cmdrunner.interfaces.cli.fzf import FzfSelector, ensure_fzf
from cmdrunner.interfaces.cli.shell import ShellRunner
from cmdrunner.interfaces.cli.terminal import TerminalIO
from cmdrunner.utils.logging import configure_structured_logging
from cmdrunner.utils.platform import OSType, detect_os

# Export .env entries such as EDITOR to the environment
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cmdrunner",
    help="Search command templates, fill in their placeholders and run them.",
    add_completion=False,
)

INTRO_LINES = (
    "Start typing to search, use arrow keys to navigate, Enter to execute",
    "Commands with {PLACEHOLDERS} will prompt for values before execution",
    "Parameters in [--option {PARAMETER}] are optional and can be skipped",
)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else settings


def _load(app_settings: Settings, os_type: OSType) -> tuple[TemplateStore, HistoryRecorder]:
    history = HistoryRecorder(app_settings.history_path)
    try:
        store = load_store(app_settings, os_type, history)
    except PersistenceError as e:
        logger.info("Loading templates without history: %s", e)
        typer.secho(f"Warning: {e}", fg=typer.colors.YELLOW, err=True)
        store = load_store(app_settings, os_type, None)
    return store, history


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    catalog: Optional[str] = typer.Option(
        None, "--catalog", "-c", help="Template catalog: general or aws"
    ),
    history_path: Optional[str] = typer.Option(
        None, "--history-path", help="History log file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
):
    """Interactive command template runner."""
    update: dict[str, object] = {}
    if catalog is not None:
        if catalog not in ("general", "aws"):
            typer.secho(f"Unknown catalog: {catalog}", fg=typer.colors.RED, err=True)
            raise typer.Exit(2)
        update["catalog"] = catalog
    if history_path is not None:
        update["history_path"] = history_path
    if verbose:
        update["log_level"] = "DEBUG"
    app_settings = settings.model_copy(update=update)
    ctx.obj = app_settings

    configure_structured_logging(app_settings.log_level, app_settings.log_file)

    if ctx.invoked_subcommand is None:
        run_menu(app_settings)


@app.command("run")
def run_cmd(ctx: typer.Context):
    """Open the interactive menu."""
    run_menu(_settings(ctx))


@app.command("list")
def list_cmd(ctx: typer.Context):
    """Print every template as a "description :: command" line."""
    store, _ = _load(_settings(ctx), detect_os())
    for line in store.lines():
        typer.echo(line)


@app.command("preview")
def preview_cmd(line: str = typer.Argument(..., help="Template line to describe")):
    """Describe a template line (used by the fzf preview pane)."""
    typer.echo(describe_line(line))


@app.command("build")
def build_cmd(
    line: str = typer.Argument(..., help='Template line or bare command with {PLACEHOLDERS}'),
    params: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Placeholder value as NAME=VALUE (repeatable)"
    ),
):
    """Resolve a template without prompting and print the command."""
    values = {}
    for item in params or []:
        name, sep, value = item.partition("=")
        if not sep:
            typer.secho(f"Invalid --param, expected NAME=VALUE: {item}", fg=typer.colors.RED, err=True)
            raise typer.Exit(2)
        values[name.strip()] = value

    _, raw_command = split_template_line(line)
    try:
        parameters = resolve_from_mapping(parse_placeholders(raw_command), values)
    except MissingRequiredValue as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)
    typer.echo(build_command(raw_command, parameters))


def describe_line(line: str) -> str:
    """Render the preview text for a template line.

    Lists the description, the command, the required parameters and the
    ``[--option {PARAMETER}]`` segments.
    """
    description, raw_command = split_template_line(line)
    tokens = parse_placeholders(raw_command)
    required = [t for t in tokens if not t.is_optional_group]
    optional = find_optional_segments(raw_command)

    out = [
        f"Description: {typer.style(description, fg=typer.colors.YELLOW)}",
        "",
        f"Command: {typer.style(raw_command, fg=typer.colors.GREEN)}",
        "",
        "Required Parameters: ",
    ]
    if required:
        out += [f"  {typer.style(t.text, fg=typer.colors.BLUE)}" for t in required]
    else:
        out.append("  None")
    out += ["", "Optional Parameters: "]
    if optional:
        out += [f"  {typer.style(s, fg=typer.colors.GREEN)}" for s in optional]
    else:
        out.append("  None")
    return "\n".join(out)


def _finish(terminal: TerminalIO, outcome: RunOutcome) -> None:
    if outcome.status == "cancelled":
        terminal.pause(f"{outcome.message} Press Enter to continue...")
    elif outcome.status == "copied":
        terminal.pause("Press Enter to return to menu...")
    elif outcome.status == "executed":
        terminal.pause("Press Enter to continue...")
    else:
        terminal.echo(outcome.message)
        time.sleep(1)


def run_menu(app_settings: Settings) -> None:
    """Run the interactive menu until the user exits.

    Raises:
        typer.Exit: With status 1 if fzf is not installed.
    """
    os_type = detect_os()
    try:
        ensure_fzf(app_settings.fzf_command, os_type)
    except SelectorNotFound as e:
        typer.echo(e.hint, err=True)
        raise typer.Exit(1)

    store, history = _load(app_settings, os_type)
    terminal = TerminalIO()
    session = CommandSession(
        store=store,
        history=history,
        terminal=terminal,
        runner=ShellRunner(app_settings.shell),
        clipboard=PyperclipClipboard(os_type),
        editor=ClickEditor(app_settings.editor),
    )
    selector = FzfSelector(app_settings.fzf_command)

    while True:
        terminal.clear()
        terminal.echo(f"=== {app_settings.menu_title} ({os_type.value}) ===", style="title")
        terminal.echo("1. Search and run commands", style="success")
        terminal.echo("2. Enter custom command", style="success")
        terminal.echo("3. Edit command templates", style="success")
        terminal.echo("4. Exit", style="success")

        choice = typer.prompt("Choose an option (1-4)", default="", show_default=False).strip()

        if choice == "1":
            terminal.clear()
            terminal.echo("Interactive Command Runner", style="title")
            for intro in INTRO_LINES:
                terminal.echo(intro, style="info")
            terminal.echo()
            outcome = session.search_and_run(selector)
            if outcome is None:
                terminal.echo("No command selected.", style="warning")
                time.sleep(1)
            else:
                _finish(terminal, outcome)
        elif choice == "2":
            terminal.clear()
            command = typer.prompt("Command", default="", show_default=False, prompt_suffix=" > ")
            _finish(terminal, session.run_custom(command))
        elif choice == "3":
            terminal.clear()
            if session.edit_templates():
                terminal.pause("Command templates updated. Press Enter to continue...")
            else:
                terminal.pause("Command templates unchanged. Press Enter to continue...")
        elif choice == "4":
            terminal.echo("Exiting Command Runner. Goodbye!", style="info")
            return
        else:
            terminal.echo("Invalid option. Please try again.", style="warning")
            time.sleep(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
