"""Terminal input and output through click."""

import click

STYLES = {
    "title": "blue",
    "info": "yellow",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


class TerminalIO:
    """Implements the Terminal protocol on the controlling terminal."""

    def prompt(self, label: str) -> str:
        """Show ``label`` and read one line; Enter alone returns ""."""
        click.echo(f"{label}:")
        return click.prompt("", default="", show_default=False, prompt_suffix="> ")

    def read_key(self, label: str) -> str:
        """Show ``label`` and read one keypress without echoing it."""
        click.echo(label, nl=False)
        key = click.getchar(echo=False)
        click.echo()
        return key

    def echo(self, message: str = "", style: str | None = None) -> None:
        if style in STYLES:
            click.secho(message, fg=STYLES[style])
        else:
            click.echo(message)

    def pause(self, message: str = "Press Enter to continue...") -> None:
        """Show ``message`` and wait for Enter."""
        click.prompt(message, default="", show_default=False, prompt_suffix="")

    def clear(self) -> None:
        click.clear()
