"""Shell execution of resolved commands."""

import logging
import subprocess

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class ShellRunner:
    """Runs a command line through a shell attached to the terminal.

    Attributes:
        shell: Shell executable, invoked as ``shell -c text``.
    """

    def __init__(self, shell: str = "bash") -> None:
        self.shell = shell

    def run(self, command_text: str) -> int:
        """Execute the command and wait for it.

        Args:
            command_text: Fully resolved command line.

        Returns:
            The command's exit code, 127 if the shell itself is missing.
        """
        try:
            result = subprocess.run([self.shell, "-c", command_text])
        except FileNotFoundError:
            logger.error("Shell not found: %s", self.shell)
            return COMMAND_NOT_FOUND
        logger.debug("Command exited with %d", result.returncode)
        return result.returncode
