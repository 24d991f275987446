"""fzf-backed template picker."""

import logging
import shlex
import shutil
import subprocess
import sys
from collections.abc import Sequence

from cmdrunner.core.runner.protocols import Selection
from cmdrunner.core.templates.errors import SelectorFailed, SelectorNotFound
from cmdrunner.utils.platform import OSType, detect_os, fzf_install_hint

logger = logging.getLogger(__name__)

COPY_KEY = "ctrl-y"
HEADER = "ESC to exit, CTRL-Y to copy command to clipboard"

# fzf exits with 1 when nothing matched and 130 when aborted with ESC/CTRL-C
NO_SELECTION_CODES = (1, 130)


def ensure_fzf(command: str = "fzf", os_type: OSType | None = None) -> str:
    """Locate the fzf executable.

    Args:
        command: Name or path of the fzf binary.
        os_type: System used for the install hint (detected when None).

    Returns:
        Absolute path of the executable.

    Raises:
        SelectorNotFound: If fzf is not on PATH.
    """
    path = shutil.which(command)
    if path is None:
        raise SelectorNotFound(command, fzf_install_hint(os_type or detect_os()))
    return path


def preview_command() -> str:
    """Shell command fzf runs to render the preview pane for ``{}``."""
    return f"{shlex.quote(sys.executable)} -m cmdrunner preview {{}}"


class FzfSelector:
    """Presents template lines in fzf with a preview pane.

    Attributes:
        command: fzf executable.
        preview: Preview command, None to disable the preview pane.
    """

    def __init__(self, command: str = "fzf", preview: str | None = None) -> None:
        self.command = command
        self.preview = preview if preview is not None else preview_command()

    def build_args(self) -> list[str]:
        """Build the fzf argument list."""
        args = [
            self.command,
            "--height",
            "100%",
            "--border",
            "--ansi",
            "--reverse",
            f"--expect={COPY_KEY}",
            "--header",
            HEADER,
        ]
        if self.preview:
            args += ["--preview", self.preview, "--preview-window=down:40%"]
        return args

    def select(self, items: Sequence[str]) -> Selection | None:
        """Run fzf over ``items``.

        Args:
            items: Template lines to choose from.

        Returns:
            Selection, or None if the picker was aborted or nothing matched.

        Raises:
            SelectorFailed: If fzf cannot be started or fails for another reason.
        """
        try:
            result = subprocess.run(
                self.build_args(),
                input="\n".join(items),
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise SelectorFailed(f"Cannot start {self.command}: {e}") from e
        if result.returncode in NO_SELECTION_CODES:
            logger.debug("fzf returned %d, nothing selected", result.returncode)
            return None
        if result.returncode != 0:
            logger.info("fzf exited with %d", result.returncode)
            raise SelectorFailed(f"{self.command} exited with status {result.returncode}")
        return parse_fzf_output(result.stdout)


def parse_fzf_output(output: str) -> Selection | None:
    """Parse fzf output produced with ``--expect``.

    The first line is the key that ended the picker (empty for Enter), the
    second line is the chosen item.

    Examples:
        >>> parse_fzf_output("\\nShow disk usage :: df -h\\n")
        Selection(line='Show disk usage :: df -h', copy_requested=False)

        >>> parse_fzf_output("ctrl-y\\nShow disk usage :: df -h\\n").copy_requested
        True
    """
    lines = output.splitlines()
    if len(lines) < 2 or not lines[1].strip():
        return None
    return Selection(line=lines[1], copy_requested=lines[0] == COPY_KEY)
