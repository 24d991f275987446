"""Clipboard sink backed by pyperclip."""

import logging
import shutil

import pyperclip

from cmdrunner.core.templates.errors import ClipboardUnavailable
from cmdrunner.utils.platform import OSType, detect_os

logger = logging.getLogger(__name__)

# Helper programs pyperclip shells out to, per system
CLIPBOARD_PROGRAMS = {
    OSType.MACOS: ("pbcopy",),
    OSType.LINUX: ("xclip", "xsel", "wl-copy"),
}


class PyperclipClipboard:
    """Copies text with pyperclip after checking a backend is installed.

    Attributes:
        os_type: System whose clipboard programs are checked.
    """

    def __init__(self, os_type: OSType | None = None) -> None:
        self.os_type = os_type or detect_os()

    def available(self) -> bool:
        """Check whether a supported clipboard mechanism is installed.

        Windows has a native clipboard; macOS needs pbcopy and Linux one of
        xclip, xsel or wl-copy. Other systems are unsupported.
        """
        if self.os_type is OSType.WINDOWS:
            return True
        programs = CLIPBOARD_PROGRAMS.get(self.os_type, ())
        return any(shutil.which(p) for p in programs)

    def copy(self, text: str) -> None:
        """Copy text to the clipboard.

        Raises:
            ClipboardUnavailable: If no mechanism is installed or the copy fails.
        """
        if not self.available():
            raise ClipboardUnavailable(
                "Please install xclip or wl-copy"
                if self.os_type is OSType.LINUX
                else "Clipboard not supported on this OS"
            )
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.info("Clipboard copy failed: %s", e)
            raise ClipboardUnavailable(str(e)) from e
