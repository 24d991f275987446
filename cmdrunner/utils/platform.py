"""Operating system detection and platform specific strings."""

import platform
from enum import Enum


class OSType(str, Enum):
    """Operating systems the runner distinguishes."""

    LINUX = "Linux"
    MACOS = "macOS"
    WINDOWS = "Windows"
    OTHER = "Other"


def detect_os(system: str | None = None) -> OSType:
    """Map ``platform.system()`` onto an OSType.

    Args:
        system: Value to classify instead of the running system.

    Returns:
        The detected OSType.
    """
    name = system if system is not None else platform.system()
    if name.startswith("Linux"):
        return OSType.LINUX
    if name.startswith("Darwin"):
        return OSType.MACOS
    if name.startswith("Windows"):
        return OSType.WINDOWS
    return OSType.OTHER


def open_command(os_type: OSType) -> str:
    """Command that opens a file with its default application."""
    if os_type is OSType.MACOS:
        return "open"
    if os_type is OSType.LINUX:
        return "xdg-open"
    if os_type is OSType.WINDOWS:
        return "start"
    return "echo 'Opening files not supported on this OS:'"


def fzf_install_hint(os_type: OSType) -> str:
    """Installation instructions for fzf on the given system."""
    lines = ["Error: This program requires fzf to be installed."]
    if os_type is OSType.MACOS:
        lines.append("Please install it with Homebrew: brew install fzf")
    elif os_type is OSType.LINUX:
        lines.extend(
            [
                "Please install it with your package manager:",
                "  Ubuntu/Debian: sudo apt install fzf",
                "  Fedora: sudo dnf install fzf",
                "  Arch: sudo pacman -S fzf",
            ]
        )
    lines.append("Or visit https://github.com/junegunn/fzf for instructions.")
    return "\n".join(lines)
