"""Shared helpers: structured logging and platform detection."""

from cmdrunner.utils.logging import (
    configure_structured_logging,
    get_invocation_id,
    set_invocation_id,
)
from cmdrunner.utils.platform import OSType, detect_os, fzf_install_hint, open_command

__all__ = [
    "configure_structured_logging",
    "get_invocation_id",
    "set_invocation_id",
    "OSType",
    "detect_os",
    "fzf_install_hint",
    "open_command",
]
