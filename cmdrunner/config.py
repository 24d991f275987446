# cmdrunner/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
Every field can be set with a CMDRUNNER_ prefixed variable or in a .env file.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Template sources
    catalog: Literal["general", "aws"] = "general"
    extra_templates_path: str = ""  # Optional "description :: command" file
    include_history: bool = True

    # History log, one "Custom command from history :: <command>" per line
    history_path: str = "./.command_runner_history"

    # External collaborators
    editor: str = ""  # Falls back to $EDITOR, then nano
    shell: str = "bash"
    fzf_command: str = "fzf"

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""  # Empty logs to stderr

    model_config = SettingsConfigDict(
        env_prefix="CMDRUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )

    @property
    def menu_title(self) -> str:
        """Get the heading shown above the main menu.

        Returns:
            "AWS Command Runner Menu" for the aws catalog,
            "Command Runner Menu" otherwise.
        """
        if self.catalog == "aws":
            return "AWS Command Runner Menu"
        return "Command Runner Menu"


# Singleton instance - import this in your code
settings = Settings()
