"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use CLANSI_ prefix (e.g., CLANSI_USE_ANSI=false).

Settings can also be loaded from a .env file in the project root.
"""

import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use CLANSI_ prefix.

    Examples:
        CLANSI_USE_ANSI=false
        CLANSI_STYLES_FILE=~/.config/clansi/styles.yaml
        CLANSI_HONOR_NO_COLOR=false
    """

    model_config = SettingsConfigDict(
        env_prefix="CLANSI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    use_ansi: bool = Field(
        default=True,
        description="Initial value of the styling-enabled switch",
    )

    honor_no_color: bool = Field(
        default=True,
        description="Start with styling disabled when NO_COLOR is set in the environment",
    )

    styles_file: Optional[str] = Field(
        default=None,
        description="YAML style sheet merged into the style table by the CLI",
    )

    reset_directive: str = Field(
        default="reset",
        description="Directive substituted for unknown directive names",
    )

    def ansiDefault_resolve(self) -> bool:
        """
        Initial styling switch value, taking NO_COLOR into account.

        Returns:
            False if NO_COLOR is honored and set, else ``use_ansi``

        Example:
            >>> AppSettings(use_ansi=True, honor_no_color=False).ansiDefault_resolve()
            True
        """
        if self.honor_no_color and os.getenv("NO_COLOR") is not None:
            return False
        return self.use_ansi


# Singleton instance - import this in your code
appsettings = AppSettings()
