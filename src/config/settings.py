"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SLIDEMARK_ prefix (e.g., SLIDEMARK_VERBOSITY=3).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SLIDEMARK_ prefix.

    Examples:
        SLIDEMARK_INDENT_WIDTH=4
        SLIDEMARK_VERBOSITY=3
    """

    model_config = SettingsConfigDict(
        env_prefix="SLIDEMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Tokenizer configuration
    indent_width: int = Field(
        default=2,
        ge=1,
        description="Number of leading spaces that make up one list indent level",
    )

    max_indent_level: int = Field(
        default=5,
        ge=0,
        le=5,
        description="Deepest list indent level; deeper indentation saturates here",
    )

    max_heading_level: int = Field(
        default=5,
        ge=1,
        le=5,
        description="Deepest heading level; extra '#' characters saturate here",
    )

    # Logging configuration
    verbosity: int = Field(
        default=0,
        ge=0,
        description="Logging verbosity (0=silent, 1=normal, 2=structure, 3=token trace)",
    )

    def indentLevel_fromSpaces(self, count: int) -> int:
        """
        Quantize a leading-space count into an indent level.

        Args:
            count: Number of leading spaces on the line

        Returns:
            Indent level in the range 0..max_indent_level

        Example:
            >>> settings = AppSettings()
            >>> settings.indentLevel_fromSpaces(5)
            2
            >>> settings.indentLevel_fromSpaces(40)
            5
        """
        return min(max(count, 0) // self.indent_width, self.max_indent_level)


# Singleton instance - import this in your code
appsettings = AppSettings()
