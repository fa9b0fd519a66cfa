"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDHTML_ prefix (e.g., MDHTML_MAX_LINE_SIZE=131072).

Settings can also be loaded from a .env file in the working directory.
"""

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MARKDOWN_EXTENSIONS: List[str] = [
    "extra",
    "toc",
    "smarty",
    "sane_lists",
    "codehilite",
]


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDHTML_ prefix.

    Examples:
        MDHTML_MAX_LINE_SIZE=131072
        MDHTML_VARIANT=headings
        MDHTML_HTML_LANG=de
    """

    model_config = SettingsConfigDict(
        env_prefix="MDHTML_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Resolver configuration
    max_line_size: int = Field(
        default=65536,
        ge=2,
        description="Maximum number of bytes a single source line may occupy",
    )

    variant: Literal["markdown", "headings"] = Field(
        default="markdown",
        description="Conversion variant: 'markdown' renders everything through the Markdown engine, "
        "'headings' honours :id:/:class:/:style: directives on heading lines",
    )

    # Rendering configuration
    markdown_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS),
        description="Python-Markdown extensions enabled for the 'markdown' renderer",
    )

    # Output configuration
    output_extension: str = Field(
        default=".html",
        description="Extension given to generated files",
    )

    html_lang: str = Field(
        default="en",
        description="Value of the lang attribute on the <html> element",
    )

    debug_mode: bool = Field(
        default=False,
        description="Print tracebacks for conversion failures",
    )

    def outputName_make(self, source_name: str) -> str:
        """
        Derive the output filename for a Markdown source filename.

        Args:
            source_name: Source filename (e.g., "guide.md")

        Returns:
            Filename with its extension replaced (e.g., "guide.html")

        Example:
            >>> settings = AppSettings()
            >>> settings.outputName_make('notes/guide.md')
            'notes/guide.html'
        """
        stem, dot, _ = source_name.rpartition(".")
        if not dot or "/" in source_name[len(stem):]:
            return source_name + self.output_extension
        return stem + self.output_extension


# Singleton instance - import this in your code
appsettings = AppSettings()
