"""Core configuration settings for Commentor.

@public

Settings are loaded from environment variables with .env file support via
pydantic-settings. Every variable carries the ``COMMENTOR_`` prefix.

Environment variables:
    COMMENTOR_FILE_EXTENSIONS: JSON list of source extensions (default [".cs"])
    COMMENTOR_SKIP_DIRS: JSON list of directory names never descended into
    COMMENTOR_ENCODING: Text encoding used to read and write sources
    COMMENTOR_PUBLIC_ONLY: Only report members declared public
    COMMENTOR_DISTINGUISH_SETTERS: Use "Gets or Sets" for properties with setters

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from commentor.settings import settings
    >>> print(settings.file_extensions)
    ['.cs']

Note:
    Settings are loaded once at module import and frozen. Pass an explicit
    Settings instance to the runner to override them for a single run.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for analysis and fixing runs.

    @public

    Attributes:
        file_extensions: Extensions (with dot) of files the runner analyzes.

        skip_dirs: Directory names skipped while expanding directories,
                   typically build output and VCS metadata.

        encoding: Encoding used for reading and writing source files.

        public_only: When True, members without a ``public`` modifier
                     (interface members count as public) are not reported.
                     Defaults to False, reporting every declared member.

        distinguish_setters: When True, properties with a setter get a
                             "Gets or Sets the ..." summary instead of
                             "Gets the ...". Defaults to False.

    Example:
        >>> custom = Settings(public_only=True)
        >>> custom.public_only
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="COMMENTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Discovery
    file_extensions: list[str] = [".cs"]
    skip_dirs: list[str] = ["bin", "obj", ".git", ".vs", "node_modules"]
    encoding: str = "utf-8"

    # Analysis
    public_only: bool = False
    distinguish_setters: bool = False


settings = Settings()
"""Global settings instance used when no explicit Settings is passed.

@public
"""
