"""Configuration management for nssh."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="NSSH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Locations
    home: Path = Field(default_factory=Path.home, description="Base directory for dotfiles")
    dsh_dir: Path | None = Field(None, description="Directory holding dsh-style machine lists")
    last_file: Path | None = Field(None, description="File holding the last host returned by next")

    # Lists
    list_prefix: str = Field(default="machines.", description="Prefix turning --list NAME into a file name")
    default_list: str = Field(default="machines.list", description="List used by next when --list is absent")
    skip_disabled: bool = Field(default=False, description="Exclude disabled entries from next")

    # Handoff
    ssh_program: str = Field(default="ssh", description="Remote-login program")
    hostname_env: str = Field(default="LC_UI_HOSTNAME", description="Variable carrying the display hostname")
    resolve_names: bool = Field(default=True, description="Resolve the hostname through DNS before connecting")

    # Screen configuration generator
    screenrc: Path | None = Field(None, description="Screen configuration file with a generated block")
    screen_lists: list[str] = Field(default_factory=list, description="Lists rendered into the screen config")
    screen_window_gap: int = Field(default=10, description="Window numbers skipped after existing windows")
    screen_host_command: str = Field(default="dstat -lrvn 60", description="Command run after login")
    screen_list_command: str = Field(default="cl-netstat.pl --list {list}", description="List overview command")

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: str = Field(default="default", description="Log profile (default or rich)")

    @model_validator(mode="after")
    def _fill_home_paths(self) -> Settings:
        if self.dsh_dir is None:
            self.dsh_dir = self.home / ".dsh"
        if self.last_file is None:
            self.last_file = self.home / ".nssh-last"
        if self.screenrc is None:
            self.screenrc = self.home / ".screenrc-main"
        return self


def load_settings(home: Path | None = None) -> Settings:
    """Load settings from the environment.

    Args:
        home: Optional home directory override

    Returns:
        Settings instance
    """
    if home is None:
        return Settings()
    return Settings(home=home)
