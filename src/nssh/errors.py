"""Application-level exception types for nssh."""

from __future__ import annotations


class NsshError(Exception):
    """Base exception for nssh."""

    exit_code = 1


class ConfigurationError(NsshError):
    """Base exception for configuration and on-disk state errors."""


class ListNotFoundError(ConfigurationError):
    """Raised when a named host list file does not exist."""

    def __init__(self, list_name: str, path: object) -> None:
        super().__init__(f"{path} does not exist on the filesystem. --list {list_name} is not valid.")
        self.list_name = list_name
        self.path = path


class ListReadError(ConfigurationError):
    """Raised when a named host list exists but cannot be read."""


class CursorFileError(ConfigurationError):
    """Raised when the persisted cursor file cannot be understood."""


class ScreenConfigError(ConfigurationError):
    """Raised when the screen configuration file has unbalanced sentinels."""


class ListStateError(NsshError):
    """Base exception for cursor walks that cannot produce a host."""


class EmptyListError(ListStateError):
    """Raised when a named list has no usable entries."""


class EndOfListError(ListStateError):
    """Raised when the cursor already points at the last entry."""


class StaleCursorError(ListStateError):
    """Raised when the cursor host is not present in the list."""


class ArgumentError(NsshError):
    """Base exception for command-line classification errors."""

    exit_code = 2


class MissingArgumentValueError(ArgumentError):
    """Raised when a value-taking option is the last token."""

    def __init__(self, option: str) -> None:
        super().__init__(f"option {option} requires a value")
        self.option = option


class MissingTargetError(ArgumentError):
    """Raised when no hostname, next or reset was given."""


class ResolutionError(NsshError):
    """Raised when a hostname cannot be resolved."""


class LaunchError(NsshError):
    """Raised when the remote-login program cannot be started."""
