"""Exceptions raised by ccswitch.

Every error carries a user-facing message. Commands catch ``CCSwitchError``
at the command boundary, print it, and exit non-zero.
"""


class CCSwitchError(Exception):
    """Base exception for all ccswitch errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ProfilesNotFoundError(CCSwitchError):
    """Raised when the profiles file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Profiles file not found: {path}",
            "run 'ccswitch init' to create one",
        )


class ProfilesExistError(CCSwitchError):
    """Raised by init when the profiles file already exists."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Configuration file already exists: {path}", "use --force to overwrite")


class ConfigParseError(CCSwitchError):
    """Raised when a profiles or settings file is not the JSON we expect."""

    def __init__(self, message: str, path: str | None = None, details: str | None = None):
        self.path = path
        super().__init__(message, details)


class ConfigReadError(CCSwitchError):
    """Raised when an existing file cannot be read."""

    def __init__(self, message: str, path: str | None = None, details: str | None = None):
        self.path = path
        super().__init__(message, details)


class ConfigWriteError(CCSwitchError):
    """Raised when a file or its parent directory cannot be written."""

    def __init__(self, message: str, path: str | None = None, details: str | None = None):
        self.path = path
        super().__init__(message, details)


class ProfileNotFoundError(CCSwitchError):
    """Raised when a resolved profile name is not in the profile store.

    Attributes:
        name: The profile name that was requested
        available: Sorted list of valid profile names
        default: The store's default profile name
    """

    def __init__(self, name: str, available: list[str] | None = None, default: str | None = None):
        self.name = name
        self.available = available or []
        self.default = default
        super().__init__(f"Profile '{name}' not found")


__all__ = [
    "CCSwitchError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigWriteError",
    "ProfileNotFoundError",
    "ProfilesExistError",
    "ProfilesNotFoundError",
]
