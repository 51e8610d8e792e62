"""Custom exceptions for VolumeCtl."""
from typing import Optional


class VolumeCtlError(Exception):
    """Base exception for all VolumeCtl errors."""
    pass


class ConfigurationError(VolumeCtlError):
    """Raised when the configuration file or a setting is invalid."""
    pass


class InvalidName(VolumeCtlError):
    """Raised when a volume name does not match the name grammar."""
    def __init__(self, name=None):
        self.name = name
        super().__init__("Invalid name")


class PathRequired(VolumeCtlError):
    """Raised when an operation needs a path inside the volume and got none."""
    def __init__(self):
        super().__init__("Path not specified")


class PathEscapesVolume(VolumeCtlError):
    """Raised when a relative path resolves outside the volume's mountpoint."""
    def __init__(self, path: str, mountpoint: Optional[str] = None):
        self.path = path
        self.mountpoint = mountpoint
        super().__init__(f"Path escapes volume: {path}")


class VolumeNotFound(VolumeCtlError):
    """Raised when the backend reports no volume for a name."""
    def __init__(self, name: Optional[str] = None):
        self.name = name
        super().__init__("Volume not found")


class MalformedBackendOutput(VolumeCtlError):
    """Raised when backend output cannot be parsed into the expected shape."""
    def __init__(self, detail: str, output: str = ""):
        self.detail = detail
        self.output = output
        super().__init__(f"Malformed backend output: {detail}")


class BackendCommandError(VolumeCtlError):
    """Base for backend commands that reported failure."""
    message = "Backend command failed"

    def __init__(self, name: Optional[str] = None):
        self.name = name
        super().__init__(self.message)


class ListFailed(BackendCommandError):
    message = "Unable to list volumes"


class CreateFailed(BackendCommandError):
    message = "Unable to create volume"


class RemoveFailed(BackendCommandError):
    message = "Unable to remove volume"


class PathNotReadable(VolumeCtlError):
    """Raised when a file inside a volume cannot be read."""
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Unable to read {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def format_error(error: Exception) -> str:
    """
    Convert an error to a user-friendly message.

    Args:
        error: The error to format

    Returns:
        A formatted error message
    """
    if isinstance(error, InvalidName) and error.name is not None:
        return (f"Invalid name: {error.name!r}\n"
                "  Names start with a lowercase letter followed by "
                "lowercase letters, digits or hyphens.")
    elif isinstance(error, VolumeNotFound) and error.name:
        return f"Volume not found: {error.name}"
    elif isinstance(error, PathEscapesVolume) and error.mountpoint:
        return (f"Path escapes volume: {error.path}\n"
                f"  Paths must stay inside {error.mountpoint}")
    elif isinstance(error, BackendCommandError) and error.name:
        return f"{error}: {error.name}"
    else:
        return str(error)
