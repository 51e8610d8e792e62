from .exceptions import (
    VolumeCtlError,
    ConfigurationError,
    InvalidName,
    PathRequired,
    PathEscapesVolume,
    VolumeNotFound,
    MalformedBackendOutput,
    ListFailed,
    CreateFailed,
    RemoveFailed,
    PathNotReadable,
)
from .names import is_valid_name
from .paths import sandboxed_path
from .volume import VolumeManager
