"""
VolumeCtl
Management tool for container runtime volumes and the files inside them.
"""

__version__ = "1.0.0"

from .core.volume import VolumeManager
from .core.inspection import VolumeSummary
from .core.exceptions import VolumeCtlError
