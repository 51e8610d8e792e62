"""Volume management module."""
import logging
from typing import Callable, List, Optional

from .exceptions import (
    CreateFailed,
    ListFailed,
    PathEscapesVolume,
    PathNotReadable,
    PathRequired,
    RemoveFailed,
)
from .inspection import VolumeRecord, VolumeSummary, first_record
from .names import ensure_valid_name
from .paths import is_volume_root, sandboxed_path
from .runner import CommandResult, CommandRunner, read_text
from .utils import split_lines

logger = logging.getLogger(__name__)

PRUNE_CONFIRMATION = "y\n"


class VolumeManager:
    """
    Manages volumes of a container runtime and files inside them.

    Every operation is independent: names are validated and mountpoints
    resolved from the backend on each call, nothing is cached.

    Attributes:
        backend (str): Runtime executable used for ``volume`` subcommands
        runner (CommandRunner): Process invocation collaborator
        reader (Callable): Returns a file's text given an absolute path

    Example:
        >>> manager = VolumeManager()
        >>> manager.add('app-data')
        True
        >>> manager.browse('app-data', 'logs')
        ['app.log']
    """

    def __init__(
        self,
        backend: str = 'docker',
        runner: Optional[CommandRunner] = None,
        reader: Optional[Callable[[str], str]] = None,
    ):
        self.backend = backend
        self.runner = runner or CommandRunner()
        self.reader = reader or read_text

    def _volume_command(self, *args: str, input: Optional[str] = None) -> CommandResult:
        if input is None:
            return self.runner.run(self.backend, ['volume', *args])
        return self.runner.run(self.backend, ['volume', *args], input=input)

    # Volume lifecycle

    def list(self) -> List[str]:
        """
        List the names of all volumes.

        Raises:
            ListFailed: If the backend reports failure
        """
        output = self._volume_command('ls', '--format={{.Name}}')
        if not output.ok:
            raise ListFailed()
        return split_lines(output.stdout)

    def inspect(self, name: str) -> VolumeRecord:
        """
        Fetch the backend's description of a volume.

        Does not validate ``name``; public operations do that first.

        Raises:
            VolumeNotFound: If the backend knows no such volume
            MalformedBackendOutput: If the description cannot be parsed
        """
        output = self._volume_command('inspect', name)
        record = first_record(output.stdout, name)
        logger.debug(f"Volume {name} is mounted at {record.mountpoint}")
        return record

    def resolve_mountpoint(self, name: str) -> str:
        """Return the absolute storage root of a volume."""
        return self.inspect(name).mountpoint

    def show(self, name: str) -> VolumeSummary:
        """
        Describe a volume.

        Args:
            name: Volume name

        Returns:
            VolumeSummary with name, creation time and labels

        Raises:
            InvalidName: If the name fails validation
            VolumeNotFound: If the volume does not exist
        """
        ensure_valid_name(name)
        return self.inspect(name).summary()

    def add(self, name: str) -> bool:
        """
        Create a volume.

        Raises:
            InvalidName: If the name fails validation
            CreateFailed: If the backend reports failure
        """
        ensure_valid_name(name)
        output = self._volume_command('create', name)
        if not output.ok:
            raise CreateFailed(name)
        logger.info(f"Created volume {name}")
        return True

    def remove(self, name: str) -> bool:
        """
        Remove a volume.

        Raises:
            InvalidName: If the name fails validation
            RemoveFailed: If the backend reports failure
        """
        ensure_valid_name(name)
        output = self._volume_command('rm', name)
        if not output.ok:
            raise RemoveFailed(name)
        logger.info(f"Removed volume {name}")
        return True

    def prune(self) -> str:
        """
        Remove unused volumes.

        The backend's result is logged, never raised.

        Returns:
            An empty string once the command has run
        """
        output = self._volume_command('prune', input=PRUNE_CONFIRMATION)
        if output.ok:
            logger.info("Pruned unused volumes")
        else:
            logger.warning("Volume prune reported failure")
        return ''

    # Files inside a volume

    def _resolve_path(self, name: str, path: Optional[str] = None) -> str:
        mountpoint = self.resolve_mountpoint(name)
        return sandboxed_path(mountpoint, path)

    def browse(self, name: str, path: Optional[str] = None) -> List[str]:
        """
        List entries of a directory inside a volume.

        Args:
            name: Volume name
            path: Directory relative to the volume root; the root if omitted

        Returns:
            Entry names in the order the listing command prints them
        """
        ensure_valid_name(name)
        target = self._resolve_path(name, path)
        output = self.runner.run('ls', ['-1', target])
        if not output.ok:
            logger.warning(f"Listing {target} reported failure")
        return split_lines(output.stdout)

    def read_file(self, name: str, path: Optional[str] = None) -> str:
        """
        Read a file inside a volume as text.

        Raises:
            PathRequired: If no path is given
            PathNotReadable: If the file is missing or unreadable
        """
        ensure_valid_name(name)
        if not path:
            raise PathRequired()

        target = self._resolve_path(name, path)
        try:
            return self.reader(target)
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise PathNotReadable(target, reason)

    def delete_path(self, name: str, path: Optional[str] = None) -> bool:
        """
        Recursively delete a file or directory inside a volume.

        The volume root itself cannot be deleted this way.

        Returns:
            Whether the removal command succeeded
        """
        ensure_valid_name(name)
        if not path:
            raise PathRequired()

        mountpoint = self.resolve_mountpoint(name)
        target = sandboxed_path(mountpoint, path, follow_symlinks=False)
        if is_volume_root(mountpoint, target):
            raise PathEscapesVolume(path, mountpoint)

        output = self.runner.run('rm', ['-r', target])
        if output.ok:
            logger.info(f"Deleted {target} from volume {name}")
        return output.ok

    def fix_permissions(self, name: str) -> bool:
        """Make everything in a volume world-writable."""
        ensure_valid_name(name)
        mountpoint = self.resolve_mountpoint(name)
        output = self.runner.run('chmod', ['-R', 'a+w', mountpoint])
        if output.ok:
            logger.info(f"Fixed permissions on volume {name}")
        return output.ok
