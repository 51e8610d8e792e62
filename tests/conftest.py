"""
Pytest configuration and fixtures for the volumectl tests.

The process collaborator is replaced by FakeRunner, which records every
invocation and replays queued results.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from volumectl.core.runner import CommandResult
from volumectl.core.volume import VolumeManager

MOUNTPOINT = '/var/lib/docker/volumes/test/_data'

INSPECT_OUTPUT = """[{
"CreatedAt": "2023-03-10T10:15:10Z",
"Driver": "local",
"Labels": {
  "origin": "test/container",
  "version": "534524"
},
"Mountpoint": "/var/lib/docker/volumes/test/_data",
"Name": "test",
"Options": {},
"Scope": "local"
}]"""


class FakeRunner:
    """Records calls and returns queued results, or a default result."""

    def __init__(self, *results, default=None):
        self.results = list(results)
        self.default = default or CommandResult(ok=True, stdout='')
        self.calls = []
        self.inputs = []

    def run(self, executable, args, input=None):
        self.calls.append((executable, list(args)))
        self.inputs.append(input)
        if self.results:
            return self.results.pop(0)
        return self.default


def ok(stdout=''):
    return CommandResult(ok=True, stdout=stdout)


def failed(stdout=''):
    return CommandResult(ok=False, stdout=stdout, returncode=1)


@pytest.fixture
def inspect_output():
    return INSPECT_OUTPUT


@pytest.fixture
def make_manager():
    """Build a VolumeManager around a FakeRunner with the given results."""
    def factory(*results, default=None, reader=None):
        runner = FakeRunner(*results, default=default)
        return VolumeManager(runner=runner, reader=reader), runner
    return factory


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the user's config and log directories."""
    for key in ('VOLUMECTL_BACKEND', 'VOLUMECTL_TIMEOUT', 'VOLUMECTL_DEBUG',
                'VOLUMECTL_CONFIG', 'VOLUMECTL_LOG_DIR'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr('volumectl.core.config.DEFAULT_CONFIG_PATH',
                        tmp_path / 'missing' / 'config.yaml')
    monkeypatch.setenv('VOLUMECTL_LOG_DIR', str(tmp_path / 'logs'))
    monkeypatch.chdir(tmp_path)
