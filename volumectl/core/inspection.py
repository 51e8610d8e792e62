"""
Parsing of ``volume inspect`` output.

The backend prints a JSON array of volume description records. Records are
validated against INSPECT_RECORD_SCHEMA before any field is read, so callers
only ever see a VolumeRecord built from well-formed data.
"""

import json
import logging
import posixpath
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from .exceptions import MalformedBackendOutput, VolumeNotFound

logger = logging.getLogger(__name__)

INSPECT_RECORD_SCHEMA = {
    "type": "object",
    "required": ["Name", "CreatedAt", "Mountpoint"],
    "properties": {
        "Name": {"type": "string", "minLength": 1},
        "CreatedAt": {"type": "string"},
        "Mountpoint": {"type": "string", "minLength": 1},
        "Labels": {
            "type": ["object", "null"],
            "additionalProperties": {"type": "string"},
        },
        "Driver": {"type": "string"},
        "Scope": {"type": "string"},
    },
}

_record_validator = Draft7Validator(INSPECT_RECORD_SCHEMA)


@dataclass(frozen=True)
class VolumeSummary:
    """Public description of a volume returned by ``show``."""
    name: str
    created_at: str
    labels: Dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "createdAt": self.created_at,
            "labels": dict(self.labels),
        }


@dataclass(frozen=True)
class VolumeRecord:
    """One validated element of the inspection array."""
    name: str
    created_at: str
    mountpoint: str
    labels: Dict[str, str] = field(default_factory=dict)
    driver: Optional[str] = None
    scope: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VolumeRecord":
        error = best_match(_record_validator.iter_errors(data))
        if error is not None:
            location = "/".join(str(p) for p in error.path) or "record"
            raise MalformedBackendOutput(f"{location}: {error.message}")

        mountpoint = data["Mountpoint"]
        if not posixpath.isabs(mountpoint):
            raise MalformedBackendOutput(f"Mountpoint is not absolute: {mountpoint}")

        return cls(
            name=data["Name"],
            created_at=data["CreatedAt"],
            mountpoint=mountpoint,
            labels=dict(data.get("Labels") or {}),
            driver=data.get("Driver"),
            scope=data.get("Scope"),
        )

    def summary(self) -> VolumeSummary:
        return VolumeSummary(
            name=self.name,
            created_at=self.created_at,
            labels=dict(self.labels),
        )


def parse_inspect_output(stdout: str) -> List[Dict[str, Any]]:
    """
    Decode inspection stdout into a list of raw records.

    Args:
        stdout: Text printed by ``volume inspect``

    Returns:
        The decoded array, possibly empty

    Raises:
        MalformedBackendOutput: If stdout is blank, not JSON, or not an array
    """
    if not stdout or not stdout.strip():
        raise MalformedBackendOutput("empty inspection output", stdout or "")

    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        raise MalformedBackendOutput(f"invalid JSON ({e.msg})", stdout)

    if not isinstance(data, list):
        raise MalformedBackendOutput(
            f"expected a JSON array, got {type(data).__name__}", stdout
        )
    return data


def first_record(stdout: str, name: Optional[str] = None) -> VolumeRecord:
    """
    Return the first validated record from inspection output.

    Raises:
        VolumeNotFound: If the array is empty
        MalformedBackendOutput: If the output or the record is malformed
    """
    records = parse_inspect_output(stdout)
    if not records:
        raise VolumeNotFound(name)

    if len(records) > 1:
        logger.debug(f"Inspection returned {len(records)} records, using the first")
    return VolumeRecord.from_dict(records[0])
