"""Value objects passed between the steps of an upload run.

Each one is built once by the step that owns it and never mutated.
"""

from __future__ import annotations

import base64
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AccessDescriptor:
    """Repository coordinates and credential parsed from the raw URL."""

    owner: str
    repo_name: str
    branch: str
    remote_path: str
    token: str = field(repr=False)

    @property
    def repo(self) -> str:
        return f"{self.owner}/{self.repo_name}"


@dataclass(frozen=True)
class LocalFile:
    path: str
    size_bytes: int
    raw_bytes: bytes = field(repr=False)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def encoded_content(self) -> str:
        return base64.b64encode(self.raw_bytes).decode("ascii")


@dataclass(frozen=True)
class RemoteFileState:
    """Whether the target path exists, and its ``sha`` when it does."""

    exists: bool
    version_marker: Optional[str] = None

    def __post_init__(self):
        if self.exists and not self.version_marker:
            raise ValueError("an existing remote file needs a version marker")
        if not self.exists and self.version_marker is not None:
            raise ValueError("an absent remote file has no version marker")

    @classmethod
    def absent(cls) -> "RemoteFileState":
        return cls(exists=False)

    @classmethod
    def present(cls, sha: str) -> "RemoteFileState":
        return cls(exists=True, version_marker=sha)


@dataclass(frozen=True)
class WriteRequest:
    commit_message: str
    encoded_content: str = field(repr=False)
    branch: str
    version_marker: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the PUT call; ``sha`` only when updating."""
        payload = {
            "message": self.commit_message,
            "content": self.encoded_content,
            "branch": self.branch,
        }
        if self.version_marker is not None:
            payload["sha"] = self.version_marker
        return payload


@dataclass(frozen=True)
class WriteResult:
    success: bool
    new_commit_id: Optional[str] = None
