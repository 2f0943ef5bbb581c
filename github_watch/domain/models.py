from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from .value_objects import Fingerprint


class FileReference(BaseModel):
    """Value object pinning one file of a repository to a revision."""

    owner: str = Field(min_length=1)
    repository: str = Field(min_length=1)
    revision: str = Field(min_length=1)
    path: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repository}"

    def display(self) -> str:
        return f"{self.slug}/{self.path} (ref: {self.revision})"


@dataclass(slots=True)
class WatchSession:
    """State of one running watch: what is polled and against which baseline."""

    target: FileReference
    baseline: Fingerprint
    poll_interval: float
    attempts: int = 0
