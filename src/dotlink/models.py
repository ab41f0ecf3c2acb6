"""Shared models and enums for dotlink."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from .paths import RelativePath


class EntryState(str, Enum):
    """How a repository entry relates to the configured mappings."""

    MAPPED = "mapped"
    UNMAPPED = "unmapped"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class RepositoryEntry:
    """A path discovered under the repository root, or a missing mapping."""

    path: RelativePath
    state: EntryState


class LinkState(str, Enum):
    """States reported by ``dotlink status``."""

    INVALID = "invalid"
    LINKED = "linked"
    UNLINKED = "unlinked"
    CONFLICT_WRONG_TARGET = "conflict_wrong_target"
    CONFLICT_NO_LINK = "conflict_no_link"
    UNMAPPED = "unmapped"


@dataclass(frozen=True, slots=True)
class LinkStatus:
    """A ``LinkState`` plus the path it refers to.

    ``path`` holds the expected repository path for ``INVALID``, the actual
    symlink target for ``CONFLICT_WRONG_TARGET`` and the offending home path for
    ``CONFLICT_NO_LINK``. It is ``None`` for every other state.
    """

    state: LinkState
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class StatusEntry:
    path: RelativePath
    status: LinkStatus

    @property
    def state(self) -> LinkState:
        return self.status.state


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Collection of status results for a manager run."""

    entries: tuple[StatusEntry, ...]

    def is_empty(self) -> bool:
        return not self.entries


@dataclass(frozen=True, slots=True)
class AddMapping:
    path: RelativePath

    def describe(self) -> str:
        return f"add '{self.path.as_posix()}' to the mappings in the config file"


@dataclass(frozen=True, slots=True)
class CreateSymlink:
    link: Path
    target: Path

    def describe(self) -> str:
        return f"create symlink '{self.link}' -> '{self.target}'"


@dataclass(frozen=True, slots=True)
class MoveFile:
    source: Path
    destination: Path

    def describe(self) -> str:
        return f"move '{self.source}' -> '{self.destination}'"


RequiredChange = Union[AddMapping, CreateSymlink, MoveFile]


@dataclass(frozen=True, slots=True)
class Plan:
    """Ordered changes needed to manage one path, plus the steps that were skipped."""

    path: RelativePath
    changes: tuple[RequiredChange, ...]
    skipped: tuple[str, ...] = ()

    @property
    def is_noop(self) -> bool:
        return not self.changes
