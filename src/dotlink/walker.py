"""Breadth-first traversal of the dotfiles repository, pruned by the mappings."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

from .filesystem import list_children
from .mappings import MappingSet
from .models import EntryState, RepositoryEntry
from .paths import RelativePath, is_prefix_of, sort_key

logger = logging.getLogger(__name__)


def walk_repository(repo_root: Path, mappings: MappingSet) -> list[RepositoryEntry]:
    """Return every repository entry relevant for a status report.

    Mapped entries are reported as a single unit and never descended into.
    Entries that do not lead to any mapping are reported as unmapped. Ancestors
    of mappings are traversed but not reported, and symlinks are never
    followed. Mappings that were not found are appended as invalid entries.
    """

    entries: list[RepositoryEntry] = []
    found: set[RelativePath] = set()
    queue: deque[RelativePath] = deque(_children(repo_root, RelativePath()))

    while queue:
        current = queue.popleft()

        if current in mappings:
            entries.append(RepositoryEntry(current, EntryState.MAPPED))
            found.add(current)
            continue

        if not any(is_prefix_of(current, mapping) for mapping in mappings):
            entries.append(RepositoryEntry(current, EntryState.UNMAPPED))
            continue

        absolute = repo_root / current
        if absolute.is_dir() and not absolute.is_symlink():
            queue.extend(_children(repo_root, current))
        else:
            logger.debug("Not descending into %s: not a directory", absolute)

    for mapping in mappings:
        if mapping not in found:
            logger.debug("Mapping %s was not found in %s", mapping, repo_root)
            entries.append(RepositoryEntry(mapping, EntryState.INVALID))

    entries.sort(key=lambda entry: sort_key(entry.path))
    return entries


def _children(repo_root: Path, relative: RelativePath) -> list[RelativePath]:
    return [relative / child.name for child in list_children(repo_root / relative)]
