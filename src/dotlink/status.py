"""Classification of repository entries against the home directory."""

from __future__ import annotations

from pathlib import Path

from .filesystem import path_present, read_link
from .mappings import MappingSet
from .models import EntryState, LinkState, LinkStatus, RepositoryEntry, StatusEntry, StatusReport
from .walker import walk_repository


def classify_entry(entry: RepositoryEntry, repo_root: Path, home: Path) -> LinkStatus:
    """Return the ``LinkStatus`` of ``entry``.

    A mapped entry is linked only if its home counterpart is a symlink whose
    literal target is the absolute repository path.
    """

    expected = repo_root / entry.path

    if entry.state is EntryState.INVALID:
        return LinkStatus(LinkState.INVALID, expected)
    if entry.state is EntryState.UNMAPPED:
        return LinkStatus(LinkState.UNMAPPED)

    home_path = home / entry.path
    if not path_present(home_path):
        return LinkStatus(LinkState.UNLINKED)
    if not home_path.is_symlink():
        return LinkStatus(LinkState.CONFLICT_NO_LINK, home_path)

    target = read_link(home_path)
    if target != expected:
        return LinkStatus(LinkState.CONFLICT_WRONG_TARGET, target)
    return LinkStatus(LinkState.LINKED)


def build_status_report(repo_root: Path, home: Path, mappings: MappingSet) -> StatusReport:
    entries = [
        StatusEntry(entry.path, classify_entry(entry, repo_root, home))
        for entry in walk_repository(repo_root, mappings)
    ]
    return StatusReport(entries=tuple(entries))
