"""Planning of the changes needed to bring a single path under management."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import BothPathsExistError, ContainsRepositoryError, DanglingLinkError, OutsideValidDirError
from .filesystem import path_present, symlink_points_to
from .mappings import MappingSet
from .models import AddMapping, CreateSymlink, MoveFile, Plan, RequiredChange
from .paths import RelativePath, normalize

logger = logging.getLogger(__name__)

SKIP_ALREADY_MAPPED = "This path is already mapped, no need to update the config."
SKIP_ALREADY_LINKED = "No symlink will be created, the paths are already linked."


def mapping_path_for(candidate: Path, repo_root: Path, home: Path) -> RelativePath:
    """Return ``candidate`` relative to the repository or, failing that, the home directory.

    The repository takes precedence so that a repository living inside the home
    directory never yields a home-relative mapping for its own files.
    """

    if candidate.is_relative_to(repo_root):
        return normalize(candidate.relative_to(repo_root))
    if candidate.is_relative_to(home):
        return normalize(candidate.relative_to(home))
    raise OutsideValidDirError(candidate)


def plan_add(mappings: MappingSet, repo_root: Path, home: Path, candidate: Path) -> Plan:
    """Compute the ordered changes that start managing ``candidate``.

    Args:
        mappings: The currently configured mappings.
        repo_root: Absolute path of the dotfiles repository.
        home: Absolute path of the home directory.
        candidate: Absolute, existing path inside one of the two roots.

    Raises:
        OutsideValidDirError: ``candidate`` is inside neither root.
        ContainsRepositoryError: ``candidate`` is an ancestor of the repository.
        MappingConflictError: the path nests with an existing mapping.
        BothPathsExistError: both copies exist but are not linked.
        DanglingLinkError: the home path already links to a missing repository path.
    """

    relative = mapping_path_for(candidate, repo_root, home)
    if not relative.parts:
        raise OutsideValidDirError(candidate)
    if repo_root.is_relative_to(candidate):
        raise ContainsRepositoryError(candidate, repo_root)

    repo_path = repo_root / relative
    home_path = home / relative

    changes: list[RequiredChange] = []
    skipped: list[str] = []

    if relative in mappings:
        skipped.append(SKIP_ALREADY_MAPPED)
    else:
        mappings.check_addable(relative)
        changes.append(AddMapping(relative))

    home_present = path_present(home_path)
    repo_present = path_present(repo_path)
    points_to_repo = symlink_points_to(home_path, repo_path)

    if home_present and repo_present:
        if not points_to_repo:
            raise BothPathsExistError(repo_path, home_path)
        skipped.append(SKIP_ALREADY_LINKED)
    elif home_present:
        if points_to_repo:
            raise DanglingLinkError(home_path, repo_path)
        changes.append(MoveFile(home_path, repo_path))
        changes.append(CreateSymlink(home_path, repo_path))
    else:
        changes.append(CreateSymlink(home_path, repo_path))

    logger.debug("Planned %d change(s) for %s, skipped %d step(s)", len(changes), relative, len(skipped))
    return Plan(path=relative, changes=tuple(changes), skipped=tuple(skipped))
