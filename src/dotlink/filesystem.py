"""Filesystem helpers for dotlink."""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path

from .errors import DotlinkError, FilesystemError, PathNotFoundError

logger = logging.getLogger(__name__)


def get_home_dir() -> Path:
    """Return the resolved home directory of the current user."""

    try:
        home = Path.home()
    except RuntimeError as exc:
        raise DotlinkError("Could not find location: home directory") from exc
    return home.resolve(strict=False)


def absolute_path(raw: str | os.PathLike[str], *, cwd: Path | None = None) -> Path:
    """Return ``raw`` as an absolute path without resolving its final component.

    The parent directory is canonicalized so that ``..`` and symlinked
    ancestors are normalized, but a symlink passed by the user stays a symlink.
    """

    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        candidate = (cwd or Path.cwd()) / candidate
    if candidate.name in ("", ".", ".."):
        return candidate.resolve(strict=False)
    return candidate.parent.resolve(strict=False) / candidate.name


def path_present(path: Path) -> bool:
    """Return ``True`` if ``path`` exists, counting dangling symlinks."""

    return path.exists() or path.is_symlink()


def require_existing(path: Path) -> Path:
    if not path_present(path):
        raise PathNotFoundError(path)
    return path


def read_link(path: Path) -> Path:
    """Return the literal target stored in the symlink at ``path``."""

    try:
        return Path(os.readlink(path))
    except OSError as exc:
        raise FilesystemError("read symlink", path, exc) from exc


def symlink_points_to(link: Path, target: Path) -> bool:
    """Return ``True`` if ``link`` is a symlink whose stored target is ``target``.

    Targets are compared literally; a link that only resolves to ``target``
    through other symlinks does not count.
    """

    if not link.is_symlink():
        return False
    return read_link(link) == target


def ensure_parent(path: Path) -> None:
    """Ensure the parent directory exists."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError("create directory", path.parent, exc) from exc


def create_symlink(link: Path, target: Path) -> None:
    """Create ``link`` pointing at the absolute ``target``."""

    ensure_parent(link)
    logger.debug("Linking %s -> %s", link, target)
    try:
        link.symlink_to(target, target_is_directory=target.is_dir())
    except OSError as exc:
        raise FilesystemError(f"create a symlink to '{target}' at", link, exc) from exc


def move_path(source: Path, destination: Path) -> None:
    """Relocate ``source`` (file, directory or symlink) to ``destination``."""

    if path_present(destination):
        raise FilesystemError("move to", destination, FileExistsError(errno.EEXIST, "Destination already exists"))

    ensure_parent(destination)
    logger.debug("Moving %s -> %s", source, destination)
    try:
        shutil.move(os.fspath(source), os.fspath(destination))
    except OSError as exc:
        raise FilesystemError(f"move '{source}' to", destination, exc) from exc


def list_children(directory: Path) -> list[Path]:
    """Return the entries of ``directory`` sorted by name."""

    try:
        return sorted(directory.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise FilesystemError("read directory", directory, exc) from exc
