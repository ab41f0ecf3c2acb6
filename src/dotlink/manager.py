"""High level orchestration for dotlink operations."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import AppConfig
from .filesystem import absolute_path, create_symlink, move_path, require_existing
from .models import AddMapping, CreateSymlink, MoveFile, Plan, RequiredChange, StatusReport
from .planner import plan_add
from .status import build_status_report

logger = logging.getLogger(__name__)


class DotfilesManager:
    """Coordinates status and add operations for one repository and home directory."""

    def __init__(self, config: AppConfig, repo_root: Path, home: Path) -> None:
        self.config = config
        self.repo_root = repo_root
        self.home = home

    def status(self) -> StatusReport:
        return build_status_report(self.repo_root, self.home, self.config.mappings)

    def plan_add(self, raw_path: str | Path, *, cwd: Path | None = None) -> Plan:
        """Plan the changes for the user-supplied ``raw_path``."""

        candidate = require_existing(absolute_path(raw_path, cwd=cwd))
        return plan_add(self.config.mappings, self.repo_root, self.home, candidate)

    def apply(self, plan: Plan) -> list[RequiredChange]:
        """Execute ``plan`` in order and return the changes that were applied.

        The config is written right after the mapping is added so that an
        interrupted run can be resumed by running ``add`` again.
        """

        applied: list[RequiredChange] = []
        for change in plan.changes:
            logger.info("Applying: %s", change.describe())
            if isinstance(change, AddMapping):
                self.config.mappings.add(change.path)
                self.config.save()
            elif isinstance(change, MoveFile):
                move_path(change.source, change.destination)
            elif isinstance(change, CreateSymlink):
                create_symlink(change.link, change.target)
            else:  # pragma: no cover - exhaustive over RequiredChange
                raise TypeError(f"Unsupported change {change!r}")
            applied.append(change)
        return applied
