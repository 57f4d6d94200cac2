"""Turn a template tree into a standalone project."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .config import MaterializeConfig
from .errors import InvalidTarget, TargetUnavailable, TemplateNotFound
from .naming import is_valid_package_identifier
from .report import MaterializeReport, Severity, StepOutcome
from .rules import DEFAULT_RULES, SubstitutionRule, apply_rules
from .template import TemplateRenderer
from .vcs import GitError, GitRepository

__all__ = ["COMMIT_MESSAGE_TEMPLATE", "ProjectMaterializer", "copy_tree"]


LOGGER = logging.getLogger(__name__)

COMMIT_MESSAGE_TEMPLATE = """Initial commit from Flutter Master Template

Project: {{ project_name|strip }}
Package: {{ package_identifier }}
Generated from: {{ template_source }}
"""


def _warning(step: str, message: str, path: str | None = None) -> StepOutcome:
    LOGGER.warning(message)
    return StepOutcome(step=step, severity=Severity.WARNING, message=message, path=path)


def _copy_entry(source: Path, destination: Path) -> None:
    if destination.is_symlink() or destination.is_file():
        destination.unlink()
    shutil.copy2(source, destination, follow_symlinks=False)


def copy_tree(template_dir: Path, target_dir: Path) -> list[StepOutcome]:
    """Copy every entry of ``template_dir`` into ``target_dir``.

    Hidden files are included, symlinks are copied as links and existing
    files are overwritten. Failures are reported per entry.
    """

    outcomes: list[StepOutcome] = []
    directories: list[tuple[Path, Path]] = []

    def on_error(exc: OSError) -> None:
        outcomes.append(_warning("copy", f"could not read {exc.filename}: {exc.strerror}"))

    target_dir.mkdir(parents=True, exist_ok=True)
    for dirpath, dirnames, filenames in os.walk(template_dir, onerror=on_error):
        current = Path(dirpath)
        relative_dir = current.relative_to(template_dir)
        for name in sorted(dirnames):
            source = current / name
            destination = target_dir / relative_dir / name
            relative = (relative_dir / name).as_posix()
            try:
                if source.is_symlink():
                    _copy_entry(source, destination)
                    outcomes.append(StepOutcome(step="copy", message=f"linked {relative}", path=relative))
                else:
                    destination.mkdir(exist_ok=True)
                    directories.append((source, destination))
            except OSError as exc:
                outcomes.append(_warning("copy", f"could not copy {relative}: {exc}", relative))

        for name in sorted(filenames):
            source = current / name
            destination = target_dir / relative_dir / name
            relative = (relative_dir / name).as_posix()
            try:
                _copy_entry(source, destination)
            except OSError as exc:
                outcomes.append(_warning("copy", f"could not copy {relative}: {exc}", relative))
                continue
            outcomes.append(StepOutcome(step="copy", message=f"copied {relative}", path=relative))

    # Modes are applied last so read-only template directories stay writable while filling.
    for source, destination in reversed(directories):
        try:
            shutil.copymode(source, destination)
        except OSError as exc:
            outcomes.append(_warning("copy", f"could not copy permissions of {destination}: {exc}"))

    return outcomes


@dataclass(slots=True)
class ProjectMaterializer:
    """Copy, customise and re-initialise a project from a template tree."""

    renderer: TemplateRenderer
    rules: tuple[SubstitutionRule, ...]

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        rules: Sequence[SubstitutionRule] = DEFAULT_RULES,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.rules = tuple(rules)

    def check(self, config: MaterializeConfig) -> None:
        """Raise a fatal error if ``config`` cannot be materialized."""

        template_dir = config.template_dir
        if not template_dir.is_dir():
            raise TemplateNotFound(template_dir)
        if not os.access(template_dir, os.R_OK | os.X_OK):
            raise TemplateNotFound(template_dir, "is not readable")
        if config.target_dir == template_dir or config.target_dir.is_relative_to(template_dir):
            raise InvalidTarget(config.target_dir, template_dir)
        if config.target_dir.exists() and not config.target_dir.is_dir():
            raise TargetUnavailable(config.target_dir, "is not a directory")

    def prepare_target(self, config: MaterializeConfig) -> None:
        """Create the target directory, raising a fatal error on failure."""

        try:
            config.target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise TargetUnavailable(config.target_dir, f"cannot be created: {exc.strerror or exc}") from exc
        if not os.access(config.target_dir, os.W_OK | os.X_OK):
            raise TargetUnavailable(config.target_dir, "is not writable")

    def materialize(self, config: MaterializeConfig) -> MaterializeReport:
        """Materialize the project described by ``config``.

        Fatal problems raise :class:`~materializer.errors.MaterializeError`
        before any file is written to ``config.target_dir``. Everything after
        that is best effort and reported through the returned report.
        """

        self.check(config)
        self.prepare_target(config)

        report = MaterializeReport(
            project_name=config.project_name,
            package_identifier=config.package_identifier,
            package_derived=config.package_derived,
            target_dir=str(config.target_dir),
        )
        if config.package_derived:
            LOGGER.warning(
                "package identifier not provided, using default pattern: %s", config.package_identifier
            )
        if not is_valid_package_identifier(config.package_identifier):
            report.outcomes.append(
                _warning(
                    "validate",
                    f"package identifier {config.package_identifier!r} is not a valid reverse-DNS identifier",
                )
            )

        LOGGER.info("copying %s to %s", config.template_dir, config.target_dir)
        report.outcomes.extend(copy_tree(config.template_dir, config.target_dir))
        report.outcomes.extend(
            apply_rules(config.target_dir, self.rules, config.context(), self.renderer)
        )
        report.outcomes.extend(self.clean_up(config))
        if config.init_git:
            commit, outcomes = self.reset_repository(config)
            report.commit = commit
            report.outcomes.extend(outcomes)
        else:
            report.outcomes.append(StepOutcome(step="git", message="skipped repository initialisation"))
        return report

    def clean_up(self, config: MaterializeConfig) -> list[StepOutcome]:
        """Remove template-only files from the target."""

        outcomes: list[StepOutcome] = []
        for relative_path in config.cleanup_paths():
            path = config.target_dir / relative_path
            relative = relative_path.as_posix()
            if not path.exists() and not path.is_symlink():
                continue
            try:
                if path.is_dir() and not path.is_symlink():
                    shutil.rmtree(path)
                else:
                    path.unlink()
            except OSError as exc:
                outcomes.append(_warning("cleanup", f"could not remove {relative}: {exc}", relative))
                continue
            LOGGER.info("removed %s", relative)
            outcomes.append(StepOutcome(step="cleanup", message=f"removed {relative}", path=relative))
        return outcomes

    def reset_repository(self, config: MaterializeConfig) -> tuple[str | None, list[StepOutcome]]:
        """Replace any git history in the target with a single commit."""

        repository = GitRepository(config.target_dir, executable=config.git_executable)
        outcomes: list[StepOutcome] = []
        try:
            if repository.reset():
                outcomes.append(StepOutcome(step="git", message="removed existing .git directory", path=".git"))
        except OSError as exc:
            outcomes.append(_warning("git", f"could not remove existing .git directory: {exc}", ".git"))
            return None, outcomes

        message = self.renderer.render_string(COMMIT_MESSAGE_TEMPLATE, config.context())
        try:
            repository.init()
            repository.add_all()
            commit = repository.commit(message)
        except GitError as exc:
            outcomes.append(_warning("git", str(exc)))
            return None, outcomes

        LOGGER.info("created initial commit %s", commit)
        outcomes.append(StepOutcome(step="git", message=f"created initial commit {commit}"))
        return commit, outcomes
