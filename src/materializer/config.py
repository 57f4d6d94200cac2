"""Run configuration shared by the materializer and CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from .errors import MissingProjectName
from .naming import derive_package_identifier

__all__ = ["DEFAULT_TEMPLATE_SOURCE", "MaterializeConfig", "SETUP_SCRIPT"]


DEFAULT_TEMPLATE_SOURCE = "https://github.com/erkanozturk1903/flutter-master-template"
SETUP_SCRIPT = Path("scripts") / "setup-new-project.sh"


@dataclass(slots=True)
class MaterializeConfig:
    """Inputs for a single materialization run.

    Attributes
    ----------
    project_name:
        The display name chosen by the user. Used verbatim in every
        substitution.
    package_identifier:
        The reverse-DNS identifier written into build and manifest files.
    template_dir:
        The read-only template tree.
    target_dir:
        The directory that becomes the generated project.
    package_derived:
        ``True`` when :attr:`package_identifier` was derived from the project
        name rather than supplied.
    init_git:
        Whether to reset version control after the files are in place.
    git_executable:
        The git binary to invoke.
    extra_cleanup:
        Additional target-relative paths removed during cleanup.
    template_source:
        Where the template came from; quoted in the initial commit message.
    """

    project_name: str
    package_identifier: str
    template_dir: Path
    target_dir: Path
    package_derived: bool = False
    init_git: bool = True
    git_executable: str = "git"
    extra_cleanup: tuple[Path, ...] = field(default_factory=tuple)
    template_source: str = DEFAULT_TEMPLATE_SOURCE

    @classmethod
    def from_args(
        cls,
        project_name: str | None,
        package_identifier: str | None = None,
        *,
        template_dir: str | Path,
        target_dir: str | Path,
        sanitize: bool = False,
        init_git: bool = True,
        git_executable: str = "git",
        extra_cleanup: Iterable[str | Path] = (),
    ) -> "MaterializeConfig":
        """Validate raw inputs and build a :class:`MaterializeConfig`.

        Raises :class:`~materializer.errors.MissingProjectName` when
        ``project_name`` is empty or blank. An empty ``package_identifier`` is
        treated as absent and replaced by the derived default.
        """

        if not project_name or not project_name.strip():
            raise MissingProjectName()

        package = (package_identifier or "").strip()
        derived = not package
        if derived:
            package = derive_package_identifier(project_name, sanitize=sanitize)

        return cls(
            project_name=project_name,
            package_identifier=package,
            template_dir=Path(template_dir).expanduser().resolve(),
            target_dir=Path(target_dir).expanduser().resolve(),
            package_derived=derived,
            init_git=init_git,
            git_executable=git_executable,
            extra_cleanup=tuple(Path(path) for path in extra_cleanup),
        )

    def context(self) -> Mapping[str, str]:
        """Return the values exposed to the template renderer."""

        return {
            "project_name": self.project_name,
            "package_identifier": self.package_identifier,
            "template_source": self.template_source,
        }

    def cleanup_paths(self) -> list[Path]:
        """Return target-relative paths that only belong to the template."""

        paths: list[Path] = []
        if self.template_dir.is_relative_to(self.target_dir):
            paths.append(self.template_dir.relative_to(self.target_dir))
        paths.append(SETUP_SCRIPT)
        paths.extend(self.extra_cleanup)
        return paths
