"""Fatal error types raised before a target directory is modified."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "InvalidTarget",
    "MaterializeError",
    "MissingProjectName",
    "TargetUnavailable",
    "TemplateNotFound",
]


class MaterializeError(RuntimeError):
    """Base class for errors that abort a run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MissingProjectName(MaterializeError):
    """Raised when no project name was supplied."""

    def __init__(self) -> None:
        super().__init__("project name is required")


class TemplateNotFound(MaterializeError):
    """Raised when the template directory is absent or unreadable."""

    def __init__(self, template_dir: Path, reason: str = "does not exist") -> None:
        self.template_dir = template_dir
        super().__init__(f"template directory {template_dir} {reason}")


class InvalidTarget(MaterializeError):
    """Raised when the target directory overlaps the template directory."""

    def __init__(self, target_dir: Path, template_dir: Path) -> None:
        self.target_dir = target_dir
        self.template_dir = template_dir
        super().__init__(
            f"target directory {target_dir} must not be inside template directory {template_dir}"
        )


class TargetUnavailable(MaterializeError):
    """Raised when the target directory cannot be used or created."""

    def __init__(self, target_dir: Path, reason: str) -> None:
        self.target_dir = target_dir
        super().__init__(f"target directory {target_dir} {reason}")
