"""Outcome records collected while a project is materialized."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["MaterializeReport", "Severity", "StepOutcome"]


class Severity(str, Enum):
    """Severity of a :class:`StepOutcome`."""

    INFO = "info"
    WARNING = "warning"


class StepOutcome(BaseModel):
    """Result of one action performed by a pipeline step."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    step: str = Field(..., description="Pipeline step that produced the outcome.")
    severity: Severity = Field(default=Severity.INFO, description="Whether the action succeeded.")
    message: str = Field(..., description="Human-readable description of the action.")
    path: str | None = Field(None, description="Target-relative path the action touched, if any.")


class MaterializeReport(BaseModel):
    """Summary of a completed materialization run."""

    model_config = ConfigDict(extra="forbid")

    project_name: str = Field(..., description="Project name used for substitutions.")
    package_identifier: str = Field(..., description="Package identifier used for substitutions.")
    package_derived: bool = Field(default=False, description="Whether the package identifier was derived from the project name.")
    target_dir: str = Field(..., description="Directory that received the generated project.")
    outcomes: list[StepOutcome] = Field(default_factory=list, description="Outcomes in execution order.")
    commit: str | None = Field(None, description="Hash of the initial commit, when one was created.")

    @property
    def warnings(self) -> list[StepOutcome]:
        return [outcome for outcome in self.outcomes if outcome.severity is Severity.WARNING]

    @property
    def ok(self) -> bool:
        """``True`` when no step reported a warning."""

        return not self.warnings

    def for_step(self, step: str) -> list[StepOutcome]:
        return [outcome for outcome in self.outcomes if outcome.step == step]

    @property
    def changed_files(self) -> list[str]:
        """Target-relative paths rewritten by the substitution step."""

        paths: list[str] = []
        for outcome in self.for_step("substitute"):
            if outcome.severity is Severity.INFO and outcome.path and outcome.path not in paths:
                paths.append(outcome.path)
        return paths

    def summary(self) -> str:
        """Return a short multi-line description of the run."""

        copied = sum(1 for outcome in self.for_step("copy") if outcome.severity is Severity.INFO)
        removed = [outcome.path for outcome in self.for_step("cleanup") if outcome.severity is Severity.INFO]
        package = self.package_identifier
        if self.package_derived:
            package += " (not provided, using default pattern)"
        lines = [
            f"Project: {self.project_name}",
            f"Package: {package}",
            f"Location: {self.target_dir}",
            f"Copied {copied} file(s)",
            f"Updated {len(self.changed_files)} file(s): {', '.join(self.changed_files) or '-'}",
            f"Removed: {', '.join(path for path in removed if path) or '-'}",
        ]
        if self.commit:
            lines.append(f"Initial commit: {self.commit}")
        if self.warnings:
            lines.append(f"Completed with {len(self.warnings)} warning(s):")
            lines.extend(f"  [{outcome.step}] {outcome.message}" for outcome in self.warnings)
        return "\n".join(lines)
