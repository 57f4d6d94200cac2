"""Bootstrap new Flutter projects from a template tree.

The package copies a template directory into a target, replaces placeholder
identifiers with the new project name and package identifier, removes
template-only files and starts a fresh git history. It can be used
programmatically through :class:`ProjectMaterializer` or via the
``materialize`` command.
"""

from __future__ import annotations

from .config import MaterializeConfig
from .errors import (
    InvalidTarget,
    MaterializeError,
    MissingProjectName,
    TargetUnavailable,
    TemplateNotFound,
)
from .materialize import ProjectMaterializer, copy_tree
from .naming import ascii_lower, derive_package_identifier, is_valid_package_identifier
from .report import MaterializeReport, Severity, StepOutcome
from .rules import DEFAULT_RULES, SubstitutionRule, apply_rules, substitute_file
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "DEFAULT_RULES",
    "InvalidTarget",
    "MaterializeConfig",
    "MaterializeError",
    "MaterializeReport",
    "MissingProjectName",
    "ProjectMaterializer",
    "Severity",
    "StepOutcome",
    "SubstitutionRule",
    "TargetUnavailable",
    "TemplateNotFound",
    "TemplateRenderer",
    "TemplateRenderingError",
    "apply_rules",
    "ascii_lower",
    "copy_tree",
    "derive_package_identifier",
    "is_valid_package_identifier",
    "substitute_file",
]

__version__ = "0.1.0"
