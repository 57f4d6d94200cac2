"""Placeholder substitution rules and the interpreter that applies them."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

from .report import Severity, StepOutcome
from .template import TemplateRenderer

__all__ = [
    "DEFAULT_RULES",
    "DISPLAY_TITLE_TOKEN",
    "PACKAGE_TOKEN",
    "PROJECT_TOKEN",
    "SubstitutionRule",
    "apply_rules",
    "substitute_file",
]


LOGGER = logging.getLogger(__name__)

PROJECT_TOKEN = "flutter_master_template"
PACKAGE_TOKEN = "com.example.template"
DISPLAY_TITLE_TOKEN = "Flutter Master Template"


@dataclass(frozen=True, slots=True)
class SubstitutionRule:
    """Replace ``token`` with a rendered ``replacement`` in ``targets``.

    ``targets`` are paths relative to the project root. Entries containing
    glob characters are expanded with :meth:`pathlib.Path.glob`.
    """

    token: str
    replacement: str
    targets: tuple[str, ...]

    def resolve(self, root: Path) -> list[Path]:
        """Return the existing files under ``root`` this rule applies to."""

        found: list[Path] = []
        for target in self.targets:
            if any(char in target for char in "*?["):
                candidates: Iterable[Path] = sorted(root.glob(target))
            else:
                candidates = [root / target]
            for candidate in candidates:
                if candidate.is_file() and candidate not in found:
                    found.append(candidate)
        return found


DEFAULT_RULES: tuple[SubstitutionRule, ...] = (
    SubstitutionRule(PROJECT_TOKEN, "{{ project_name }}", ("pubspec.yaml",)),
    SubstitutionRule(
        PACKAGE_TOKEN,
        "{{ package_identifier }}",
        (
            "pubspec.yaml",
            "android/**/build.gradle",
            "android/**/build.gradle.kts",
            "android/**/AndroidManifest.xml",
            "android/**/MainActivity.kt",
            "android/**/MainActivity.java",
            "ios/Runner.xcodeproj/project.pbxproj",
        ),
    ),
    SubstitutionRule(PROJECT_TOKEN, "{{ project_name }}", ("ios/Runner/Info.plist",)),
    SubstitutionRule(DISPLAY_TITLE_TOKEN, "{{ project_name }}", ("lib/main.dart",)),
)


def substitute_file(path: Path, token: str, replacement: str) -> bool:
    """Replace every literal ``token`` in ``path`` with ``replacement``.

    The file is handled as UTF-8 bytes so unrelated content is preserved
    exactly. The new content is written to a sibling temporary file that
    takes over the original's mode and is renamed into place, so read-only
    files are updated as well. Returns ``True`` when the file was rewritten.
    """

    original = path.read_bytes()
    updated = original.replace(token.encode("utf-8"), replacement.encode("utf-8"))
    if updated == original:
        return False

    descriptor, temporary = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(descriptor, "wb") as handle:
            handle.write(updated)
        shutil.copymode(path, temporary)
        os.replace(temporary, path)
    except BaseException:
        Path(temporary).unlink(missing_ok=True)
        raise
    return True


def apply_rules(
    root: Path,
    rules: Iterable[SubstitutionRule],
    context: Mapping[str, Any],
    renderer: TemplateRenderer | None = None,
) -> list[StepOutcome]:
    """Apply ``rules`` in order to the files under ``root``."""

    renderer = renderer or TemplateRenderer()
    outcomes: list[StepOutcome] = []
    for rule in rules:
        replacement = renderer.render_string(rule.replacement, context, missing="error")
        for path in rule.resolve(root):
            relative = path.relative_to(root).as_posix()
            try:
                changed = substitute_file(path, rule.token, replacement)
            except OSError as exc:
                LOGGER.warning("could not update %s: %s", relative, exc)
                outcomes.append(
                    StepOutcome(
                        step="substitute",
                        severity=Severity.WARNING,
                        message=f"could not update {relative}: {exc}",
                        path=relative,
                    )
                )
                continue
            if changed:
                LOGGER.info("replaced %r in %s", rule.token, relative)
                outcomes.append(
                    StepOutcome(
                        step="substitute",
                        message=f"replaced {rule.token!r} with {replacement!r}",
                        path=relative,
                    )
                )
    return outcomes
