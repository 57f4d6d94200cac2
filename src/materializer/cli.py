"""Command line interface for the project materializer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import MaterializeConfig
from .errors import MaterializeError, MissingProjectName
from .materialize import ProjectMaterializer
from .template import TemplateRenderer

LOGGER = logging.getLogger(__name__)

USAGE_EXAMPLE = "example: materialize MyAwesomeApp com.company.myawesomeapp"

NEXT_STEPS_TEMPLATE = """Next steps:
  1. cd {{ target_dir }}
  2. flutter pub get
  3. flutter run
  4. Read docs/01-project-architecture.md

Documentation: {{ template_source }}/tree/main/docs
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="materialize",
        description="Create a new Flutter project from the master template",
        epilog=USAGE_EXAMPLE,
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default="",
        help="Display name of the new project",
    )
    parser.add_argument(
        "package_identifier",
        nargs="?",
        default="",
        help="Reverse-DNS package identifier (default: com.example.<lowercased name>)",
    )
    parser.add_argument(
        "-t",
        "--template-dir",
        type=Path,
        help="Template directory to copy from (default: <target-dir>/template)",
    )
    parser.add_argument(
        "-d",
        "--target-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory that receives the generated project",
    )
    parser.add_argument(
        "--sanitize",
        action="store_true",
        help="Normalise the derived package identifier into a valid identifier",
    )
    parser.add_argument(
        "--no-git",
        dest="init_git",
        action="store_false",
        help="Do not reinitialise the git repository",
    )
    parser.add_argument("--git", dest="git_executable", default="git", help="git executable to use")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-vv for debug output)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    target_dir = args.target_dir
    template_dir = args.template_dir if args.template_dir is not None else target_dir / "template"
    try:
        config = MaterializeConfig.from_args(
            args.project_name,
            args.package_identifier,
            template_dir=template_dir,
            target_dir=target_dir,
            sanitize=args.sanitize,
            init_git=args.init_git,
            git_executable=args.git_executable,
        )
        renderer = TemplateRenderer()
        report = ProjectMaterializer(renderer).materialize(config)
    except MissingProjectName as exc:
        LOGGER.error("%s", exc)
        parser.print_usage(sys.stderr)
        print(USAGE_EXAMPLE, file=sys.stderr)
        return 1
    except MaterializeError as exc:
        LOGGER.error("%s", exc)
        return 1

    print(report.summary())
    print()
    context = {"target_dir": report.target_dir, "template_source": config.template_source}
    print(renderer.render_string(NEXT_STEPS_TEMPLATE, context), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
