from __future__ import annotations

from pathlib import Path

import pytest

from materializer.config import SETUP_SCRIPT, MaterializeConfig
from materializer.errors import MissingProjectName


def test_from_args_derives_package_identifier(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "MyApp", template_dir=tmp_path / "template", target_dir=tmp_path
    )
    assert config.project_name == "MyApp"
    assert config.package_identifier == "com.example.myapp"
    assert config.package_derived is True


def test_from_args_keeps_explicit_identifier(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "Acme", "com.acme.app", template_dir=tmp_path / "template", target_dir=tmp_path
    )
    assert config.package_identifier == "com.acme.app"
    assert config.package_derived is False


def test_from_args_treats_empty_identifier_as_missing(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "Acme", "", template_dir=tmp_path / "template", target_dir=tmp_path
    )
    assert config.package_identifier == "com.example.acme"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_from_args_rejects_missing_name(tmp_path: Path, name):
    with pytest.raises(MissingProjectName):
        MaterializeConfig.from_args(name, template_dir=tmp_path, target_dir=tmp_path)


def test_project_name_is_kept_verbatim(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "  My  App ", template_dir=tmp_path / "template", target_dir=tmp_path
    )
    assert config.project_name == "  My  App "


def test_context_exposes_identifiers(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "Acme", "com.acme.app", template_dir=tmp_path / "template", target_dir=tmp_path
    )
    context = config.context()
    assert context["project_name"] == "Acme"
    assert context["package_identifier"] == "com.acme.app"
    assert context["template_source"].startswith("https://")


def test_cleanup_paths_include_nested_template(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "Acme",
        template_dir=tmp_path / "template",
        target_dir=tmp_path,
        extra_cleanup=["docs/TEMPLATE.md"],
    )
    assert config.cleanup_paths() == [Path("template"), SETUP_SCRIPT, Path("docs/TEMPLATE.md")]


def test_cleanup_paths_never_include_external_template(tmp_path: Path):
    config = MaterializeConfig.from_args(
        "Acme", template_dir=tmp_path / "template", target_dir=tmp_path / "project"
    )
    assert config.cleanup_paths() == [SETUP_SCRIPT]
