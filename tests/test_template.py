from __future__ import annotations

import pytest

from materializer.materialize import COMMIT_MESSAGE_TEMPLATE
from materializer.template import TemplateRenderer, TemplateRenderingError


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


def test_render_string_with_strip_filter(renderer: TemplateRenderer):
    rendered = renderer.render_string("Project: {{ project_name|strip }}", {"project_name": "  My App "})
    assert rendered == "Project: My App"


def test_commit_message_strips_project_name(renderer: TemplateRenderer):
    message = renderer.render_string(
        COMMIT_MESSAGE_TEMPLATE,
        {"project_name": " Acme ", "package_identifier": "com.acme.app", "template_source": "https://example.com"},
    )
    assert "Project: Acme\n" in message
    assert "Package: com.acme.app\n" in message


def test_render_string_missing_policy_keep(renderer: TemplateRenderer):
    template = "Hello {{ missing }}"
    assert renderer.render_string(template, {}, missing="keep") == template


def test_render_string_missing_policy_empty(renderer: TemplateRenderer):
    assert renderer.render_string("Hello {{ missing }}", {}, missing="empty") == "Hello "


def test_render_string_missing_policy_error(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ missing }}", {}, missing="error")


def test_render_string_rejects_unknown_policy(renderer: TemplateRenderer):
    with pytest.raises(ValueError):
        renderer.render_string("{{ name }}", {"name": "x"}, missing="ignore")


def test_unknown_filter_raises(renderer: TemplateRenderer):
    with pytest.raises(TemplateRenderingError):
        renderer.render_string("{{ name|unknown }}", {"name": "demo"})


def test_custom_filters_replace_defaults():
    renderer = TemplateRenderer(filters={"reverse": lambda value: str(value)[::-1]})
    assert renderer.render_string("{{ name|reverse }}", {"name": "abc"}) == "cba"
