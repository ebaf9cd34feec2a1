"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound
from jinja2.exceptions import UndefinedError

from folio.contexts.templating.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("components/navigation")
    assert registry.is_cached("components/navigation")

    template2 = registry.get_template("components/navigation")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("components/nonexistent")


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    path = registry.get_template_path("pages/home")

    assert isinstance(path, Path)
    assert path.name == "home.html.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    registry = TemplateRegistry()

    registry.get_template("components/socials")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_autoescape():
    """Display strings are escaped, not interpreted as markup."""
    registry = TemplateRegistry()
    template = registry.get_template("components/navigation")

    html = template.render(entries=[{"name": "<b>Home</b>", "path": "/", "target": "_self"}])

    assert "&lt;b&gt;Home&lt;/b&gt;" in html
    assert "<b>" not in html


@pytest.mark.unit
def test_strict_undefined():
    """A missing field fails loudly instead of rendering blank."""
    registry = TemplateRegistry()
    template = registry.get_template("components/footer")

    with pytest.raises(UndefinedError):
        template.render()


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    (tmp_path / "pages").mkdir()
    (tmp_path / "pages" / "hello.html.jinja").write_text("Hello {{ name }}")

    registry = TemplateRegistry(templates_base_path=tmp_path)

    assert registry.get_template("pages/hello").render(name="Juan & co") == "Hello Juan &amp; co"
