"""
Integration tests for rendering the site config into HTML pages.
"""

import random
import re

import pytest

from folio.contexts.content import load_site_config
from folio.contexts.content.data_structures import HeadlineSettings
from folio.contexts.templating import PageRenderError, SiteToHTMLConverter, TemplateRegistry


@pytest.fixture(scope="module")
def config():
    return load_site_config()


@pytest.fixture
def converter(config):
    return SiteToHTMLConverter(config, rng=random.Random(0))


@pytest.mark.integration
def test_navigation_one_link_per_entry_in_order(config, converter):
    html = str(converter.convert_navigation())

    links = re.findall(r'<a href="([^"]*)" target="([^"]*)"[^>]*>([^<]*)</a>', html)
    assert [(href, name) for href, _, name in links] == [
        (entry.path, entry.name) for entry in config.navigation
    ]


@pytest.mark.integration
def test_socials_one_link_per_entry_in_order(config, converter):
    html = str(converter.convert_socials())

    hrefs = re.findall(r'<a href="([^"]*)"', html)
    icons = re.findall(r'<i class="([^"]*)"></i>', html)
    assert hrefs == [entry.link for entry in config.socials]
    assert icons == [entry.icon for entry in config.socials]


@pytest.mark.integration
def test_matrix_text_spans(converter):
    headline = HeadlineSettings(text="AB", delay_ms=800, glyph_class="bg-red-500")
    html = str(converter.convert_matrix_text(headline))

    spans = re.findall(r'<span class="matrix-char bg-red-500"[^>]*style="([^"]*)">([^<]*)</span>', html)
    assert [char for _, char in spans] == ["A", "B"]
    assert "animation-delay: 0ms" in spans[0][0]
    assert "animation-delay: 800ms" in spans[1][0]
    assert 'aria-label="AB"' in html


@pytest.mark.integration
def test_matrix_text_escapes_characters(converter):
    html = str(converter.convert_matrix_text(HeadlineSettings(text="<&>")))

    assert ">&lt;</span>" in html
    assert ">&amp;</span>" in html
    assert ">&gt;</span>" in html


@pytest.mark.integration
def test_home_page(config, converter):
    html = converter.generate_home()

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Juan D Khusuma | Portfolio</title>" in html
    assert '<link rel="icon" href="/favicon.ico">' in html
    assert 'class="crt font-ubuntu"' in html
    assert 'aria-label="$juan-d-khusuma"' in html
    assert html.count('class="matrix-char') == len("$juan-d-khusuma")
    assert "Powered by" in html
    assert 'alt="Vercel Logo"' in html
    assert html.count('<nav class="site-nav">') == 1
    # Home is the headline and footer only; social links live on the about page
    assert 'class="socials"' not in html


@pytest.mark.integration
def test_about_page_renders_every_group(config, converter):
    html = converter.generate_about()

    assert "<title>About | Juan D Khusuma | Portfolio</title>" in html
    for section_id in ("hero", "stats", "skills", "experience", "work", "awards", "technologies", "education", "hire"):
        assert f'id="{section_id}"' in html
    for skill in config.skills:
        assert skill.name.replace("&", "&amp;") in html
    for label in config.technologies:
        assert f"<li>{label}</li>" in html
    assert "EmpowerU&amp;I" in html
    assert "&#34;A&#34; grade" in html or "&quot;A&quot; grade" in html
    assert config.education.thesis in html
    assert html.count("<article class=\"job\">") == len(config.experience)


@pytest.mark.integration
def test_about_page_company_without_url(converter):
    html = converter.generate_about()

    assert "PT IT Untuk Semua" in html
    assert 'href="None"' not in html


@pytest.mark.integration
def test_generate_page_unknown(converter):
    with pytest.raises(ValueError, match="Unknown page"):
        converter.generate_page("blog")


@pytest.mark.integration
def test_broken_template_raises_page_render_error(config, tmp_path):
    (tmp_path / "components").mkdir()
    (tmp_path / "components" / "navigation.html.jinja").write_text("{{ entries.missing_attribute.name }}")

    converter = SiteToHTMLConverter(config, template_registry=TemplateRegistry(tmp_path))

    with pytest.raises(PageRenderError) as exc_info:
        converter.convert_navigation()

    assert exc_info.value.page_name == "navigation"
    assert exc_info.value.original_error is not None
