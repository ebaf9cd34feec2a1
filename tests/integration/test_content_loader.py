"""
Integration tests for loading the site config from YAML.
"""

import pytest

from folio.contexts.content import (
    ContentValidationError,
    SiteConfig,
    load_config_dict,
    load_site_config,
    site_config_from_dict,
)

MINIMAL_CONFIG = """
site:
  title: Test Site
  favicon: /favicon.ico
  headline:
    text: hello
    delay_ms: 100
  footer:
    text: Powered by
    link: https://example.com
    logo: /logo.svg
personal:
  name: Ada
  nickname: ada
  title: Engineer
  tagline: Builds engines.
  email: mailto:ada@example.com
  phone: tel:+100
  location: London
  website: https://ada.example.com
  github: https://github.com/ada
  linkedin: https://linkedin.com/in/ada
hero:
  headline: {line1: I build, line2: analytical, highlight: engines}
  description: Mechanical computation.
  cta: {text: See work, link: /#work}
stats: []
skills:
  - {name: Mathematics, desc: Numbers.}
experience: []
projects: []
awards: []
technologies: [Brass]
navigation:
  - {name: Home, path: /}
socials:
  - {icon: ri-mail-line, link: "${personal.email}"}
cta:
  title: Say hello
  description: Write a letter.
  button: {text: GitHub, link: "${personal.github}", target: _blank}
education: {institution: Home, degree: Self-taught, period: "1830"}
"""


@pytest.fixture
def minimal_config_path(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text(MINIMAL_CONFIG, encoding="utf-8")
    return path


@pytest.mark.integration
def test_load_bundled_config():
    config = load_site_config()

    assert isinstance(config, SiteConfig)
    assert config.personal.name == "Juan"
    assert config.site.headline.text == "$juan-d-khusuma"
    assert config.site.headline.delay_ms == 800
    assert [n.name for n in config.navigation] == ["Home", "About", "Blog", "Contact"]
    assert len(config.technologies) == 29
    assert config.technologies[0] == "JavaScript"


@pytest.mark.integration
def test_socials_reuse_profile_links():
    """Social entries and the call-to-action reuse profile fields via interpolation."""
    config = load_site_config()

    assert [s.link for s in config.socials] == [
        config.personal.github,
        config.personal.linkedin,
        config.personal.email,
    ]
    assert config.cta.button.link == config.personal.github
    assert config.cta.button.target == "_blank"


@pytest.mark.integration
def test_experience_records():
    config = load_site_config()

    no_url = [e for e in config.experience if e.company == "PT IT Untuk Semua"][0]
    assert no_url.company_url is None
    assert no_url.highlights == ("Built full-stack POS system processing 300+ transactions daily",)
    assert isinstance(config.experience[0].highlights, tuple)


@pytest.mark.integration
def test_records_are_read_only():
    config = load_site_config()

    with pytest.raises(AttributeError):
        config.personal.name = "Someone else"


@pytest.mark.integration
def test_load_minimal_config_with_defaults(minimal_config_path):
    config = load_site_config(minimal_config_path)

    assert config.site.stylesheet == "/styles.css"
    assert config.site.headline.glyph_interval_ms == 50
    assert config.hero.cta.target == "_self"
    assert config.navigation[0].target == "_self"
    assert config.socials[0].link == "mailto:ada@example.com"
    assert config.stats == ()


@pytest.mark.integration
def test_null_optional_fields_keep_defaults(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text(
        MINIMAL_CONFIG.replace("{name: Home, path: /}", "{name: Home, path: /, target: null}")
        .replace("{name: Mathematics, desc: Numbers.}", "{name: Mathematics, desc: Numbers., icon: null}")
        .replace("  favicon: /favicon.ico\n", "  favicon: /favicon.ico\n  stylesheet: null\n"),
        encoding="utf-8",
    )

    config = load_site_config(path)

    assert config.navigation[0].target == "_self"
    assert config.skills[0].icon == ""
    assert config.site.stylesheet == "/styles.css"


@pytest.mark.integration
def test_null_headline_delay_fails_with_path(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text(MINIMAL_CONFIG.replace("delay_ms: 100", "delay_ms: null"), encoding="utf-8")

    with pytest.raises(ContentValidationError, match=r"site\.headline\.delay_ms: must be a positive integer"):
        load_site_config(path)


@pytest.mark.integration
def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "nope.yaml")


@pytest.mark.integration
def test_empty_field_fails_with_path(minimal_config_path):
    text = minimal_config_path.read_text().replace("{name: Mathematics, desc: Numbers.}", "{name: '', desc: Numbers.}")
    minimal_config_path.write_text(text)

    with pytest.raises(ContentValidationError) as exc_info:
        load_site_config(minimal_config_path)

    assert "skills[0].name" in str(exc_info.value)
    assert str(minimal_config_path) in str(exc_info.value)


@pytest.mark.integration
def test_broken_interpolation_fails(minimal_config_path):
    text = minimal_config_path.read_text().replace("${personal.email}", "${personal.mail}")
    minimal_config_path.write_text(text)

    with pytest.raises(ContentValidationError):
        load_site_config(minimal_config_path)


@pytest.mark.integration
def test_non_mapping_root_fails(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ContentValidationError):
        load_config_dict(path)


@pytest.mark.integration
def test_site_config_from_dict(minimal_config_path):
    data = load_config_dict(minimal_config_path)
    config = site_config_from_dict(data)

    assert config.personal.name == "Ada"
    assert config.cta.button.link == "https://github.com/ada"
