"""
HTML Generator

Converts a SiteConfig into HTML pages. Components (navigation, social links,
headline effect, footer) are rendered first and handed to the page templates
as already-escaped markup, the same way every page receives them.
"""

import random
from typing import Callable, Dict, Optional

from jinja2 import TemplateError
from markupsafe import Markup

from folio.contexts.content.data_structures import HeadlineSettings, SiteConfig
from folio.contexts.effects.matrix_text import MatrixText
from folio.contexts.templating.exceptions import PageRenderError
from folio.contexts.templating.logger import _log_error, log_page_rendered
from folio.contexts.templating.registries import TemplateRegistry


class SiteToHTMLConverter:
    """Renders the pages of the site from a loaded SiteConfig."""

    def __init__(
        self,
        config: SiteConfig,
        template_registry: Optional[TemplateRegistry] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.template_registry = template_registry or TemplateRegistry()
        self.rng = rng

        # Page name -> generator; output paths are decided by the rendering context
        self.page_generators: Dict[str, Callable[[], str]] = {
            "home": self.generate_home,
            "about": self.generate_about,
        }

    def _render(self, name: str, page_name: str, **context) -> str:
        template_path = self.template_registry.get_template_path(name)
        try:
            template = self.template_registry.get_template(name)
            return template.render(**context)
        except TemplateError as e:
            _log_error(f"Failed to render {name} for page {page_name}: {e}")
            raise PageRenderError(
                f"Failed to render '{name}'",
                page_name=page_name,
                template_path=template_path,
                original_error=e,
            ) from e

    def convert_navigation(self) -> Markup:
        """
        Render the navigation bar.

        Returns:
            Markup with one <a> per navigation entry, in config order
        """
        html = self._render(
            "components/navigation", "navigation", entries=self.config.navigation
        )
        return Markup(html)

    def convert_socials(self) -> Markup:
        """
        Render the social links.

        Returns:
            Markup with one <a> per social entry, in config order
        """
        html = self._render("components/socials", "socials", entries=self.config.socials)
        return Markup(html)

    def convert_matrix_text(self, headline: HeadlineSettings, css_class: str = "") -> Markup:
        """
        Render the text-reveal headline.

        Each character gets a staggered CSS reveal taken from the effect's
        schedule: it starts scrambling one delay before its resolve time and
        settles at the resolve time.

        Args:
            headline: Target text, delay and glyph styling
            css_class: Extra classes for the headline element

        Returns:
            Markup for the headline element
        """
        effect = MatrixText(
            headline.text,
            delay_ms=headline.delay_ms,
            glyph_interval_ms=headline.glyph_interval_ms,
            rng=self.rng,
        )
        html = self._render(
            "components/matrix_text",
            "matrix_text",
            text=headline.text,
            delay_ms=effect.delay_ms,
            glyph_class=headline.glyph_class,
            css_class=css_class,
            steps=effect.reveal_schedule(),
        )
        return Markup(html)

    def convert_footer(self) -> Markup:
        """Render the footer attribution link."""
        html = self._render("components/footer", "footer", footer=self.config.site.footer)
        return Markup(html)

    def _page_context(self) -> dict:
        """Context shared by every page (shell metadata and chrome)."""
        return {
            "site": self.config.site,
            "personal": self.config.personal,
            "navigation_html": self.convert_navigation(),
            "socials_html": self.convert_socials(),
        }

    def generate_home(self) -> str:
        """
        Generate the home page: text-reveal headline plus footer attribution.

        Returns:
            Complete HTML document string
        """
        html = self._render(
            "pages/home",
            "home",
            headline_html=self.convert_matrix_text(self.config.site.headline),
            footer_html=self.convert_footer(),
            **self._page_context(),
        )
        log_page_rendered("home", "pages/home", len(html))
        return html

    def generate_about(self) -> str:
        """
        Generate the about page from every remaining config group.

        Returns:
            Complete HTML document string
        """
        config = self.config
        html = self._render(
            "pages/about",
            "about",
            hero=config.hero,
            stats=config.stats,
            skills=config.skills,
            experience=config.experience,
            projects=config.projects,
            awards=config.awards,
            technologies=config.technologies,
            cta=config.cta,
            education=config.education,
            footer_html=self.convert_footer(),
            **self._page_context(),
        )
        log_page_rendered("about", "pages/about", len(html))
        return html

    def generate_page(self, page_name: str) -> str:
        """
        Generate a page by name.

        Raises:
            ValueError: If page_name is unknown
            PageRenderError: If the template fails to render
        """
        if page_name not in self.page_generators:
            raise ValueError(
                f"Unknown page '{page_name}'. Available pages: {list(self.page_generators)}"
            )
        return self.page_generators[page_name]()
