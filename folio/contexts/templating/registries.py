"""
Templating Registries

Loading and caching of the Jinja2 page and component templates.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    select_autoescape,
)

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("TEMPLATES_PATH", str(Path(__file__).resolve().parent / "template"))
)
TEMPLATE_SUFFIX = ".html.jinja"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates live under TEMPLATES_PATH as {name}.html.jinja, where name is a
    slash-separated path such as "pages/home" or "components/navigation".
    Page templates extend "structure/page_shell.html.jinja".
    """

    def __init__(self, templates_base_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_base_path: Root directory of the templates. Defaults to
                TEMPLATES_PATH from environment
        """
        if templates_base_path is None:
            templates_base_path = TEMPLATES_PATH

        self.templates_base_path = Path(templates_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_base_path)),
            # Catches silent failures (typo'd config fields)
            undefined=StrictUndefined,
            autoescape=select_autoescape(
                enabled_extensions=("html", "jinja"), default_for_string=True
            ),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without suffix (e.g., 'pages/home')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_path = f"{name}{TEMPLATE_SUFFIX}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_base_path / template_path}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """File path for a template name."""
        return self.templates_base_path / f"{name}{TEMPLATE_SUFFIX}"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._cache
