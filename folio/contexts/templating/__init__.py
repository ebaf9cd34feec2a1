"""
Templating Context

Responsibilities:
- Manages the Jinja2 page shell, page and component templates
- Renders SiteConfig records into HTML pages

Owns: Templates and markup
Never: Writes files or validates content
"""

from folio.contexts.templating.exceptions import PageRenderError
from folio.contexts.templating.html_generator import SiteToHTMLConverter
from folio.contexts.templating.registries import TemplateRegistry

__all__ = ["PageRenderError", "SiteToHTMLConverter", "TemplateRegistry"]
