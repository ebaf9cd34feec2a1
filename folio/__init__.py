"""
FOLIO - a static portfolio site generator

Renders a hand-authored content config (profile, skills, experience,
projects, ...) into a small static website.

Architecture:
- Content Context: Loading and validating the site config
- Templating Context: Jinja2 page templates and HTML generation
- Effects Context: Text-reveal ("matrix") animation used by the headline
- Rendering Context: Writing pages and assets to the output directory
"""

__version__ = "0.1.0"
