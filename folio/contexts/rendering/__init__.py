"""
Rendering Context

Responsibilities:
- Writes rendered pages and static assets to the output directory
- Checks navigation routes and local asset references
- Records each build in the build event log

Owns: Output directory layout, build logs
Never: Modifies the site config or templates
"""

from folio.contexts.rendering.site_builder import PAGE_OUTPUTS, BuildResult, build_site

__all__ = ["PAGE_OUTPUTS", "BuildResult", "build_site"]
