"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class PageRenderError(Exception):
    """
    Exception raised when a page or component template fails to render.

    Attributes:
        message: Error description
        page_name: Name of the page or component being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        page_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.page_name = page_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if page_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Page: {page_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
