"""Custom exceptions for the content context."""

from pathlib import Path
from typing import List, Optional


class ContentValidationError(ValueError):
    """
    Raised when the site config is missing a group or a required display field.

    Attributes:
        problems: One entry per offending path (e.g., "skills[2].name: missing")
        source_path: Config file the problems were found in, when known
    """

    def __init__(self, problems: List[str], source_path: Optional[Path] = None):
        self.problems = list(problems)
        self.source_path = source_path

        header = f"Invalid site config ({len(self.problems)} problem(s))"
        if source_path is not None:
            header += f" in {source_path}"
        super().__init__("\n".join([header + ":"] + [f"  - {p}" for p in self.problems]))
