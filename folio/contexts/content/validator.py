"""
Site config validation.

Checks that every group the templates read is present and that every
required display field is a non-empty string. All problems are collected
and reported together so an author can fix the config in one pass.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from folio.contexts.content.exceptions import ContentValidationError

# Record groups: dotted paths of required display fields
RECORD_FIELDS = {
    "site": ["title", "favicon", "headline.text", "footer.text", "footer.link", "footer.logo"],
    "personal": [
        "name",
        "nickname",
        "title",
        "tagline",
        "email",
        "phone",
        "location",
        "website",
        "github",
        "linkedin",
    ],
    "hero": [
        "headline.line1",
        "headline.line2",
        "headline.highlight",
        "description",
        "cta.text",
        "cta.link",
    ],
    "cta": ["title", "description", "button.text", "button.link"],
    "education": ["institution", "degree", "period"],
}

# List groups: required display fields of each entry
LIST_FIELDS = {
    "stats": ["name", "value"],
    "skills": ["name", "desc"],
    "experience": ["role", "company", "period"],
    "projects": ["name", "desc", "link"],
    "awards": ["title", "event", "description"],
    "navigation": ["name", "path"],
    "socials": ["icon", "link"],
}

# Plain lists of labels
LABEL_LISTS = ["technologies"]

KNOWN_GROUPS = set(RECORD_FIELDS) | set(LIST_FIELDS) | set(LABEL_LISTS)


def _is_display_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _lookup(data: Any, dotted_path: str) -> Any:
    """Follow a dotted path through nested dicts; None if any step is missing."""
    for key in dotted_path.split("."):
        if not isinstance(data, dict) or key not in data:
            return None
        data = data[key]
    return data


def _check_fields(record: Any, required: List[str], prefix: str, problems: List[str]) -> None:
    if not isinstance(record, dict):
        problems.append(f"{prefix}: expected a mapping, got {type(record).__name__}")
        return
    for field_path in required:
        value = _lookup(record, field_path)
        if value is None:
            problems.append(f"{prefix}.{field_path}: missing")
        elif not _is_display_string(value):
            problems.append(f"{prefix}.{field_path}: must be a non-empty string")


def _check_headline_timing(site: Dict[str, Any], problems: List[str]) -> None:
    headline = site.get("headline") if isinstance(site, dict) else None
    if not isinstance(headline, dict):
        return
    for key in ("delay_ms", "glyph_interval_ms"):
        if key not in headline:
            continue
        value = headline[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            problems.append(f"site.headline.{key}: must be a positive integer")


def find_problems(data: Dict[str, Any]) -> List[str]:
    """
    Collect every validation problem in a resolved config dict.

    Args:
        data: Resolved config (plain dict, interpolations already applied)

    Returns:
        List of "path: reason" strings, empty when the config is valid
    """
    problems = []

    if not isinstance(data, dict):
        return [f"<root>: expected a mapping, got {type(data).__name__}"]

    for group, required in RECORD_FIELDS.items():
        if group not in data:
            problems.append(f"{group}: missing")
            continue
        _check_fields(data[group], required, group, problems)

    for group, required in LIST_FIELDS.items():
        items = data.get(group)
        if items is None:
            problems.append(f"{group}: missing")
            continue
        if not isinstance(items, list):
            problems.append(f"{group}: expected a list, got {type(items).__name__}")
            continue
        for i, item in enumerate(items):
            _check_fields(item, required, f"{group}[{i}]", problems)

    for group in LABEL_LISTS:
        labels = data.get(group)
        if labels is None:
            problems.append(f"{group}: missing")
            continue
        if not isinstance(labels, list):
            problems.append(f"{group}: expected a list, got {type(labels).__name__}")
            continue
        for i, label in enumerate(labels):
            if not _is_display_string(label):
                problems.append(f"{group}[{i}]: must be a non-empty string")

    # Highlights are optional, but present ones must be displayable
    for i, entry in enumerate(data.get("experience") or []):
        if not isinstance(entry, dict):
            continue
        highlights = entry.get("highlights") or []
        if not isinstance(highlights, list):
            problems.append(f"experience[{i}].highlights: expected a list")
            continue
        for j, highlight in enumerate(highlights):
            if not _is_display_string(highlight):
                problems.append(f"experience[{i}].highlights[{j}]: must be a non-empty string")

    _check_headline_timing(data.get("site"), problems)

    return problems


def validate_site_config(data: Dict[str, Any], source_path: Optional[Path] = None) -> None:
    """
    Validate a resolved config dict.

    Raises:
        ContentValidationError: If any group or required display field is missing or empty
    """
    problems = find_problems(data)
    if problems:
        raise ContentValidationError(problems, source_path=source_path)


def unknown_groups(data: Dict[str, Any]) -> List[str]:
    """Top-level keys the templates never read."""
    return sorted(key for key in data if key not in KNOWN_GROUPS)
