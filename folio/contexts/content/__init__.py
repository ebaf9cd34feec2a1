"""
Content Context

Responsibilities:
- Loads the hand-authored site config (YAML, OmegaConf interpolation)
- Validates that every required display field is present and non-empty
- Exposes the config as read-only records

Owns: Site config schema and records
Never: Produces markup
"""

from folio.contexts.content.data_structures import (
    AwardEntry,
    CallToAction,
    Education,
    ExperienceEntry,
    Hero,
    NavigationEntry,
    Profile,
    ProjectEntry,
    SiteConfig,
    SiteSettings,
    SkillEntry,
    SocialEntry,
    Stat,
)
from folio.contexts.content.exceptions import ContentValidationError
from folio.contexts.content.loader import load_config_dict, load_site_config, site_config_from_dict
from folio.contexts.content.validator import find_problems, validate_site_config

__all__ = [
    # Loading
    "load_site_config",
    "load_config_dict",
    "site_config_from_dict",
    "validate_site_config",
    "find_problems",
    "ContentValidationError",
    # Records
    "SiteConfig",
    "SiteSettings",
    "Profile",
    "Hero",
    "Stat",
    "SkillEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "AwardEntry",
    "NavigationEntry",
    "SocialEntry",
    "CallToAction",
    "Education",
]
