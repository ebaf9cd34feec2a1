"""
Site Content Structure

Read-only records for every group of the site config. The records carry
display strings only; nothing here parses, computes or defaults values
beyond what the YAML already resolved (e.g., ${personal.github}).

Instances are built by the loader after validation, so constructors assume
required fields are present.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple


def _record(cls, data: Dict[str, Any]):
    """
    Build a flat record from a dict, ignoring keys the record doesn't define.

    Null values count as absent, so optional fields keep their defaults.
    """
    return cls(**{f.name: data[f.name] for f in fields(cls) if data.get(f.name) is not None})


@dataclass(frozen=True)
class Link:
    """A labeled link, e.g. a call-to-action button."""

    text: str
    link: str
    target: str = "_self"


@dataclass(frozen=True)
class FooterAttribution:
    text: str
    link: str
    logo: str
    logo_alt: str = ""


@dataclass(frozen=True)
class HeadlineSettings:
    """Literal string fed to the text-reveal effect on the home page."""

    text: str
    delay_ms: int = 800
    glyph_interval_ms: int = 50
    glyph_class: str = ""


@dataclass(frozen=True)
class SiteSettings:
    """Page metadata and home page chrome."""

    title: str
    favicon: str
    headline: HeadlineSettings
    footer: FooterAttribution
    stylesheet: str = "/styles.css"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteSettings":
        return cls(
            title=data["title"],
            favicon=data["favicon"],
            headline=_record(HeadlineSettings, data["headline"]),
            footer=_record(FooterAttribution, data["footer"]),
            stylesheet=data.get("stylesheet") or "/styles.css",
        )


@dataclass(frozen=True)
class Profile:
    name: str
    nickname: str
    title: str
    tagline: str
    email: str
    phone: str
    location: str
    website: str
    github: str
    linkedin: str


@dataclass(frozen=True)
class Headline:
    line1: str
    line2: str
    highlight: str


@dataclass(frozen=True)
class Hero:
    headline: Headline
    description: str
    cta: Link

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hero":
        return cls(
            headline=_record(Headline, data["headline"]),
            description=data["description"],
            cta=_record(Link, data["cta"]),
        )


@dataclass(frozen=True)
class Stat:
    name: str
    value: str


@dataclass(frozen=True)
class SkillEntry:
    name: str
    desc: str
    icon: str = ""


@dataclass(frozen=True)
class ExperienceEntry:
    role: str
    company: str
    period: str
    company_url: Optional[str] = None
    highlights: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        return cls(
            role=data["role"],
            company=data["company"],
            period=data["period"],
            company_url=data.get("company_url"),
            highlights=tuple(data.get("highlights") or ()),
        )


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    desc: str
    link: str
    cover: str = ""


@dataclass(frozen=True)
class AwardEntry:
    title: str
    event: str
    description: str
    certificate_url: Optional[str] = None
    icon: str = ""


@dataclass(frozen=True)
class NavigationEntry:
    name: str
    path: str
    target: str = "_self"


@dataclass(frozen=True)
class SocialEntry:
    icon: str
    link: str


@dataclass(frozen=True)
class CallToAction:
    title: str
    description: str
    button: Link

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CallToAction":
        return cls(
            title=data["title"],
            description=data["description"],
            button=_record(Link, data["button"]),
        )


@dataclass(frozen=True)
class Education:
    institution: str
    degree: str
    period: str
    gpa: str = ""
    thesis: str = ""


@dataclass(frozen=True)
class SiteConfig:
    """
    The complete, resolved site config.

    Every group is independently replaceable in the YAML; list order is
    display order.
    """

    site: SiteSettings
    personal: Profile
    hero: Hero
    stats: Tuple[Stat, ...]
    skills: Tuple[SkillEntry, ...]
    experience: Tuple[ExperienceEntry, ...]
    projects: Tuple[ProjectEntry, ...]
    awards: Tuple[AwardEntry, ...]
    technologies: Tuple[str, ...]
    navigation: Tuple[NavigationEntry, ...]
    socials: Tuple[SocialEntry, ...]
    cta: CallToAction
    education: Education

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteConfig":
        """
        Build a SiteConfig from a resolved, validated config dict.

        Args:
            data: Plain dict (OmegaConf.to_container(..., resolve=True))

        Returns:
            SiteConfig instance
        """
        return cls(
            site=SiteSettings.from_dict(data["site"]),
            personal=_record(Profile, data["personal"]),
            hero=Hero.from_dict(data["hero"]),
            stats=_records(Stat, data["stats"]),
            skills=_records(SkillEntry, data["skills"]),
            experience=tuple(ExperienceEntry.from_dict(e) for e in data["experience"]),
            projects=_records(ProjectEntry, data["projects"]),
            awards=_records(AwardEntry, data["awards"]),
            technologies=tuple(data["technologies"]),
            navigation=_records(NavigationEntry, data["navigation"]),
            socials=_records(SocialEntry, data["socials"]),
            cta=CallToAction.from_dict(data["cta"]),
            education=_record(Education, data["education"]),
        )


def _records(cls, items: List[Dict[str, Any]]) -> tuple:
    return tuple(_record(cls, item) for item in items)
