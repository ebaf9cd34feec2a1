"""
Site Config Loader

Loads the YAML site config with OmegaConf, resolves field reuse
(e.g., socials reusing ${personal.email}), validates it and builds the
read-only SiteConfig records.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from folio.contexts.content.data_structures import SiteConfig
from folio.contexts.content.exceptions import ContentValidationError
from folio.contexts.content.logger import _log_warning, log_config_loaded
from folio.contexts.content.validator import unknown_groups, validate_site_config

load_dotenv()
PACKAGE_ROOT = Path(__file__).resolve().parents[2]
CONTENT_PATH = Path(os.getenv("CONTENT_PATH", str(PACKAGE_ROOT / "data" / "site_config.yaml")))


def load_config_dict(config_path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Load and resolve the site config YAML into a plain dict, without validation.

    Args:
        config_path: Path to YAML config (defaults to CONTENT_PATH)

    Returns:
        Plain dict with all interpolations resolved

    Raises:
        FileNotFoundError: If config_path does not exist
        ContentValidationError: If the YAML cannot be parsed or an interpolation
            points at a field that doesn't exist
    """
    config_path = Path(config_path) if config_path is not None else CONTENT_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Site config not found: {config_path}")

    try:
        conf = OmegaConf.load(config_path)
        data = OmegaConf.to_container(conf, resolve=True)
    except OmegaConfBaseException as e:
        raise ContentValidationError([str(e)], source_path=config_path) from e

    if not isinstance(data, dict):
        raise ContentValidationError(
            [f"<root>: expected a mapping, got {type(data).__name__}"], source_path=config_path
        )
    return data


def load_site_config(config_path: Union[str, Path, None] = None) -> SiteConfig:
    """
    Load, validate and build the site config.

    Args:
        config_path: Path to YAML config (defaults to CONTENT_PATH)

    Returns:
        SiteConfig instance

    Raises:
        FileNotFoundError: If config_path does not exist
        ContentValidationError: If any group or required display field is missing or empty

    Example:
        config = load_site_config()
        config.personal.name        # "Juan"
        config.socials[2].link      # same value as config.personal.email
    """
    config_path = Path(config_path) if config_path is not None else CONTENT_PATH
    data = load_config_dict(config_path)

    validate_site_config(data, source_path=config_path)

    for group in unknown_groups(data):
        _log_warning(f"Ignoring unknown config group: {group}")

    config = SiteConfig.from_dict(data)
    log_config_loaded(config_path, config)
    return config


def site_config_from_dict(data: Dict[str, Any], source_path: Optional[Path] = None) -> SiteConfig:
    """Validate an in-memory config dict (already resolved) and build a SiteConfig."""
    validate_site_config(data, source_path=source_path)
    return SiteConfig.from_dict(data)
