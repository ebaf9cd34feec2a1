"""
Content context logger.

Provides logging interface for the content context with automatic [content] prefix.
All content modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[content]"


def _log_info(message: str) -> None:
    """Log info message with [content] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [content] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [content] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_config_loaded(config_path: Path, config) -> None:
    """Log a summary of a freshly loaded SiteConfig."""
    _log_info(f"Loaded site config: {config_path}")
    _log_debug(
        f"  {len(config.skills)} skills, {len(config.experience)} experience entries, "
        f"{len(config.projects)} projects, {len(config.awards)} awards"
    )
    _log_debug(
        f"  {len(config.technologies)} technologies, {len(config.navigation)} navigation "
        f"entries, {len(config.socials)} social links"
    )
