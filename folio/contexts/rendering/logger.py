"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, content_path: Optional[Path] = None, console: bool = True
) -> Path:
    """
    Setup logger for a site build.

    Args:
        log_dir: Directory for this build session
        content_path: Site config being built (recorded in the provenance header)
        console: Also log to stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        extra_provenance={"Content": content_path},
        console=console,
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_build_start(content_path: Path, output_dir: Path) -> None:
    """Log start of a build with context."""
    _log_info(f"Building site into {output_dir}")
    _log_debug(f"  Content: {content_path}")


def log_build_result(result, elapsed_time: float, verbose: bool = False) -> None:
    """
    Log build result with diagnostics.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken to build
        verbose: Show every warning instead of the first few
    """
    if result.success:
        _log_success(f"Build succeeded: {len(result.pages)} pages ({elapsed_time:.2f}s)")
        for page in result.pages:
            _log_debug(f"  Page: {page}")
    else:
        _log_error(f"Build failed: {len(result.errors)} errors ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")

    if result.warnings:
        _log_warning(f"{len(result.warnings)} warnings detected")
        warning_limit = len(result.warnings) if verbose else 5
        for i, warn in enumerate(result.warnings[:warning_limit], 1):
            _log_warning(f"  Warning {i}: {warn}")
        if len(result.warnings) > warning_limit:
            _log_warning(f"  ... and {len(result.warnings) - warning_limit} more warnings")
