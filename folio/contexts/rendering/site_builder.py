"""
Site Build Module

Writes the rendered pages and static assets to the output directory and
checks the result for links to unbuilt routes or missing anchors and missing local assets.
"""

import os
import re
import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from dotenv import load_dotenv

from folio.contexts.content import ContentValidationError, SiteConfig, load_site_config
from folio.contexts.content.loader import CONTENT_PATH
from folio.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_build_result,
    log_build_start,
    setup_rendering_logger,
)
from folio.contexts.templating import PageRenderError, SiteToHTMLConverter
from folio.utils.event_logging import log_build_event
from folio.utils.timestamp import now

load_dotenv()
PACKAGE_ROOT = Path(__file__).resolve().parents[2]
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/site"))
STATIC_PATH = Path(os.getenv("STATIC_PATH", str(PACKAGE_ROOT / "data" / "static")))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

# Page name -> output file, relative to the output directory
PAGE_OUTPUTS = {
    "home": "index.html",
    "about": "about/index.html",
}

ANCHOR_ID_PATTERN = re.compile(r'\bid="([^"]+)"')


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        success: Whether every page was rendered and written
        output_dir: Directory the site was written to
        pages: Written page files, relative to output_dir
        assets: Copied static files, relative to output_dir
        errors: Fatal problems (config, templates)
        warnings: Non-fatal problems (dangling routes, missing assets)
        log_dir: Directory holding this build's detailed log
        build_time_s: Elapsed time
    """

    success: bool
    output_dir: Optional[Path] = None
    pages: List[str] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    log_dir: Optional[Path] = None
    build_time_s: float = 0.0


def route_for_page(page_file: str) -> str:
    """URL route served by a page file ("about/index.html" -> "/about/")."""
    if page_file == "index.html":
        return "/"
    if page_file.endswith("/index.html"):
        return "/" + page_file[: -len("index.html")]
    return "/" + page_file


def _is_local(path: str) -> bool:
    return path.startswith("/") and not path.startswith("//")


def _normalize_route(path: str) -> str:
    route = path or "/"
    if not route.endswith("/") and "." not in route.rsplit("/", 1)[-1]:
        route += "/"
    return route


def anchor_ids(html: str) -> Set[str]:
    """Element ids on a rendered page, i.e. the fragments it can resolve."""
    return set(ANCHOR_ID_PATTERN.findall(html))


def internal_links(config: SiteConfig) -> List[Tuple[str, str]]:
    """(label, path) for every link a page renders that may point inside the site."""
    links = [(f"Navigation entry '{entry.name}'", entry.path) for entry in config.navigation]
    links.append(("Hero call-to-action", config.hero.cta.link))
    links.append(("Call-to-action button", config.cta.button.link))
    return [(label, path) for label, path in links if _is_local(path)]


def check_internal_links(config: SiteConfig, built_pages: Dict[str, str]) -> List[str]:
    """
    Warn about internal links no built page can serve.

    Args:
        config: Loaded site config
        built_pages: Route -> rendered HTML for every page written

    Returns:
        Warnings for links to unbuilt routes and for fragments ("/about/#hire")
        whose id is missing from the target page
    """
    warnings = []
    for label, path in internal_links(config):
        route, _, fragment = path.partition("#")
        route = _normalize_route(route)
        if route not in built_pages:
            warnings.append(f"{label} points to unbuilt route {path}")
        elif fragment and fragment not in anchor_ids(built_pages[route]):
            warnings.append(f"{label} points to missing anchor {path}")
    return warnings


def check_local_assets(config: SiteConfig, output_dir: Path) -> List[str]:
    """Warn about referenced local assets that are not present in the output (they would 404)."""
    referenced = {
        "favicon": config.site.favicon,
        "stylesheet": config.site.stylesheet,
        "footer logo": config.site.footer.logo,
    }
    warnings = []
    for label, path in referenced.items():
        if _is_local(path) and not (output_dir / path.lstrip("/")).exists():
            warnings.append(f"Missing {label} asset: {path}")
    return warnings


def copy_static_assets(static_dir: Path, output_dir: Path) -> List[str]:
    """
    Copy static files verbatim into the output directory.

    Returns:
        Copied files, relative to output_dir (empty if static_dir doesn't exist)
    """
    if not static_dir.exists():
        _log_debug(f"No static directory at {static_dir}")
        return []

    copied = []
    for source in sorted(static_dir.rglob("*")):
        if source.is_dir():
            continue
        relative = source.relative_to(static_dir)
        destination = output_dir / relative
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        copied.append(relative.as_posix())
    return copied


def write_pages(rendered: Dict[str, str], output_dir: Path) -> List[str]:
    """Write rendered HTML (page file -> content) under output_dir."""
    written = []
    for page_file, html in rendered.items():
        destination = output_dir / page_file
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(html, encoding="utf-8")
        written.append(page_file)
    return written


def _clean_output_dir(output_dir: Path) -> None:
    resolved = output_dir.resolve()
    cwd = Path.cwd().resolve()
    # Never remove the working directory or one of its parents
    if resolved == cwd or resolved in cwd.parents:
        raise ValueError(f"Refusing to clean {resolved}: it contains the working directory")
    shutil.rmtree(resolved)


def build_site(
    content_path: Union[str, Path, None] = None,
    output_dir: Union[str, Path, None] = None,
    static_dir: Union[str, Path, None] = None,
    clean: bool = False,
    verbose: bool = False,
    log_dir: Optional[Path] = None,
    source: str = "cli",
    console_logging: bool = True,
    events_file: Optional[Path] = None,
) -> BuildResult:
    """
    Build the static site.

    Loads the site config once, renders every page, writes pages and static
    assets to output_dir, and records the build in the event log.

    Config and template problems do not raise: they end the build early and
    are returned in BuildResult.errors.

    Args:
        content_path: Site config YAML (default: CONTENT_PATH)
        output_dir: Output directory (default: OUTPUT_PATH)
        static_dir: Static assets to copy (default: STATIC_PATH)
        clean: Remove output_dir before writing
        verbose: Log every warning
        log_dir: Directory for this build's log (default: timestamped dir under LOGS_PATH)
        source: Event source recorded in the build event log
        console_logging: Also log to stdout
        events_file: Build event log (default: BUILD_EVENTS_FILE)

    Returns:
        BuildResult with success status and diagnostics
    """
    content_path = Path(content_path) if content_path is not None else CONTENT_PATH
    output_dir = Path(output_dir) if output_dir is not None else OUTPUT_PATH
    static_dir = Path(static_dir) if static_dir is not None else STATIC_PATH
    log_dir = Path(log_dir) if log_dir is not None else LOGS_PATH / f"build_{now()}"

    setup_rendering_logger(log_dir, content_path=content_path, console=console_logging)
    log_build_start(content_path, output_dir)
    log_build_event(
        "build_started",
        source,
        events_file=events_file,
        content_path=str(content_path),
        output_dir=str(output_dir),
    )

    start_time = time.time()
    result = BuildResult(success=False, output_dir=output_dir, log_dir=log_dir)

    try:
        config = load_site_config(content_path)
        converter = SiteToHTMLConverter(config)
        rendered = {
            page_file: converter.generate_page(page_name)
            for page_name, page_file in PAGE_OUTPUTS.items()
        }
    except (FileNotFoundError, ContentValidationError, PageRenderError) as e:
        result.errors.append(str(e))
        result.build_time_s = time.time() - start_time
        log_build_result(result, result.build_time_s, verbose=verbose)
        log_build_event(
            "build_failed",
            source,
            events_file=events_file,
            build_time_s=round(result.build_time_s, 3),
            errors=result.errors[:5],
        )
        return result

    if clean and output_dir.exists():
        _log_info(f"Cleaning {output_dir}")
        try:
            _clean_output_dir(output_dir)
        except ValueError as e:
            log_build_event(
                "build_failed",
                source,
                events_file=events_file,
                build_time_s=round(time.time() - start_time, 3),
                errors=[str(e)],
            )
            raise
    output_dir.mkdir(parents=True, exist_ok=True)

    result.assets = copy_static_assets(static_dir, output_dir)
    result.pages = write_pages(rendered, output_dir)
    _log_debug(f"Copied {len(result.assets)} static assets")

    built_pages = {route_for_page(page): rendered[page] for page in result.pages}
    result.warnings.extend(check_internal_links(config, built_pages))
    result.warnings.extend(check_local_assets(config, output_dir))

    result.success = True
    result.build_time_s = time.time() - start_time
    log_build_result(result, result.build_time_s, verbose=verbose)
    log_build_event(
        "build_completed",
        source,
        events_file=events_file,
        build_time_s=round(result.build_time_s, 3),
        output_dir=str(output_dir),
        pages=result.pages,
        warning_count=len(result.warnings),
    )
    return result
