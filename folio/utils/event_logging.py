"""
Build event logging utilities for FOLIO (Tier 2 logging).

Appends one JSON object per build to build_events.log so past builds can be
listed without digging through the detailed per-build logs.

For detailed within-context logging (Tier 1), use folio.utils.logger instead.

Usage:
    from folio.utils.event_logging import log_build_event, get_recent_events

    log_build_event(
        event_type="build_completed",
        source="cli",
        pages=["index.html", "about/index.html"],
        build_time_s=0.12,
    )

    events = get_recent_events(5, event_type="build_failed")
"""

import json
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from folio.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
BUILD_EVENTS_FILE = Path(os.getenv("BUILD_EVENTS_FILE", str(LOGS_PATH / "build_events.log")))


def log_build_event(
    event_type: str, source: str, events_file: Optional[Path] = None, **extra_fields
) -> None:
    """
    Log an event to the build event log.

    Events are appended in JSON Lines format (one JSON object per line), which
    keeps the log streamable and easy to filter by event_type or source.

    Args:
        event_type: Type of event (e.g., "build_started", "build_completed", "build_failed")
        source: Event source (e.g., "cli", "rendering")
        events_file: Override the log location (defaults to BUILD_EVENTS_FILE)
        **extra_fields: Additional event-specific fields
    """
    events_file = Path(events_file) if events_file else BUILD_EVENTS_FILE
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10, event_type: Optional[str] = None, events_file: Optional[Path] = None
) -> List[dict]:
    """
    Get the last n events from the build log, optionally filtered by type.

    Args:
        n: Number of recent events to return (default: 10)
        event_type: Filter to only events of this type (optional)
        events_file: Override the log location (defaults to BUILD_EVENTS_FILE)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = Path(events_file) if events_file else BUILD_EVENTS_FILE
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
