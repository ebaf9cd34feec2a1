"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup with provenance
- Build event log
- Timestamps
"""

from folio.utils.timestamp import format_timestamp, now, now_exact

__all__ = ["format_timestamp", "now", "now_exact"]
