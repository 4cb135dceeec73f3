"""Core data models and configuration.

This package provides:
- Data models (RawLog)
- Configuration classes (ParseConfig)
"""

from keyed_events.core.config import ParseConfig
from keyed_events.core.models import RawLog

__all__ = [
    "ParseConfig",
    "RawLog",
]
