from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ParseConfig:
    """Configuration for the `parse` CLI command."""

    abi_path: Path
    logs_path: Path
    out_path: Path | None = None  # None → stdout
    skip_errors: bool = False  # log-and-skip failing logs instead of aborting
    log_level: str = "WARNING"
