"""Runtime configuration helpers."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

# CPU usage is derived from two snapshots taken this many seconds apart.
SAMPLE_INTERVAL_SECONDS = 1.0


def resolve_disk_path() -> str:
    """Return the root path whose filesystem is reported as "disk"."""
    override = os.getenv("HOST_METRICS_DISK_PATH")
    if override:
        return os.path.abspath(os.path.expanduser(override))
    if os.name == "nt":
        return os.getenv("SystemDrive", "C:") + "\\"
    return "/"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 5001
    log_level: str = "info"
    disk_path: str = field(default_factory=resolve_disk_path)
    sample_interval: float = SAMPLE_INTERVAL_SECONDS


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    host = os.getenv("HOST_METRICS_HOST", "0.0.0.0")
    port = int(os.getenv("HOST_METRICS_PORT", "5001"))
    log_level = os.getenv("HOST_METRICS_LOG_LEVEL", "info").lower()
    return Settings(host=host, port=port, log_level=log_level, disk_path=resolve_disk_path())


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(message)s")
