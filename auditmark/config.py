"""Configuration for auditmark.

Loads settings from environment variables with sensible defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from auditmark.errors import ConfigurationError
from auditmark.regions.models import RegionGrouping

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

DEFAULT_FILE_EXTENSION = ".weaudit"


def parse_region_grouping(value: str) -> RegionGrouping:
    try:
        return RegionGrouping(value.strip().lower())
    except ValueError:
        choices = ", ".join(g.value for g in RegionGrouping)
        raise ConfigurationError(
            f"Unsupported region grouping {value!r} (expected one of: {choices})"
        ) from None


@dataclass
class AuditmarkConfig:
    """Top-level configuration."""
    log_level: str = "INFO"
    region_grouping: RegionGrouping = RegionGrouping.PATH_AND_AUTHOR
    file_extension: str = DEFAULT_FILE_EXTENSION

    @classmethod
    def from_env(cls) -> "AuditmarkConfig":
        extension = os.getenv("AUDITMARK_FILE_EXTENSION", DEFAULT_FILE_EXTENSION)
        if not extension.startswith("."):
            extension = "." + extension
        return cls(
            log_level=os.getenv("AUDITMARK_LOG_LEVEL", "INFO").upper(),
            region_grouping=parse_region_grouping(
                os.getenv("AUDITMARK_REGION_GROUPING", RegionGrouping.PATH_AND_AUTHOR.value)
            ),
            file_extension=extension,
        )


def configure_logging(config: AuditmarkConfig | None = None) -> None:
    """Configure the root logger from ``config`` (or the environment)."""
    config = config or AuditmarkConfig.from_env()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
