"""Inputs shared by every template."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from dev_nerves.core.config import Configuration
from dev_nerves.core.settings import DevNervesSettings


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class ArtifactContext:
    """Everything a template may read. Templates never touch the disk."""
    project_name: str
    configuration: Configuration
    settings: DevNervesSettings = field(default_factory=DevNervesSettings)
    generated_on: date = field(default_factory=utc_today)

    @property
    def target(self) -> str:
        return self.configuration.target
