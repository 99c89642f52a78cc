"""Static configuration for docker-tags."""

from __future__ import annotations

from dataclasses import dataclass, field

from docker_tags import __version__

# Image name that makes the Docker CLI ask a plugin for its metadata.
PLUGIN_METADATA_COMMAND = "docker-cli-plugin-metadata"

# Leading token the Docker CLI passes when running us as ``docker tags``.
PLUGIN_SUBCOMMAND = "tags"


@dataclass(frozen=True)
class PluginMetadata:
    """Answer to the Docker CLI plugin discovery handshake."""

    schema_version: str = "0.1.0"
    vendor: str = "docker-tags contributors"
    version: str = __version__
    short_description: str = "List the tags of a Docker Hub image"

    def to_dict(self) -> dict[str, str]:
        return {
            "SchemaVersion": self.schema_version,
            "Vendor": self.vendor,
            "Version": self.version,
            "ShortDescription": self.short_description,
        }


@dataclass(frozen=True)
class Settings:
    """Run-wide settings, built once and handed to each component.

    Attributes:
        registry_url: Base URL of the Docker Hub repositories API.
        page_size: Tags requested per page (100 is the Docker Hub maximum).
        probe_page_size: Page size of the request used only to learn the
            total tag count.
        timeout: HTTP request timeout in seconds.
        max_workers: Upper bound on concurrent page requests.
        metadata: Docker CLI plugin metadata.
    """

    registry_url: str = "https://registry.hub.docker.com/v2/repositories"
    page_size: int = 100
    probe_page_size: int = 1
    timeout: int = 30
    max_workers: int = 10
    metadata: PluginMetadata = field(default_factory=PluginMetadata)


DEFAULT_SETTINGS = Settings()
