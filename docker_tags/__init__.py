"""docker-tags — list the tags of a Docker Hub image."""

from importlib.metadata import version

__version__ = version("docker-tags")
